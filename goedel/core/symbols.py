"""
Symbol table and prime supply.

The alphabet of the formal language, each symbol with a fixed positive
code, and the primes that carry those codes by position:

    gn(s1 s2 ... sn) = 2^code(s1) * 3^code(s2) * ... * p_n^code(sn)

Anything outside the alphabet has code 0 and contributes a factor of 1.
"""

from itertools import takewhile
from typing import Iterator


# --- Symbol table ---

SYMBOL_TABLE = {
    "∀": 1,
    "∃": 2,
    "¬": 3,
    "∨": 4,
    "∧": 5,
    "→": 6,
    "↔": 7,
    "=": 8,
    "+": 9,
    "*": 10,
    "(": 11,
    ")": 12,
    "0": 13,
    "S": 14,
    "x": 15,
    "y": 16,
    "z": 17,
}

ALPHABET = tuple(SYMBOL_TABLE)

VARIABLES = frozenset({"x", "y", "z"})
QUANTIFIERS = frozenset({"∀", "∃"})
BINARY_OPERATORS = frozenset({"+", "*", "∨", "∧", "→", "↔", "="})

_CODE_TO_SYMBOL = {code: sym for sym, code in SYMBOL_TABLE.items()}


def symbol_code(symbol: str) -> int:
    """Code of a symbol, or 0 if it is not in the alphabet."""
    return SYMBOL_TABLE.get(symbol, 0)


def code_symbol(code: int):
    """Inverse of symbol_code. Returns None for 0 or unassigned codes."""
    return _CODE_TO_SYMBOL.get(code)


def verify_symbol_coverage(formula: str) -> tuple:
    """
    Check which characters of a formula have an entry in the table.
    Returns (covered: set, missing: set). Whitespace counts as missing.
    """
    found = set(formula)
    covered = found & set(SYMBOL_TABLE)
    missing = found - set(SYMBOL_TABLE)
    return covered, missing


# --- Primes ---

def iter_primes() -> Iterator[int]:
    """Yield 2, 3, 5, 7, ... without bound (trial division by earlier primes)."""
    primes = []
    candidate = 2
    while True:
        if all(candidate % p != 0
               for p in takewhile(lambda p: p * p <= candidate, primes)):
            primes.append(candidate)
            yield candidate
        candidate += 1


def first_n_primes(n: int) -> list:
    """The first n primes, in order."""
    primes = []
    if n <= 0:
        return primes
    for p in iter_primes():
        primes.append(p)
        if len(primes) == n:
            break
    return primes
