"""
Gödel encoding of formula strings.

Prime power encoding (Gödel's original):

    [s1, ..., sn]  ->  2^code(s1) * 3^code(s2) * ... * p_n^code(sn)

Encoding works on raw characters, not tokens: every character of the
input takes a position and a prime, including whitespace and symbols
outside the alphabet (which have code 0, so their factor is 1). The
result therefore does not depend on whether the formula parses.

Python ints are unbounded, so factors and products are exact at any
length. Uniqueness of the number is the Fundamental Theorem of
Arithmetic; godel_decode() inverts it by trial division.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .symbols import symbol_code, code_symbol, first_n_primes, iter_primes


class PrimeExhausted(IndexError):
    """The formula has more characters than the allowed prime supply."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Formula has {length} characters but only {max_length} primes are available"
        )
        self.length = length
        self.max_length = max_length


class DecodeError(ValueError):
    pass


def _to_decimal(n: int) -> str:
    """Decimal digits of n at any size (str() of an int is capped at 4300 digits)."""
    return str(Decimal(n))


def _from_decimal(digits: str) -> int:
    if not (digits.isascii() and digits.isdigit()):
        raise DecodeError(f"Not a Gödel number: {digits!r}")
    return int(Decimal(digits))


@dataclass(frozen=True)
class EncodingItem:
    """One character of the formula: prime ** code = factor."""
    symbol: str
    code: int
    prime: int
    factor: int

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "code": self.code,
            "prime": str(self.prime),
            "factor": str(self.factor),
        }


@dataclass(frozen=True)
class EncodingResult:
    """
    Per-character breakdown plus the product of all factors.

    godel_number is a decimal string, the form handed to displays;
    value is the same number as an int.
    """
    items: tuple
    godel_number: str

    @property
    def value(self) -> int:
        return _from_decimal(self.godel_number)

    def to_dict(self) -> dict:
        return {
            "encoding": [item.to_dict() for item in self.items],
            "godel_number": self.godel_number,
        }


def godel_encode(formula: str, max_length: Optional[int] = None) -> EncodingResult:
    """
    Encode a formula string as its Gödel number.

    Args:
        formula:    any string; characters outside the alphabet encode as 1
        max_length: size of the prime supply. None means primes are
                    generated as needed. If the formula is longer, the
                    whole operation is rejected with PrimeExhausted.

    Returns:
        EncodingResult with one EncodingItem per character, in order.
        The empty string encodes to "1".
    """
    if max_length is not None and len(formula) > max_length:
        raise PrimeExhausted(len(formula), max_length)

    primes = first_n_primes(len(formula))
    godel_number = 1
    items = []
    for symbol, prime in zip(formula, primes):
        code = symbol_code(symbol)
        factor = prime ** code
        godel_number *= factor
        items.append(EncodingItem(symbol, code, prime, factor))

    return EncodingResult(tuple(items), _to_decimal(godel_number))


def godel_decode(number, length: Optional[int] = None) -> list:
    """
    Recover the symbol sequence from a Gödel number.

    Divides out 2, 3, 5, ... in turn; the exponent of the i-th prime is
    the code of the i-th symbol. Positions with exponent 0 come back as
    None (a character outside the alphabet). Trailing such positions
    leave no trace in the number, so pass length to restore them.

        godel_decode(godel_encode("Sx").value)  ->  ["S", "x"]

    Raises DecodeError for numbers below 1 or exponents no symbol has.
    """
    n = _from_decimal(number.strip()) if isinstance(number, str) else int(number)
    if n < 1:
        raise DecodeError(f"Not a Gödel number: {number!r}")

    symbols = []
    for prime in iter_primes():
        if n == 1 and (length is None or len(symbols) >= length):
            break
        exponent = 0
        while n % prime == 0:
            n //= prime
            exponent += 1
        if exponent == 0:
            symbols.append(None)
            continue
        symbol = code_symbol(exponent)
        if symbol is None:
            raise DecodeError(
                f"Exponent {exponent} of prime {prime} is not a symbol code"
            )
        symbols.append(symbol)
    return symbols


def encoding_tree(result: EncodingResult) -> dict:
    """
    Nested {name, children} hierarchy for tree displays.

    Root "Gödel Number", one child per character, each with its prime,
    code and factor as leaves.
    """
    return {
        "name": "Gödel Number",
        "value": result.godel_number,
        "children": [
            {
                "name": item.symbol,
                "children": [
                    {"name": f"Prime: {item.prime}"},
                    {"name": f"Code: {item.code}"},
                    {"name": f"Factor: {item.factor}"},
                ],
            }
            for item in result.items
        ],
    }
