"""
Tokenizer: formula string -> list of symbols.

Every token is a single alphabet character. Whitespace and characters
outside the alphabet are dropped, not reported: the token list is the
sequence of recognized symbols, nothing more.
"""

from .symbols import SYMBOL_TABLE


def tokenize(formula: str) -> list:
    """
    Split a formula into tokens.

        tokenize("∀x (x = 0)")  ->  ["∀", "x", "(", "x", "=", "0", ")"]
        tokenize("#@")          ->  []
    """
    return [ch for ch in formula if ch in SYMBOL_TABLE]
