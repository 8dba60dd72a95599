"""
Goedel: Gödel numbers and primitive recursive constructions for
formulas of Peano arithmetic.

A formula such as ∀x¬(Sx=0) goes through two independent pipelines:

    tokenize -> parse -> build_steps    the formula as a composition of
                                        zero, successor, projection,
                                        composition and minimization
    godel_encode                        the formula as 2^c1 * 3^c2 * ...

Usage:
    python -m goedel "∀x¬(Sx=0)"
    python -m goedel --example one_plus_one
    python -m goedel --all
    python -m goedel --list
"""

from .core.symbols import SYMBOL_TABLE, verify_symbol_coverage
from .core.tokenize import tokenize
from .core.ast import (
    Atom, Successor, Unary, Binary, Quantifier, format_node,
)
from .core.parse import (
    parse, parse_formula, ParseError, UnexpectedToken, UnexpectedEndOfInput,
)
from .core.encode import (
    EncodingItem, EncodingResult, PrimeExhausted, DecodeError,
    godel_encode, godel_decode, encoding_tree,
)
from .core.build import ConstructionStep, build_steps
from .analysis import Analysis, analyze, run_example_suite
from .formulas import FORMULAS, get_formula

__all__ = [
    "SYMBOL_TABLE", "verify_symbol_coverage",
    "tokenize",
    "Atom", "Successor", "Unary", "Binary", "Quantifier", "format_node",
    "parse", "parse_formula", "ParseError", "UnexpectedToken", "UnexpectedEndOfInput",
    "EncodingItem", "EncodingResult", "PrimeExhausted", "DecodeError",
    "godel_encode", "godel_decode", "encoding_tree",
    "ConstructionStep", "build_steps",
    "Analysis", "analyze", "run_example_suite",
    "FORMULAS", "get_formula",
]
