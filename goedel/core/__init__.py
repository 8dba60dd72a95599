from .symbols import (
    SYMBOL_TABLE, ALPHABET, VARIABLES, QUANTIFIERS, BINARY_OPERATORS,
    symbol_code, code_symbol, verify_symbol_coverage,
    iter_primes, first_n_primes,
)
from .tokenize import tokenize
from .ast import (
    Atom, Successor, Unary, Binary, Quantifier, Node, EMPTY,
    children, fold, format_node, node_depth, flatten_node,
)
from .parse import (
    Parser, ParseError, UnexpectedToken, UnexpectedEndOfInput,
    parse, parse_formula,
)
from .encode import (
    EncodingItem, EncodingResult, PrimeExhausted, DecodeError,
    godel_encode, godel_decode, encoding_tree,
)
from .build import ConstructionStep, OPERATOR_NAMES, build_steps

__all__ = [
    "SYMBOL_TABLE", "ALPHABET", "VARIABLES", "QUANTIFIERS", "BINARY_OPERATORS",
    "symbol_code", "code_symbol", "verify_symbol_coverage",
    "iter_primes", "first_n_primes",
    "tokenize",
    "Atom", "Successor", "Unary", "Binary", "Quantifier", "Node", "EMPTY",
    "children", "fold", "format_node", "node_depth", "flatten_node",
    "Parser", "ParseError", "UnexpectedToken", "UnexpectedEndOfInput",
    "parse", "parse_formula",
    "EncodingItem", "EncodingResult", "PrimeExhausted", "DecodeError",
    "godel_encode", "godel_decode", "encoding_tree",
    "ConstructionStep", "OPERATOR_NAMES", "build_steps",
]
