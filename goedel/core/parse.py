"""
Parser: tokens -> AST.

Grammar (two mutually recursive rules):

    Expression := Term (BinOp Term)*
    Term       := "(" Expression ")"
                | "¬" Term
                | ("∀" | "∃") <token> Expression
                | "S" Term
                | <token>                        -> Atom

All binary operators share ONE precedence level and associate to the
left, so x+y*z parses as (x+y)*z. Parenthesize to get anything else.

By default parsing is permissive: every token list, however malformed,
yields some tree. The closing ")" is consumed without being checked, a
quantifier binds whatever token follows it, and reading past the end
produces the empty atom Atom(""). Leftover tokens after the first
complete expression are ignored.

The descent runs on an explicit stack of frames instead of the call
stack, so nesting depth is bounded only by input length.

With strict=True the same grammar is enforced and the first violation
raises UnexpectedToken or UnexpectedEndOfInput.
"""

from .ast import Atom, Successor, Unary, Binary, Quantifier, EMPTY
from .symbols import VARIABLES, QUANTIFIERS, BINARY_OPERATORS
from .tokenize import tokenize


class ParseError(ValueError):
    """Malformed grammar, reported only in strict mode."""

    def __init__(self, message: str, position: int, token: str = None):
        super().__init__(f"{message} at token {position}")
        self.position = position
        self.token = token


class UnexpectedToken(ParseError):
    pass


class UnexpectedEndOfInput(ParseError):
    pass


class Parser:
    """One-shot parser over a token list. Use parse() instead."""

    def __init__(self, tokens, strict: bool = False):
        self.tokens = list(tokens)
        self.pos = 0
        self.strict = strict

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> str:
        """Consume one token. Past the end this yields "" and does not move."""
        token = self.peek()
        if token is None:
            if self.strict:
                raise UnexpectedEndOfInput("Unexpected end of input", self.pos)
            return ""
        self.pos += 1
        return token

    def expect(self, expected: str):
        token = self.peek()
        if self.strict and token is not None and token != expected:
            raise UnexpectedToken(
                f"Expected {expected!r}, found {token!r}", self.pos, token
            )
        return self.advance()

    def parse(self):
        root = self.expression()
        if self.strict and self.pos < len(self.tokens):
            token = self.tokens[self.pos]
            raise UnexpectedToken(f"Unexpected {token!r}", self.pos, token)
        return root

    def expression(self):
        """
        Parse one Expression with an explicit stack of pending frames.

        Frames, innermost last:
            _Chain        Term (BinOp Term)* collecting its left operand
            ("(",)        waiting for the closing paren
            ("¬",)        negation of the next term
            ("S",)        successor of the next term
            (kind, var)   quantifier over the next expression

        Nesting depth is limited by memory, not the call stack.
        """
        stack = [_Chain()]
        while True:
            node = self._prefixes(stack)
            while True:
                frame = stack[-1]
                if isinstance(frame, _Chain):
                    if frame.op is None:
                        frame.left = node
                    else:
                        frame.left = Binary(frame.op, frame.left, node)
                    if self.peek() in BINARY_OPERATORS:
                        frame.op = self.advance()
                        break
                    stack.pop()
                    node = frame.left
                    if not stack:
                        return node
                elif frame[0] == "(":
                    stack.pop()
                    self.expect(")")
                elif frame[0] == "¬":
                    stack.pop()
                    node = Unary("¬", node)
                elif frame[0] == "S":
                    stack.pop()
                    node = Successor(node)
                else:
                    stack.pop()
                    node = Quantifier(frame[0], frame[1], node)

    def _prefixes(self, stack):
        """Push frames for every prefix of the next Term; return its atom."""
        while True:
            token = self.peek()

            if token == "(":
                self.advance()
                stack.append(("(",))
                stack.append(_Chain())
            elif token in ("¬", "S"):
                self.advance()
                stack.append((token,))
            elif token in QUANTIFIERS:
                self.advance()
                start = self.pos
                variable = self.advance()
                if self.strict and variable not in VARIABLES:
                    raise UnexpectedToken(
                        f"Expected a variable after {token!r}, found {variable!r}",
                        start, variable,
                    )
                stack.append((token, variable))
                stack.append(_Chain())
            elif token is None:
                if self.strict:
                    raise UnexpectedEndOfInput("Unexpected end of input", self.pos)
                return EMPTY
            else:
                if self.strict and token != "0" and token not in VARIABLES:
                    raise UnexpectedToken(f"Unexpected {token!r}", self.pos, token)
                return Atom(self.advance())


class _Chain:
    """A left-associative run of binary operators being collected."""

    def __init__(self):
        self.left = None
        self.op = None


def parse(tokens, strict: bool = False):
    """
    Parse a token list into an AST root.

        parse(["S", "x"])          -> Successor(Atom("x"))
        parse(["x", "+", "y"])     -> Binary("+", Atom("x"), Atom("y"))
        parse([])                  -> Atom("")
        parse([], strict=True)     -> raises UnexpectedEndOfInput
    """
    return Parser(tokens, strict=strict).parse()


def parse_formula(formula: str, strict: bool = False):
    """Tokenize and parse in one call."""
    return parse(tokenize(formula), strict=strict)
