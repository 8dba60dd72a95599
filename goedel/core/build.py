"""
Recursive-function builder: AST -> construction steps.

Reads a formula as a primitive recursive definition assembled bottom-up:

    0             zero function           Z(x) = 0
    x, y, z       identity / projection   I(x) = x
    S t           composition with successor
    t op t        composition with add, mul, or, and, impl, equiv, eq
    ¬ φ           composition with not
    ∀x φ, ∃x φ    minimization (the μ-operator)

Traversal is depth-first and post-order: a node's children are defined
(and their steps emitted) before the node's own step. Each step defines
the next function f_k; the counter k lives in a context object scoped to
one build_steps() call.

Variables are all treated as the same unary identity. Arity and argument
position are not tracked.

There are no error paths. Whatever tree the permissive parser returns,
including empty atoms and quantifiers bound to operators, gets steps.
"""

from dataclasses import dataclass

from .ast import Atom, Successor, Unary, Binary, Quantifier, fold


# operator -> (function name, description heading)
OPERATOR_NAMES = {
    "+": ("add",   "Addition"),
    "*": ("mul",   "Multiplication"),
    "∨": ("or",    "Disjunction"),
    "∧": ("and",   "Conjunction"),
    "→": ("impl",  "Implication"),
    "↔": ("equiv", "Equivalence"),
    "=": ("eq",    "Equality"),
}

QUANTIFIER_NAMES = {
    "∀": "Universal",
    "∃": "Existential",
}

BASIC = "basic"
COMPOSITION = "composition"
MINIMIZATION = "minimization"


@dataclass(frozen=True)
class ConstructionStep:
    """
    One function definition in the construction.

    index:    k, the function being defined is f_k
    operands: indices of the earlier functions this one is built from
    """
    kind: str
    label: str
    description: str
    index: int = 0
    operands: tuple = ()

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "label": self.label,
            "description": self.description,
            "index": self.index,
            "operands": list(self.operands),
        }


class _BuildContext:
    """Step list and function counter for a single traversal."""

    def __init__(self):
        self.steps = []
        self.counter = 0

    def emit(self, kind: str, description: str, operands: tuple = ()) -> int:
        k = self.counter
        self.steps.append(ConstructionStep(
            kind=kind,
            label=f"f_{k}",
            description=description,
            index=k,
            operands=operands,
        ))
        self.counter += 1
        return k


def _describe(node, operands: tuple, k: int) -> tuple:
    """(kind, description) of the step defining f_k for node."""
    if isinstance(node, Atom):
        if node.value == "0":
            return BASIC, f"Zero function: f_{k}(x) = 0"
        return BASIC, f"Identity (projection) function for {node.value!r}: f_{k}(x) = x"

    if isinstance(node, Successor):
        i, = operands
        return COMPOSITION, f"Successor: f_{k}(x) = S(f_{i}(x))"

    if isinstance(node, Unary):
        i, = operands
        return COMPOSITION, f"Logical NOT: f_{k}(x) = not(f_{i}(x))"

    if isinstance(node, Binary):
        i, j = operands
        fname, heading = OPERATOR_NAMES.get(
            node.operator, (node.operator, f"Operator {node.operator!r}")
        )
        return COMPOSITION, f"{heading}: f_{k}(x) = {fname}(f_{i}(x), f_{j}(x))"

    i, = operands
    kind = QUANTIFIER_NAMES.get(node.kind, node.kind)
    return (
        MINIMIZATION,
        f"{kind} quantifier over {node.variable!r}: "
        f"f_{k}(x) = μ{node.variable}[f_{i}(x)]",
    )


def build_steps(ast) -> list:
    """
    Construction of a formula from primitive recursive functions.

        build_steps(Successor(Atom("x")))
          -> [basic f_0 (identity), composition f_1 = S(f_0)]

    The last step always defines the whole formula.
    """
    ctx = _BuildContext()

    def define(node, operands):
        kind, description = _describe(node, operands, ctx.counter)
        return ctx.emit(kind, description, operands)

    fold(ast, define)
    return ctx.steps
