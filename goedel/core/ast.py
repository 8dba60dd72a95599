"""
Abstract syntax tree for formulas and terms.

A closed set of node types, one per grammar production:

    Atom(value)                    0, x, y, z  (or "" past end of input)
    Successor(operand)             S t
    Unary(operator, operand)       ¬ φ
    Binary(operator, left, right)  t + t, φ → φ, t = t, ...
    Quantifier(kind, variable, body)   ∀x φ, ∃x φ

Nodes are frozen dataclasses: a parse result owns its tree outright and
nothing mutates it afterwards.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Atom:
    value: str


@dataclass(frozen=True)
class Successor:
    operand: "Node"


@dataclass(frozen=True)
class Unary:
    operator: str
    operand: "Node"


@dataclass(frozen=True)
class Binary:
    operator: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Quantifier:
    kind: str
    variable: str
    body: "Node"


Node = Union[Atom, Successor, Unary, Binary, Quantifier]

# Produced when the parser reads past the last token.
EMPTY = Atom("")


def children(node: Node) -> tuple:
    """Direct subtrees of a node, left to right."""
    if isinstance(node, Atom):
        return ()
    if isinstance(node, (Successor, Unary)):
        return (node.operand,)
    if isinstance(node, Binary):
        return (node.left, node.right)
    if isinstance(node, Quantifier):
        return (node.body,)
    raise TypeError(f"Not an AST node: {node!r}")


def fold(node: Node, combine):
    """
    Post-order fold without recursion.

    combine(node, child_results) is called once per node, children
    before parents and left before right; child_results holds what
    combine returned for each child. Returns the result for the root.

    Trees can be as deep as their input is long, so every traversal
    goes through here rather than the call stack.
    """
    results = []
    work = [(node, False)]
    while work:
        current, expanded = work.pop()
        kids = children(current)
        if expanded or not kids:
            if kids:
                args = tuple(results[-len(kids):])
                del results[-len(kids):]
            else:
                args = ()
            results.append(combine(current, args))
            continue
        work.append((current, True))
        for kid in reversed(kids):
            work.append((kid, False))
    return results[0]


def _format(node, args) -> str:
    if isinstance(node, Atom):
        return node.value
    if isinstance(node, Successor):
        return "S" + args[0]
    if isinstance(node, Unary):
        return node.operator + args[0]
    if isinstance(node, Binary):
        return f"({args[0]}{node.operator}{args[1]})"
    return f"{node.kind}{node.variable}{args[0]}"


def format_node(node: Node) -> str:
    """
    Render a tree back to formula text, parenthesizing every binary node.

        format_node(parse(tokenize("x+y*z")))  ->  "((x+y)*z)"
    """
    return fold(node, _format)


def node_depth(node: Node) -> int:
    """Atoms have depth 0; every other node is one deeper than its deepest child."""
    return fold(node, lambda n, args: 1 + max(args) if args else 0)


def flatten_node(node: Node) -> list:
    """
    The tree as a flat post-order list of dicts, tagged by node type.

    Children are referenced by their position in the list, so the root
    is always last and entry i lines up with construction step f_i.
    Flat output serializes at any depth.
    """
    entries = []

    def add(n, args):
        if isinstance(n, Atom):
            entry = {"type": "atom", "value": n.value}
        elif isinstance(n, Successor):
            entry = {"type": "successor", "operand": args[0]}
        elif isinstance(n, Unary):
            entry = {"type": "unary", "operator": n.operator, "operand": args[0]}
        elif isinstance(n, Binary):
            entry = {"type": "binary", "operator": n.operator,
                     "left": args[0], "right": args[1]}
        else:
            entry = {"type": "quantifier", "kind": n.kind,
                     "variable": n.variable, "body": args[0]}
        entries.append(entry)
        return len(entries) - 1

    fold(node, add)
    return entries
