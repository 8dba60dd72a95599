"""
Plain-text reporting utilities.
"""

from .core.ast import (
    Atom, Successor, Unary, Binary, Quantifier, children, format_node, node_depth,
)
from .core.encode import EncodingResult


def print_encoding(result: EncodingResult):
    """Print each character's prime power and the product."""
    print(f"\n{'='*60}")
    print(f"Gödel number: {result.godel_number}")
    print(f"Encoding ({len(result.items)} characters):")
    for item in result.items:
        print(f"  {item.symbol}: {item.prime}^{item.code} = {item.factor}")
    print(f"{'='*60}")


def print_steps(steps):
    """Print the construction from primitive recursive functions."""
    print(f"\n{'='*60}")
    print("Construction:")
    print(f"{'='*60}")
    for step in steps:
        print(f"  {step.label:>5s} [{step.kind}] {step.description}")


def _node_line(node) -> str:
    if isinstance(node, Atom):
        return f"Atom({node.value!r})"
    if isinstance(node, Successor):
        return "Successor"
    if isinstance(node, Unary):
        return f"Unary({node.operator})"
    if isinstance(node, Binary):
        return f"Binary({node.operator})"
    if isinstance(node, Quantifier):
        return f"Quantifier({node.kind}{node.variable})"
    raise TypeError(f"Not an AST node: {node!r}")


def print_tree(node, max_depth: int = 32):
    """
    Print an AST one node per line, children indented under parents.

    Subtrees below max_depth are summarized in a single line.
    """
    work = [(node, 0)]
    while work:
        current, depth = work.pop()
        pad = "  " * (depth + 1)
        if depth >= max_depth and children(current):
            print(f"{pad}... ({node_depth(current) + 1} more levels)")
            continue
        print(f"{pad}{_node_line(current)}")
        for kid in reversed(children(current)):
            work.append((kid, depth + 1))


def print_analysis(analysis):
    """Print everything analyze() computed for one formula."""
    print(f"\nFormula: {analysis.formula}")
    print(f"Tokens:  {' '.join(analysis.tokens) or '(none)'}")
    print(f"Parsed:  {format_node(analysis.ast) or '(empty)'}")
    print_tree(analysis.ast)
    print_steps(analysis.steps)
    print_encoding(analysis.encoding)


def print_suite_results(results: dict):
    """Pretty-print run_example_suite() results."""
    print(f"\n{'='*60}")
    print("GOEDEL NUMBERING: Example Suite")
    print(f"{'='*60}")
    rejected = 0
    for name, r in results.items():
        if r["error"]:
            rejected += 1
            print(f"  {name:<26s} REJECTED: {r['error']}")
        else:
            print(f"  {name:<26s} {r['steps']:3d} steps  {r['digits']:5d} digits  {r['parsed']}")
    print(f"{'='*60}")
    print(f"  {len(results) - rejected} formulas encoded and constructed.")
    if rejected:
        print(f"  {rejected} rejected.")
    print(f"{'='*60}")
