"""
Formula registry.

Named sentences of Peano arithmetic for the CLI and the example suite.
Each entry is a dict:
    formula:      str, written in the symbol alphabet
    description:  str

Binary operators all share one precedence level and associate left, so
every compound operand is parenthesized explicitly.
"""


FORMULAS = {
    "zero": {
        "formula":     "0",
        "description": "The numeral zero",
    },
    "one": {
        "formula":     "S0",
        "description": "The numeral one: successor of zero",
    },
    "one_plus_one": {
        "formula":     "(S0+S0)=SS0",
        "description": "1 + 1 = 2",
    },
    "zero_not_successor": {
        "formula":     "∀x¬(Sx=0)",
        "description": "PA: zero is not a successor",
    },
    "successor_injective": {
        "formula":     "∀x∀y((Sx=Sy)→(x=y))",
        "description": "PA: successor is injective",
    },
    "addition_base": {
        "formula":     "∀x((x+0)=x)",
        "description": "PA: x + 0 = x",
    },
    "addition_recursive": {
        "formula":     "∀x∀y((x+Sy)=S(x+y))",
        "description": "PA: x + S(y) = S(x + y)",
    },
    "multiplication_base": {
        "formula":     "∀x((x*0)=0)",
        "description": "PA: x * 0 = 0",
    },
    "multiplication_recursive": {
        "formula":     "∀x∀y((x*Sy)=((x*y)+x))",
        "description": "PA: x * S(y) = x * y + x",
    },
    "commutativity": {
        "formula":     "∀x∀y((x+y)=(y+x))",
        "description": "Addition is commutative",
    },
    "successor_exists": {
        "formula":     "∀x∃y(y=Sx)",
        "description": "Every number has a successor",
    },
    "zero_or_successor": {
        "formula":     "∀x((x=0)∨∃y(x=Sy))",
        "description": "Every number is zero or a successor",
    },
    "symmetry": {
        "formula":     "∀x∀y((x=y)↔(y=x))",
        "description": "Equality is symmetric",
    },
    "zero_and_one": {
        "formula":     "∃x((x=0)∧¬(Sx=x))",
        "description": "Some number is zero and differs from its successor",
    },
    "flat_precedence": {
        "formula":     "x+y*z",
        "description": "No operator binds tighter: reads as (x+y)*z",
    },
}


def get_formula(name: str) -> str:
    if name not in FORMULAS:
        raise ValueError(
            f"Unknown formula: {name!r}. "
            f"Choose from: {list(FORMULAS.keys())}"
        )
    return FORMULAS[name]["formula"]
