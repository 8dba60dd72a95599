"""
The full pipeline in one call.

    formula --tokenize--> tokens --parse--> AST --build_steps--> steps
    formula --godel_encode----------------------------------> encoding

godel_encode() on its own reads the raw string and never depends on
parsing. analyze() is all or nothing: a strict parse failure or an
exhausted prime supply rejects the whole analysis.

Nothing is cached. Every call recomputes from scratch.
"""

from dataclasses import dataclass
from typing import Optional

from .core.tokenize import tokenize
from .core.parse import parse, ParseError
from .core.ast import format_node, flatten_node
from .core.encode import godel_encode, EncodingResult, PrimeExhausted
from .core.build import build_steps
from .formulas import FORMULAS
from .visualization import print_analysis


@dataclass(frozen=True)
class Analysis:
    formula: str
    tokens: tuple
    ast: object
    steps: tuple
    encoding: EncodingResult

    @property
    def godel_number(self) -> str:
        return self.encoding.godel_number

    def to_dict(self) -> dict:
        return {
            "formula": self.formula,
            "tokens": list(self.tokens),
            "parsed": format_node(self.ast),
            "ast": flatten_node(self.ast),
            "steps": [step.to_dict() for step in self.steps],
            **self.encoding.to_dict(),
        }


def analyze(formula: str, strict: bool = False,
            max_length: Optional[int] = None) -> Analysis:
    """
    Run tokenizer, parser, builder and encoder on a formula.

    Args:
        strict:     parse in strict mode (raises ParseError)
        max_length: prime supply cap for the encoder (raises PrimeExhausted)
    """
    tokens = tokenize(formula)
    ast = parse(tokens, strict=strict)
    steps = build_steps(ast)
    encoding = godel_encode(formula, max_length=max_length)
    return Analysis(formula, tuple(tokens), ast, tuple(steps), encoding)


def run_example_suite(strict: bool = False, max_length: Optional[int] = None,
                      verbose: bool = True) -> dict:
    """
    Analyze every registered formula with the same options as analyze().

    Returns dict: name -> {formula, description, error, parsed, steps,
    godel_number, digits, analysis}. A formula that analyze() rejects
    keeps its entry with the message in error and None elsewhere.
    """
    results = {}
    for name, entry in FORMULAS.items():
        if verbose:
            print(f"\n{'='*60}")
            print(f"FORMULA: {name}")
            print(f"  {entry['description']}")
            print(f"{'='*60}")

        result = {
            "formula": entry["formula"],
            "description": entry["description"],
            "error": None,
            "parsed": None,
            "steps": None,
            "godel_number": None,
            "digits": None,
            "analysis": None,
        }
        try:
            analysis = analyze(entry["formula"], strict=strict, max_length=max_length)
        except (ParseError, PrimeExhausted) as e:
            result["error"] = str(e)
            results[name] = result
            if verbose:
                print(f"\n  REJECTED: {e}")
            continue

        result.update({
            "parsed": format_node(analysis.ast),
            "steps": len(analysis.steps),
            "godel_number": analysis.godel_number,
            "digits": len(analysis.godel_number),
            "analysis": analysis,
        })
        results[name] = result

        if verbose:
            print_analysis(analysis)

    return results
