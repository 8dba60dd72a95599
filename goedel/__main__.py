"""
CLI entry point. Run as: python -m goedel "<formula>"
"""

import argparse
import json
import sys

from .analysis import analyze, run_example_suite
from .core.parse import ParseError
from .core.encode import PrimeExhausted
from .formulas import FORMULAS, get_formula
from .visualization import print_analysis, print_suite_results


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Gödel numbering and primitive recursive construction of PA formulas"
    )
    parser.add_argument("formula", nargs="?", default=None,
                        help="Formula to analyze, e.g. '∀x¬(Sx=0)'")
    parser.add_argument("--example", choices=list(FORMULAS.keys()), default=None,
                        help="Analyze a registered example formula")
    parser.add_argument("--all",    action="store_true", help="Run every example")
    parser.add_argument("--list",   action="store_true", help="List examples")
    parser.add_argument("--strict", action="store_true",
                        help="Reject malformed formulas instead of parsing permissively")
    parser.add_argument("--max-length", type=int, default=None,
                        help="Number of primes available (default: unlimited)")
    parser.add_argument("--json",   action="store_true", help="Print the analysis as JSON")
    parser.add_argument("--quiet",  action="store_true", help="Only print the Gödel number")
    args = parser.parse_args(argv)

    if args.list:
        for name, entry in FORMULAS.items():
            print(f"  {name:<26s} {entry['formula']:<24s} {entry['description']}")
        return

    if args.all:
        results = run_example_suite(
            strict=args.strict,
            max_length=args.max_length,
            verbose=not (args.quiet or args.json),
        )
        if args.json:
            report = {
                name: {
                    "description": r["description"],
                    "error": r["error"],
                    **(r["analysis"].to_dict() if r["analysis"] else {"formula": r["formula"]}),
                }
                for name, r in results.items()
            }
            json.dump(report, sys.stdout, indent=2, ensure_ascii=False)
            print()
        else:
            print_suite_results(results)
        return

    if args.example:
        formula = get_formula(args.example)
    elif args.formula is not None:
        formula = args.formula
    else:
        parser.error("give a formula, --example NAME, --all or --list")

    try:
        analysis = analyze(formula, strict=args.strict, max_length=args.max_length)
    except (ParseError, PrimeExhausted) as e:
        parser.error(str(e))

    if args.json:
        json.dump(analysis.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
        print()
    elif args.quiet:
        print(analysis.godel_number)
    else:
        print_analysis(analysis)


if __name__ == "__main__":
    main()
