"""
Integration tests for the full pipeline and the example suite.

These are integration-level: each runs tokenizer, parser, builder and
encoder together on real formulas.
"""

import json

import pytest

from goedel.analysis import analyze, run_example_suite
from goedel.core.ast import Atom, Successor
from goedel.core.encode import PrimeExhausted, godel_encode
from goedel.core.parse import ParseError
from goedel.formulas import FORMULAS, get_formula


class TestAnalyze:
    def test_zero(self):
        a = analyze("0")
        assert a.tokens == ("0",)
        assert a.ast == Atom("0")
        assert len(a.steps) == 1
        assert a.godel_number == "8192"

    def test_successor(self):
        a = analyze("Sx")
        assert a.tokens == ("S", "x")
        assert a.ast == Successor(Atom("x"))
        assert len(a.steps) == 2
        assert a.godel_number == str(2 ** 14 * 3 ** 15)

    def test_empty(self):
        a = analyze("")
        assert a.tokens == ()
        assert a.godel_number == "1"
        assert len(a.steps) == 1

    def test_encoding_ignores_parse_failure(self):
        a = analyze("#@")
        assert a.tokens == ()
        assert a.godel_number == "1"
        assert len(a.encoding.items) == 2

    def test_strict_raises(self):
        with pytest.raises(ParseError):
            analyze("(x", strict=True)

    def test_strict_failure_rejects_whole_analysis(self):
        # The string alone still encodes; analyze() reports nothing.
        assert godel_encode("(x").value == 2 ** 11 * 3 ** 15
        with pytest.raises(ParseError):
            analyze("(x", strict=True)

    def test_prime_cap_raises(self):
        with pytest.raises(PrimeExhausted):
            analyze("SSSS0", max_length=4)

    def test_recomputed_each_call(self):
        assert analyze("x=y") == analyze("x=y")
        assert analyze("x=y") is not analyze("x=y")

    def test_to_dict_is_json_serializable(self):
        d = analyze("∀x¬(Sx=0)").to_dict()
        assert d["parsed"] == "∀x¬(Sx=0)"
        assert d["tokens"] == list("∀x¬(Sx=0)")
        assert d["ast"][-1]["type"] == "quantifier"
        assert len(d["ast"]) == len(d["steps"])
        assert d["steps"][-1]["kind"] == "minimization"
        assert len(d["encoding"]) == 9
        assert json.loads(json.dumps(d, ensure_ascii=False)) == d


class TestFormulaRegistry:
    def test_get_formula(self):
        assert get_formula("one") == "S0"

    def test_unknown_formula_raises(self):
        with pytest.raises(ValueError, match="Unknown formula"):
            get_formula("not_a_formula")

    @pytest.mark.parametrize("name", list(FORMULAS.keys()))
    def test_entries_have_formula_and_description(self, name):
        assert FORMULAS[name]["formula"]
        assert FORMULAS[name]["description"]


class TestExampleSuite:
    def test_every_example_analyzed_strictly(self):
        results = run_example_suite(strict=True, verbose=False)
        assert set(results) == set(FORMULAS)
        for name, r in results.items():
            assert r["steps"] >= 1, name
            assert r["digits"] == len(r["godel_number"])

    def test_one_plus_one(self):
        r = run_example_suite(verbose=False)["one_plus_one"]
        assert r["parsed"] == "((S0+S0)=SS0)"
        assert r["steps"] == 9

    def test_flat_precedence_example(self):
        r = run_example_suite(verbose=False)["flat_precedence"]
        assert r["parsed"] == "((x+y)*z)"

    def test_verbose_prints(self, capsys):
        run_example_suite(verbose=True)
        out = capsys.readouterr().out
        assert "FORMULA: one_plus_one" in out
        assert "Gödel number:" in out

    def test_defaults_to_permissive_parsing(self, monkeypatch):
        monkeypatch.setitem(FORMULAS, "unclosed", {
            "formula": "(x", "description": "missing close paren",
        })
        assert run_example_suite(verbose=False)["unclosed"]["error"] is None
        r = run_example_suite(strict=True, verbose=False)["unclosed"]
        assert "end of input" in r["error"]
        assert r["analysis"] is None

    def test_prime_cap_rejects_long_examples_only(self):
        results = run_example_suite(max_length=3, verbose=False)
        assert results["zero"]["error"] is None
        assert results["zero"]["godel_number"] == "8192"
        assert "primes" in results["one_plus_one"]["error"]
        assert results["one_plus_one"]["steps"] is None

    def test_rejection_printed(self, capsys):
        run_example_suite(max_length=3, verbose=True)
        assert "REJECTED" in capsys.readouterr().out


class TestDeepInput:
    def test_negation_chain(self):
        a = analyze("¬" * 5000 + "x")
        assert len(a.tokens) == 5001
        assert len(a.steps) == 5001
        assert a.steps[-1].operands == (4999,)
        assert len(a.encoding.items) == 5001
        assert a.godel_number.isdigit()

    def test_deep_to_dict_serializes(self):
        d = analyze("¬" * 5000 + "x").to_dict()
        assert len(d["ast"]) == 5001
        assert d["ast"][-1] == {"type": "unary", "operator": "¬", "operand": 4999}
        assert d["parsed"] == "¬" * 5000 + "x"
        json.dumps(d, ensure_ascii=False)

    def test_long_binary_chain(self):
        a = analyze("x+" * 1000 + "x")
        assert len(a.steps) == 2001
        assert "Addition" in a.steps[-1].description
