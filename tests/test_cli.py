"""
Smoke tests for the command line entry point.
"""

import json

import pytest

from goedel.__main__ import main
from goedel.formulas import FORMULAS


class TestCli:
    def test_quiet_prints_number(self, capsys):
        main(["0", "--quiet"])
        assert capsys.readouterr().out.strip() == "8192"

    def test_full_report(self, capsys):
        main(["Sx"])
        out = capsys.readouterr().out
        assert "Tokens:  S x" in out
        assert "Successor" in out
        assert "f_1" in out
        assert f"Gödel number: {2 ** 14 * 3 ** 15}" in out

    def test_json(self, capsys):
        main(["--json", "x+y"])
        data = json.loads(capsys.readouterr().out)
        assert data["parsed"] == "(x+y)"
        assert len(data["steps"]) == 3
        assert "Addition" in data["steps"][-1]["description"]

    def test_example(self, capsys):
        main(["--example", "one", "--quiet"])
        assert capsys.readouterr().out.strip() == str(2 ** 14 * 3 ** 13)

    def test_list(self, capsys):
        main(["--list"])
        out = capsys.readouterr().out
        for name in FORMULAS:
            assert name in out

    def test_all(self, capsys):
        main(["--all", "--quiet"])
        out = capsys.readouterr().out
        assert "Example Suite" in out
        assert f"{len(FORMULAS)} formulas" in out

    def test_strict_error_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--strict", "(x"])
        assert exc.value.code == 2
        assert "end of input" in capsys.readouterr().err

    def test_prime_cap_error_exits(self):
        with pytest.raises(SystemExit) as exc:
            main(["--max-length", "2", "0=0"])
        assert exc.value.code == 2

    def test_no_formula_exits(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2

    def test_deep_formula_report(self, capsys):
        main(["¬" * 2000 + "x"])
        out = capsys.readouterr().out
        assert "more levels" in out
        assert "f_2000" in out

    def test_deep_formula_json(self, capsys):
        main(["--json", "¬" * 3000 + "x"])
        data = json.loads(capsys.readouterr().out)
        assert len(data["ast"]) == 3001

    def test_all_json(self, capsys):
        main(["--all", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert set(data) == set(FORMULAS)
        assert all(entry["error"] is None for entry in data.values())
        assert data["one_plus_one"]["parsed"] == "((S0+S0)=SS0)"

    def test_all_respects_max_length(self, capsys):
        main(["--all", "--max-length", "3", "--quiet"])
        out = capsys.readouterr().out
        assert "rejected." in out
        assert "REJECTED" in out

    def test_all_strict(self, capsys):
        main(["--all", "--strict"])
        out = capsys.readouterr().out
        assert f"{len(FORMULAS)} formulas encoded and constructed." in out
