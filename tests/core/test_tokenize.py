"""
Unit and property tests for the tokenizer.

Core claims:
    - Each token is one alphabet symbol
    - Whitespace and unknown characters are dropped silently
    - Tokenizing the tokens again changes nothing
"""

from hypothesis import given
from hypothesis import strategies as st

from goedel.core.symbols import ALPHABET, SYMBOL_TABLE
from goedel.core.tokenize import tokenize


class TestTokenize:
    def test_zero(self):
        assert tokenize("0") == ["0"]

    def test_successor(self):
        assert tokenize("Sx") == ["S", "x"]

    def test_binary(self):
        assert tokenize("x+y") == ["x", "+", "y"]

    def test_quantified(self):
        assert tokenize("∀x¬(Sx=0)") == ["∀", "x", "¬", "(", "S", "x", "=", "0", ")"]

    def test_whitespace_dropped(self):
        assert tokenize(" x \t+\n y ") == ["x", "+", "y"]

    def test_unknown_characters_dropped(self):
        assert tokenize("x#+@y") == ["x", "+", "y"]
        assert tokenize("#@") == []

    def test_empty(self):
        assert tokenize("") == []

    def test_no_multi_character_tokens(self):
        assert tokenize("SS0") == ["S", "S", "0"]


class TestTokenizeProperties:
    @given(st.text(max_size=60))
    def test_tokens_are_alphabet_symbols(self, formula):
        assert all(token in SYMBOL_TABLE for token in tokenize(formula))

    @given(st.text(max_size=60))
    def test_never_longer_than_input(self, formula):
        assert len(tokenize(formula)) <= len(formula)

    @given(st.text(max_size=60))
    def test_idempotent(self, formula):
        tokens = tokenize(formula)
        assert tokenize("".join(tokens)) == tokens

    @given(st.text(alphabet="".join(ALPHABET), max_size=60))
    def test_alphabet_only_input_kept_whole(self, formula):
        assert tokenize(formula) == list(formula)
