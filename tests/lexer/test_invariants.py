"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from fresa.errors import LexError
from fresa.lexer import Lexer
from fresa.tokens import LETTER_KINDS, TokenKind

# Characters that always lex cleanly (no lone '.', no comments)
CLEAN_ALPHABET = "GMTNOXYZRSHPIJEFgmtnoxyzrshpijef0123456789- \t\r\n"

clean_source = st.text(alphabet=CLEAN_ALPHABET, max_size=300)
any_source = st.text(max_size=300)


def lex_until_error(source: str) -> list:
    """Collect tokens up to the first LexError."""
    tokens = []
    try:
        for token in Lexer(source).tokenize():
            tokens.append(token)
    except LexError:
        pass
    return tokens


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(any_source)
    @settings(max_examples=300)
    def test_only_lex_errors_escape(self, source: str) -> None:
        """Arbitrary text either tokenizes or raises LexError, nothing else."""
        try:
            list(Lexer(source).tokenize())
        except LexError as exc:
            assert exc.span is not None
            assert len(exc.char) == 1

    @given(clean_source)
    @settings(max_examples=200)
    def test_clean_text_always_tokenizes(self, source: str) -> None:
        list(Lexer(source).tokenize())

    @given(any_source)
    @settings(max_examples=200)
    def test_positions_are_one_based(self, source: str) -> None:
        for token in lex_until_error(source):
            assert token.span.lineno >= 1
            assert token.span.col_offset >= 1
            assert token.span.offset >= 0

    @given(any_source)
    @settings(max_examples=200)
    def test_offsets_strictly_increase(self, source: str) -> None:
        offsets = [t.span.offset for t in lex_until_error(source)]
        assert all(a < b for a, b in zip(offsets, offsets[1:]))

    @given(any_source)
    @settings(max_examples=200)
    def test_offset_points_at_token_start(self, source: str) -> None:
        for token in lex_until_error(source):
            char = source[token.span.offset]
            if token.kind is TokenKind.NUMBER:
                assert char.isdigit() or char == "."
            elif token.kind is TokenKind.MINUS:
                assert char == "-"
            else:
                assert LETTER_KINDS[char.upper()] is token.kind


class TestTokenContent:
    """Test token values and counts."""

    @given(clean_source)
    @settings(max_examples=200)
    def test_one_token_per_letter(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        letters = sum(1 for c in source if c.isalpha())
        assert sum(1 for t in tokens if t.kind in LETTER_KINDS.values()) == letters

    @given(clean_source)
    @settings(max_examples=200)
    def test_one_token_per_minus(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert sum(1 for t in tokens if t.kind is TokenKind.MINUS) == source.count("-")

    @given(any_source)
    @settings(max_examples=200)
    def test_numbers_are_finite_and_non_negative(self, source: str) -> None:
        for token in lex_until_error(source):
            if token.kind is TokenKind.NUMBER:
                assert token.value is not None
                assert math.isfinite(token.value)
                assert token.value >= 0
            else:
                assert token.value is None

    @given(st.floats(min_value=0, allow_nan=False, allow_infinity=False))
    @settings(max_examples=200)
    def test_repr_digits_lex_to_same_value(self, value: float) -> None:
        text = repr(value)
        if "e" in text:
            return
        (token,) = Lexer(text).tokenize()
        assert token.value == value


class TestChunking:
    """Chunk boundaries never change the token stream."""

    @given(clean_source, st.lists(st.integers(min_value=0, max_value=300), max_size=10))
    @settings(max_examples=200)
    def test_chunking_is_transparent(self, source: str, cuts: list[int]) -> None:
        bounds = sorted({0, len(source), *(c for c in cuts if c <= len(source))})
        chunks = [source[a:b] for a, b in zip(bounds, bounds[1:])]
        assert list(Lexer(chunks).tokenize()) == list(Lexer(source).tokenize())
