"""Character-at-a-time lexer for G-code.

Pulls characters lazily from the source, one at a time, and yields tokens
as soon as they are complete. Input may be a whole string or any iterable of
string chunks (such as an open file), consumed in a single pass.

Thread Safety:
Lexer instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import chain

from fresa.config import get_parse_config
from fresa.errors import LexError
from fresa.lexer.scanners import (
    DIGITS,
    CommentScannerMixin,
    NumberScannerMixin,
)
from fresa.location import Span
from fresa.tokens import LETTER_KINDS, Token, TokenKind
from fresa.utils.logger import get_logger

logger = get_logger(__name__)

# Separators between tokens. None of them produce a token.
WHITESPACE = frozenset(" \t\r\n")


class Lexer(
    NumberScannerMixin,
    CommentScannerMixin,
):
    """Single-pass G-code lexer.

    Usage:
            >>> for token in Lexer("G01 X-1.5").tokenize():
            ...     print(token)
        Token(G, 1:1)
        Token(NUMBER, 1.0, 1:2)
        Token(X, 1:5)
        Token(MINUS, 1:6)
        Token(NUMBER, 1.5, 1:7)

    The token sequence is lazy, finite, and non-restartable. An unrecognized
    character raises LexError and ends the sequence.

    Thread Safety:
        Lexer instances are single-use. Create one per source.

    """

    __slots__ = (
        "_chars",
        "_current",  # One character of lookahead; None = not yet pulled
        "_pos",
        "_lineno",
        "_col",
        "_after_cr",  # Previous character was \r (so \n ends the same line)
        "_source_file",
        "_skip_comments",
        "_saved_lineno",
        "_saved_col",
        "_saved_pos",
    )

    def __init__(
        self,
        source: str | Iterable[str],
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: G-code text, or an iterable of text chunks
            source_file: Optional source file path for error messages
        """
        self._chars: Iterator[str] = chain.from_iterable(source)
        self._current: str | None = None
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._after_cr = False
        self._source_file = source_file
        self._skip_comments = get_parse_config().skip_comments

        self._saved_lineno = 1
        self._saved_col = 1
        self._saved_pos = 0

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time

        Raises:
            LexError: On the first unrecognized character
        """
        while True:
            char = self._skip_blank()
            if not char:
                return
            yield self._scan_token(char)

    def _scan_token(self, char: str) -> Token:
        """Scan the token starting at ``char`` (the current lookahead)."""
        self._save_location()

        kind = LETTER_KINDS.get(char.upper()) if char.isascii() else None
        if kind is not None:
            self._advance()
            return self._make_token(kind)

        if char == "-":
            self._advance()
            return self._make_token(TokenKind.MINUS)

        if char in DIGITS or char == ".":
            return self._scan_number()

        raise self._lex_error(char)

    def _skip_blank(self) -> str:
        """Skip whitespace and comments.

        Returns:
            The next significant character, or "" at end of input.
        """
        while True:
            char = self._peek()
            if not char:
                return char
            if char in WHITESPACE:
                self._advance()
            elif self._skip_comments and char in "(;":
                self._skip_comment(char)
            else:
                return char

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._current is None:
            self._current = next(self._chars, "")
        return self._current

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking. ``\\r``, ``\\n`` and ``\\r\\n`` each
        count as one line break.

        Returns:
            The consumed character.
        """
        char = self._peek()
        if not char:
            return ""

        self._current = None
        self._pos += 1

        if char == "\n":
            if not self._after_cr:
                self._lineno += 1
            self._col = 1
            self._after_cr = False
        elif char == "\r":
            self._lineno += 1
            self._col = 1
            self._after_cr = True
        else:
            self._col += 1
            self._after_cr = False

        return char

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col
        self._saved_pos = self._pos

    def _saved_span(self) -> Span:
        return Span(
            lineno=self._saved_lineno,
            col_offset=self._saved_col,
            offset=self._saved_pos,
            source_file=self._source_file,
        )

    def _make_token(self, kind: TokenKind, value: float | None = None) -> Token:
        """Create a Token starting at the saved location."""
        return Token(kind=kind, span=self._saved_span(), value=value)

    def _lex_error(self, char: str, message: str | None = None) -> LexError:
        """Build a LexError at the saved location."""
        error = LexError(char, self._saved_span(), message)
        logger.debug("Lexing stopped: %s", error)
        return error


def tokenize(
    source: str | Iterable[str],
    source_file: str | None = None,
) -> list[Token]:
    """Convenience function to tokenize G-code text into a list."""
    return list(Lexer(source, source_file).tokenize())
