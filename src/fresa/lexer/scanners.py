"""Scanner mixins for multi-character lexemes.

Each mixin scans one lexeme class starting at the current lookahead
character, using the host lexer's navigation and location helpers.
"""

import math

from fresa.errors import LexError
from fresa.tokens import Token, TokenKind

DIGITS = frozenset("0123456789")


class NumberScannerMixin:
    """Mixin scanning numeric literals: digits with at most one decimal point."""

    def _peek(self) -> str:
        """Peek at current character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume current character. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, value: float | None = None) -> Token:
        """Create token at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _lex_error(self, char: str, message: str | None = None) -> LexError:
        """Build a LexError at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_number(self) -> Token:
        """Scan a numeric literal such as ``12``, ``12.5``, ``12.`` or ``.5``.

        A leading minus is not part of the literal; it is its own token.
        Scanning stops at a second decimal point, which then starts the
        next literal.

        Returns:
            NUMBER token whose value is the literal's exact float value.

        Raises:
            LexError: If the literal is a lone ``.`` or too large for a float
        """
        chars: list[str] = []
        seen_point = False

        while True:
            char = self._peek()
            if char and char in DIGITS:
                chars.append(self._advance())
            elif char == "." and not seen_point:
                seen_point = True
                chars.append(self._advance())
            else:
                break

        text = "".join(chars)
        if text == ".":
            raise self._lex_error(".", "Expected a digit next to '.'")

        value = float(text)
        if math.isinf(value):
            raise self._lex_error(text[0], f"Number out of range: {text[:20]}...")
        return self._make_token(TokenKind.NUMBER, value)


class CommentScannerMixin:
    """Mixin skipping ``(parenthesized)`` and ``; end-of-line`` comments."""

    def _peek(self) -> str:
        """Peek at current character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume current character. Implemented by Lexer."""
        raise NotImplementedError

    def _save_location(self) -> None:
        """Save current location. Implemented by Lexer."""
        raise NotImplementedError

    def _lex_error(self, char: str, message: str | None = None) -> LexError:
        """Build a LexError at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_comment(self, opener: str) -> None:
        """Consume a comment starting at ``opener`` (``(`` or ``;``).

        A ``;`` comment runs to the end of the line; the line break itself
        is left for the caller.

        Raises:
            LexError: If a parenthesized comment is never closed
        """
        self._save_location()
        self._advance()

        if opener == ";":
            while True:
                char = self._peek()
                if not char or char in "\r\n":
                    return
                self._advance()

        while True:
            char = self._advance()
            if not char:
                raise self._lex_error("(", "Unterminated comment")
            if char == ")":
                return
