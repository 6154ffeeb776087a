"""Token navigation utilities for the Fresa parser.

Provides a mixin holding one token of lookahead over a lazy token stream.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator

from fresa.errors import GCodeSyntaxError, LexError, UnexpectedEOF
from fresa.location import Span
from fresa.tokens import Token, TokenKind


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Tokens are pulled from the stream only when the lookahead slot is empty,
    so a parser never reads further ahead than one token.

    A LexError raised while pulling is held back and the stream is treated
    as ended, so a production in progress can finish with what it has. The
    host surfaces the held error with ``_take_lex_error()``.

    Required Host Attributes:
        - _tokens: Iterator[Token]
        - _lookahead: Token | None
        - _exhausted: bool
        - _consumed: int (tokens consumed so far)
        - _last_span: Span | None (span of the last consumed token)
        - _lex_error: LexError | None (held lexer failure)

    """

    _tokens: Iterator[Token]
    _lookahead: Token | None
    _exhausted: bool
    _consumed: int
    _last_span: Span | None
    _lex_error: LexError | None

    def _peek(self) -> Token | None:
        """Return the next token without consuming it (None at end)."""
        if self._lookahead is None and not self._exhausted:
            try:
                token = next(self._tokens, None)
            except LexError as exc:
                self._lex_error = exc
                token = None
            if token is None:
                self._exhausted = True
            else:
                self._lookahead = token
        return self._lookahead

    def _take_lex_error(self) -> LexError | None:
        """Return the held lexer failure once, clearing it."""
        error, self._lex_error = self._lex_error, None
        return error

    def _peek_kind(self) -> TokenKind | None:
        token = self._peek()
        return token.kind if token is not None else None

    def _next_span(self) -> Span | None:
        """Span of the next token, if any."""
        token = self._peek()
        return token.span if token is not None else None

    def _at_end(self) -> bool:
        """Check if the token stream is exhausted."""
        return self._peek() is None

    def _advance(self) -> Token:
        """Consume and return the lookahead token.

        Raises:
            UnexpectedEOF: If no token remains
        """
        token = self._peek()
        if token is None:
            raise UnexpectedEOF(self._last_span)
        self._lookahead = None
        self._consumed += 1
        self._last_span = token.span
        return token

    def _expect(self, kinds: Collection[TokenKind], message: str) -> Token:
        """Consume the lookahead token if its kind is one of ``kinds``.

        Args:
            kinds: Acceptable token kinds
            message: Expectation reported on mismatch

        Raises:
            GCodeSyntaxError: If the lookahead has another kind (not consumed)
            UnexpectedEOF: If no token remains
        """
        token = self._peek()
        if token is None:
            raise UnexpectedEOF(self._last_span)
        if token.kind not in kinds:
            raise GCodeSyntaxError(message, token.span)
        return self._advance()
