"""Recursive descent parser producing typed lines.

Consumes a token stream from Lexer (or any iterable of tokens) and builds
Command and ProgramNumber nodes, one line per pull.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: one-token lookahead over the stream
- `CommandParsingMixin`: command, line-number and argument productions
- `Parser`: the line-level productions and the iteration protocol

Lines are delimited by the grammar alone: a line ends when a program number
or command production completes. Newlines never reach the parser.

Thread Safety:
- Parser instances are single-use and not thread-safe. Create one per input.
- Configuration is read from ContextVar (thread-local) at construction.
- Produced lines are immutable and thread-safe.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from typing import cast

from fresa.config import get_parse_config
from fresa.errors import GCodeSyntaxError, LexError, ParseError, UnexpectedEOF
from fresa.lexer import Lexer
from fresa.location import Span
from fresa.nodes import Line, ProgramNumber
from fresa.parsing import CommandParsingMixin, TokenNavigationMixin
from fresa.tokens import Token, TokenKind
from fresa.utils.logger import get_logger
from fresa.utils.numbers import to_unsigned

logger = get_logger(__name__)

_PROGRAM_NUMBER = (TokenKind.O,)


class Parser(
    TokenNavigationMixin,
    CommandParsingMixin,
):
    """Recursive descent parser for G-code lines.

    Grammar:

        line           ::= program_number | command
        program_number ::= 'O' number

    (``command`` and below live in CommandParsingMixin.)

    Usage:
            >>> parser = Parser.from_source("O1000\\nN10 G91 X1.0 Z-20")
            >>> for line in parser:
            ...     print(line)
        O1000
        N10 G91 X1.0 Z-20.0

    Iteration:
        ``next(parser)`` returns the next Line, raises StopIteration once the
        tokens run out between lines, and raises the production's ParseError
        otherwise. The parser stays usable after an error; the next pull
        resumes at the first unconsumed token.

        A lexer failure ends the token stream. Whatever line was in progress
        completes if the grammar allows, and the LexError is raised by the
        following pull (or in place of an UnexpectedEOF mid-line).

    Thread Safety:
        Parser instances are single-use and not thread-safe.

    """

    __slots__ = (
        "_tokens",
        "_lookahead",
        "_exhausted",
        "_consumed",
        "_last_span",
        "_lex_error",
        "_strict",
    )

    def __init__(self, tokens: Iterable[Token]) -> None:
        """Initialize parser over a token stream.

        Configuration is read from ContextVar, not passed as parameters.
        Use parse_config_context() before creating a Parser if you need
        strict mode.

        Args:
            tokens: Any iterable of tokens, consumed lazily and only once
        """
        self._tokens: Iterator[Token] = iter(tokens)
        self._lookahead: Token | None = None
        self._exhausted = False
        self._consumed = 0
        self._last_span: Span | None = None
        self._lex_error: LexError | None = None
        self._strict = get_parse_config().strict

    @classmethod
    def from_source(
        cls,
        source: str | Iterable[str],
        source_file: str | None = None,
    ) -> Parser:
        """Create a parser reading G-code text through a Lexer."""
        return cls(Lexer(source, source_file).tokenize())

    # =========================================================================
    # Line productions
    # =========================================================================

    def parse(self) -> Line:
        """Parse the next line.

        Tries ``program_number`` first and falls back to ``command``. The span
        of the first token of the line is stamped onto the result.

        Raises:
            UnexpectedEOF: If the input ends before or inside the line
            GCodeSyntaxError: If the line matches neither production
            ArgumentOverflowError: If a command has too many arguments
        """
        span = self._next_span()
        consumed = self._consumed

        try:
            number = self.program_number()
        except (GCodeSyntaxError, UnexpectedEOF) as exc:
            if self._strict and self._consumed != consumed:
                raise
            if self._consumed != consumed:
                logger.debug("Dropping malformed program number at %s: %s", span, exc.message)
        else:
            return ProgramNumber(span=cast(Span, span), number=number)

        command = self.command()
        if span is not None and command.span != span:
            command = dataclasses.replace(command, span=span)
        return command

    def program_number(self) -> int:
        """Parse ``'O' number``.

        Raises:
            GCodeSyntaxError: "Expected a 'O'" or "Expected a number"
            UnexpectedEOF: If the stream ends first
        """
        self._expect(_PROGRAM_NUMBER, "Expected a 'O'")
        return to_unsigned(self.number())

    # =========================================================================
    # Iteration
    # =========================================================================

    def __iter__(self) -> Parser:
        return self

    def __next__(self) -> Line:
        if self._at_end():
            error = self._take_lex_error()
            if error is not None:
                raise error
            raise StopIteration
        try:
            return self.parse()
        except UnexpectedEOF:
            # Input ended early because the lexer failed.
            error = self._take_lex_error()
            if error is not None:
                raise error from None
            raise

    def results(self) -> Iterator[Line | ParseError]:
        """Yield every line or error until the input is exhausted.

        Errors are yielded as values instead of raised. When a failed pull
        consumed no tokens, the offending token is skipped so the sequence
        always makes progress. A LexError ends the sequence after it is
        yielded, since the lexer cannot resume.

        Example:
            >>> [str(r) for r in Parser.from_source("G1 X1 5 M2").results()]
            ['G1 X1.0', '1:7 Expected a command type', 'M2']
        """
        skip = False
        while True:
            try:
                if skip and not self._at_end():
                    self._advance()
                consumed = self._consumed
                line = next(self)
            except StopIteration:
                return
            except LexError as exc:
                yield exc
                return
            except ParseError as exc:
                yield exc
                skip = self._consumed == consumed
            else:
                skip = False
                yield line


def parse(
    source: str | Iterable[str],
    *,
    source_file: str | None = None,
) -> list[Line]:
    """Parse G-code text into a list of lines.

    Args:
        source: G-code text, or an iterable of text chunks
        source_file: Optional source file path for error messages

    Returns:
        Every line in source order

    Raises:
        ParseError: The first lexical or syntax error in the input

    Example:
        >>> [str(line) for line in parse("O12 G90 G0 X1")]
        ['O12', 'G90', 'G0 X1.0']
    """
    return list(Parser.from_source(source, source_file))


def iter_lines(
    source: str | Iterable[str],
    *,
    source_file: str | None = None,
) -> Iterator[Line]:
    """Lazily parse G-code text, one line per step.

    Stops at the first error, which is raised to the caller.
    """
    yield from Parser.from_source(source, source_file)
