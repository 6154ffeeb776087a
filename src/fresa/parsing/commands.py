"""Command grammar productions for the Fresa parser.

Grammar (one token of lookahead):

    command        ::= line_number? command_name arg*
    command_name   ::= command_type number
    command_type   ::= 'G' | 'M' | 'T'
    line_number    ::= 'N' number
    arg            ::= arg_kind number
    arg_kind       ::= 'X'|'Y'|'Z'|'R'|'S'|'H'|'P'|'I'|'J'|'E'|'F'
    number         ::= '-'? NUMBER

Optional productions (``line_number``, ``arg``) report "absent" instead of
failing when their leading token is missing. Mandatory productions raise.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import cast

from fresa.errors import GCodeSyntaxError, UnexpectedEOF
from fresa.location import Span
from fresa.nodes import ArgBuffer, Argument, ArgumentKind, Command, CommandType
from fresa.tokens import Token, TokenKind
from fresa.utils.logger import get_logger
from fresa.utils.numbers import to_unsigned

logger = get_logger(__name__)

COMMAND_TYPES: dict[TokenKind, CommandType] = {
    TokenKind.G: CommandType.G,
    TokenKind.M: CommandType.M,
    TokenKind.T: CommandType.T,
}

# G, M, T, N and O never start an argument.
ARGUMENT_KINDS: dict[TokenKind, ArgumentKind] = {
    TokenKind.X: ArgumentKind.X,
    TokenKind.Y: ArgumentKind.Y,
    TokenKind.Z: ArgumentKind.Z,
    TokenKind.R: ArgumentKind.R,
    TokenKind.S: ArgumentKind.S,
    TokenKind.H: ArgumentKind.H,
    TokenKind.P: ArgumentKind.P,
    TokenKind.I: ArgumentKind.I,
    TokenKind.J: ArgumentKind.J,
    TokenKind.E: ArgumentKind.E,
    TokenKind.FEED_RATE: ArgumentKind.FEED_RATE,
}

_NUMBER = (TokenKind.NUMBER,)


class CommandParsingMixin:
    """Mixin providing the command productions.

    Required Host Attributes:
        - _strict: bool (report malformed optional fields)

    """

    _strict: bool

    def _peek(self) -> Token | None:
        """Peek at the lookahead token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _next_span(self) -> Span | None:
        """Span of the lookahead token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _advance(self) -> Token:
        """Consume the lookahead token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _expect(self, kinds: Collection[TokenKind], message: str) -> Token:
        """Consume a token of an expected kind. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def number(self) -> float:
        """Parse ``'-'? NUMBER``.

        Returns:
            The literal's value, negated when a minus sign precedes it.

        Raises:
            GCodeSyntaxError: "Expected a number"
            UnexpectedEOF: If the stream ends first
        """
        negative = False
        token = self._peek()
        if token is not None and token.kind is TokenKind.MINUS:
            self._advance()
            negative = True

        value = cast(float, self._expect(_NUMBER, "Expected a number").value)
        return -value if negative else value

    def command(self) -> Command:
        """Parse a full command.

        Raises:
            UnexpectedEOF: If no token remains to anchor the command
            GCodeSyntaxError: If the command name is missing or malformed
            ArgumentOverflowError: If more than MAX_ARGS arguments follow
        """
        span = self._next_span()
        if span is None:
            raise UnexpectedEOF()

        line_number = self.line_number()
        command_type, command_number = self.command_name()
        args = self.args()

        return Command(
            span=span,
            line_number=line_number,
            command_type=command_type,
            command_number=command_number,
            args=args,
        )

    def command_name(self) -> tuple[CommandType, int]:
        """Parse ``command_type number``, e.g. ``G01`` -> ``(G, 1)``."""
        command_type = self.command_type()
        number = self.number()
        return command_type, to_unsigned(number)

    def command_type(self) -> CommandType:
        """Parse one of ``G``, ``M``, ``T``.

        Raises:
            GCodeSyntaxError: "Expected a command type"
        """
        token = self._expect(COMMAND_TYPES, "Expected a command type")
        return COMMAND_TYPES[token.kind]

    def line_number(self) -> int | None:
        """Parse an optional ``N`` prefix.

        Returns None when the lookahead is not ``N``. When ``N`` is present
        but no number follows, lenient mode drops the prefix (returns None)
        while strict mode raises.
        """
        token = self._peek()
        if token is None or token.kind is not TokenKind.N:
            return None

        self._advance()
        try:
            number = self.number()
        except (GCodeSyntaxError, UnexpectedEOF) as exc:
            if self._strict:
                raise
            logger.debug("Dropping malformed line number at %s: %s", token.span, exc.message)
            return None

        return to_unsigned(number)

    def arg_kind(self) -> ArgumentKind:
        """Parse an argument letter.

        ``G``, ``M``, ``T``, ``N`` and ``O`` are never argument letters.

        Raises:
            GCodeSyntaxError: "Expected an argument kind"
        """
        token = self._expect(ARGUMENT_KINDS, "Expected an argument kind")
        return ARGUMENT_KINDS[token.kind]

    def arg(self) -> Argument | None:
        """Parse an optional ``arg_kind number`` pair.

        Returns None (consuming nothing) when the lookahead is not an
        argument letter. A missing number after the letter raises.
        """
        try:
            kind = self.arg_kind()
        except (GCodeSyntaxError, UnexpectedEOF):
            return None

        return Argument(kind=kind, value=self.number())

    def args(self) -> tuple[Argument, ...]:
        """Parse arguments greedily into a fixed-capacity buffer.

        Raises:
            ArgumentOverflowError: At the first argument past MAX_ARGS
        """
        buffer = ArgBuffer()
        while True:
            span = self._next_span()
            argument = self.arg()
            if argument is None:
                return buffer.freeze()
            buffer.push(argument, span)
