"""Exception classes for Fresa.

Provides standardized exceptions for error handling throughout Fresa.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fresa.location import Span


class FresaError(Exception):
    """Base exception for all Fresa errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(FresaError):
    """Error while turning G-code text into lines.

    Raised when the lexer or parser encounters invalid or unexpected input.
    """

    def __init__(self, message: str, span: Span | None = None) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            span: Position of the offending input (optional)
        """
        self.message = message
        self.span = span

        location = f"{span} " if span is not None else ""
        super().__init__(f"{location}{message}")


class LexError(ParseError):
    """A character matched none of the recognized token classes."""

    def __init__(self, char: str, span: Span, message: str | None = None) -> None:
        """Initialize lexical error.

        Args:
            char: The offending character
            span: Position of the offending character
            message: Override for the default description
        """
        self.char = char
        super().__init__(message or f"Unexpected character {char!r}", span)


class GCodeSyntaxError(ParseError):
    """A required token kind was absent at a grammar decision point.

    ``expected`` holds the human-readable expectation, e.g.
    "Expected a command type".
    """

    def __init__(self, expected: str, span: Span) -> None:
        self.expected = expected
        super().__init__(expected, span)


class UnexpectedEOF(ParseError):
    """No token remained where the grammar required one."""

    def __init__(self, span: Span | None = None) -> None:
        super().__init__("Unexpected end of input", span)


class ArgumentOverflowError(ParseError):
    """A command tried to carry more arguments than its buffer holds."""

    def __init__(self, capacity: int, span: Span | None = None) -> None:
        """Initialize overflow error.

        Args:
            capacity: The fixed argument capacity that was exceeded
            span: Position of the argument that did not fit (optional)
        """
        self.capacity = capacity
        super().__init__(f"A command takes at most {capacity} arguments", span)
