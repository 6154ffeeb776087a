"""Token and TokenKind definitions for the Fresa lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a kind, a span, and (for numeric literals) a value.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from fresa.location import Span


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    Organized by category:
    - Structural letters (O, N)
    - Command letters (G, M, T)
    - Argument letters (X ... E, FEED_RATE)
    - Numeric literals and the minus sign

    """

    # Program number / line number
    O = auto()
    N = auto()

    # Command types
    G = auto()
    M = auto()
    T = auto()

    # Arguments
    X = auto()
    Y = auto()
    Z = auto()
    R = auto()
    S = auto()
    H = auto()
    P = auto()
    I = auto()  # noqa: E741
    J = auto()
    E = auto()
    FEED_RATE = auto()  # F

    # Numbers
    NUMBER = auto()
    MINUS = auto()


# Case-normalized letter table. Lookups use the upper-case letter.
LETTER_KINDS: dict[str, TokenKind] = {
    "O": TokenKind.O,
    "N": TokenKind.N,
    "G": TokenKind.G,
    "M": TokenKind.M,
    "T": TokenKind.T,
    "X": TokenKind.X,
    "Y": TokenKind.Y,
    "Z": TokenKind.Z,
    "R": TokenKind.R,
    "S": TokenKind.S,
    "H": TokenKind.H,
    "P": TokenKind.P,
    "I": TokenKind.I,
    "J": TokenKind.J,
    "E": TokenKind.E,
    "F": TokenKind.FEED_RATE,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Tokens are the atomic units passed from lexer to parser.

    Attributes:
        kind: The token kind (from TokenKind enum)
        span: Where the token's first character sits in the source
        value: Numeric value for NUMBER tokens, None otherwise

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenKind
    span: Span = field(default_factory=Span.unknown)
    value: float | None = None

    def __post_init__(self) -> None:
        if self.kind is TokenKind.NUMBER and self.value is None:
            msg = "NUMBER tokens require a value"
            raise ValueError(msg)

    @classmethod
    def of(cls, kind: TokenKind, value: float | None = None) -> Token:
        """Build a token with no source position.

        Handy for feeding hand-built token streams to the parser.

        Example:
            >>> Token.of(TokenKind.NUMBER, 90.0)
            Token(NUMBER, 90.0, 0:0)
        """
        return cls(kind=kind, span=Span.unknown(), value=value)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.kind is TokenKind.NUMBER:
            return f"Token({self.kind.name}, {self.value!r}, {self.span})"
        return f"Token({self.kind.name}, {self.span})"
