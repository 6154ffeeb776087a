"""Typed line nodes for Fresa.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Command         G/M/T command with optional line number and arguments
└── ProgramNumber   O-prefixed program identifier

``Line`` is the union of the two and is the parser's only output type.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.
ArgBuffer is mutable and parser-local; Command stores a frozen tuple.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from fresa.errors import ArgumentOverflowError
from fresa.location import Span
from fresa.utils.numbers import format_number

# Hard upper bound on arguments per command.
MAX_ARGS = 10


class ArgumentKind(Enum):
    """Letter-coded argument kinds. The value is the letter written in source."""

    X = "X"
    Y = "Y"
    Z = "Z"
    R = "R"
    S = "S"
    H = "H"
    FEED_RATE = "F"
    P = "P"
    I = "I"  # noqa: E741
    J = "J"
    E = "E"

    @property
    def letter(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class CommandType(Enum):
    """Command families: general (G), miscellaneous (M), and tool change (T)."""

    G = "G"
    M = "M"
    T = "T"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Argument:
    """A letter-coded numeric parameter attached to a command.

    Example:
        >>> str(Argument(ArgumentKind.FEED_RATE, 1500.0))
        'F1500.0'

    """

    kind: ArgumentKind
    value: float

    def __str__(self) -> str:
        return f"{self.kind.letter}{format_number(self.value)}"


class ArgBuffer:
    """Fixed-capacity argument storage used while parsing a command.

    Slots are preallocated at construction and never grow. Pushing past
    capacity raises ArgumentOverflowError instead of truncating.

    Usage:
            >>> buf = ArgBuffer()
            >>> buf.push(Argument(ArgumentKind.X, 1.0))
            >>> len(buf), buf.capacity
            (1, 10)

    """

    __slots__ = ("_slots", "_len")

    def __init__(self, capacity: int = MAX_ARGS) -> None:
        self._slots: list[Argument | None] = [None] * capacity
        self._len = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._len == len(self._slots)

    def push(self, arg: Argument, span: Span | None = None) -> None:
        """Append an argument.

        Args:
            arg: Argument to store
            span: Source position of the argument, reported on overflow

        Raises:
            ArgumentOverflowError: If the buffer is already full
        """
        if self._len == len(self._slots):
            raise ArgumentOverflowError(len(self._slots), span)
        self._slots[self._len] = arg
        self._len += 1

    def freeze(self) -> tuple[Argument, ...]:
        """Snapshot the stored arguments in push order."""
        return tuple(self)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Argument]:
        for i in range(self._len):
            yield self._slots[i]  # type: ignore[misc]

    def __getitem__(self, index: int) -> Argument:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError("ArgBuffer index out of range")
        return self._slots[index]  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArgBuffer):
            return self.freeze() == other.freeze()
        if isinstance(other, (tuple, list)):
            return self.freeze() == tuple(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArgBuffer({list(self)!r}, capacity={self.capacity})"


# =============================================================================
# Line nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for line nodes.

    All nodes track where they start in the source for diagnostics.

    """

    span: Span


@dataclass(frozen=True, slots=True)
class Command(Node):
    """A single machine instruction.

    G-code: ``N10 G01 X1.0 Y2.5 F300``

    Attributes:
        command_type: G, M, or T
        command_number: Non-negative command code (e.g. 1 for G01)
        line_number: Value of the ``N`` prefix, if present
        args: Arguments in parse order, at most MAX_ARGS

    """

    command_type: CommandType
    command_number: int
    line_number: int | None = None
    args: tuple[Argument, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))
        if len(self.args) > MAX_ARGS:
            raise ArgumentOverflowError(MAX_ARGS, self.span)

    @classmethod
    def from_pair(cls, pair: tuple[CommandType, int]) -> Command:
        """Build a bare command from ``(command_type, command_number)``.

        Example:
            >>> str(Command.from_pair((CommandType.G, 90)))
            'G90'
        """
        command_type, command_number = pair
        return cls(
            span=Span.unknown(),
            command_type=command_type,
            command_number=command_number,
        )

    @property
    def command(self) -> tuple[CommandType, int]:
        """Loosely-typed view of the command, e.g. ``(G, 90)``."""
        return self.command_type, self.command_number

    def arg(self, kind: ArgumentKind) -> float | None:
        """Value of the first argument of ``kind``, or None if absent."""
        for argument in self.args:
            if argument.kind is kind:
                return argument.value
        return None

    def __str__(self) -> str:
        parts = []
        if self.line_number is not None:
            parts.append(f"N{self.line_number}")
        parts.append(f"{self.command_type}{self.command_number}")
        parts.extend(str(argument) for argument in self.args)
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class ProgramNumber(Node):
    """Program identifier.

    G-code: ``O1000``

    """

    number: int

    def __str__(self) -> str:
        return f"O{self.number}"


Line: TypeAlias = Command | ProgramNumber
