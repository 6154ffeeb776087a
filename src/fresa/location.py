"""Source position tracking for tokens, commands, and error messages.

Provides the Span dataclass recording where a token or command begins.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Position of a token or command in the source text.

    Line and column are 1-indexed; the absolute offset is 0-indexed.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute character offset in the source
        source_file: Source file path (optional)

    Examples:
            >>> span = Span(lineno=3, col_offset=5)
            >>> str(span)
            '3:5'

            >>> str(Span(1, 1, 0, "part.nc"))
            'part.nc:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format span for error messages.

        Returns:
            Formatted string like "part.nc:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> Span:
        """Create a placeholder span.

        Used for tokens and commands built by hand rather than lexed.
        """
        return cls(lineno=0, col_offset=0)
