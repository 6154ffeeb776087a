"""Canonical G-code renderer.

Renders parsed lines back to G-code text that the lexer and parser accept,
so that rendering then re-parsing preserves every field except spans.

Canonical form:
- Words are separated by single spaces: ``N10 G91 X1.0 Y3.1415``
- Command, line, and program numbers print as integers
- Argument values print positionally with the shortest round-trip digits

Thread Safety:
GCodeRenderer holds only immutable options. Multiple threads can share one
instance and call render() concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable

from fresa.nodes import Command, Line, ProgramNumber


class GCodeRenderer:
    """Render lines to canonical G-code text.

    Usage:
        >>> from fresa import parse
        >>> renderer = GCodeRenderer()
        >>> renderer.render(parse("n10 g1 x.5 f1500"))
        'N10 G1 X0.5 F1500.0\\n'

    Args:
        annotate_spans: Append a ``(line: L, column: C)`` comment to each
            rendered line. The lexer skips it when reading the text back.

    """

    __slots__ = ("_annotate_spans",)

    def __init__(self, *, annotate_spans: bool = False) -> None:
        self._annotate_spans = annotate_spans

    def render(self, lines: Iterable[Line]) -> str:
        """Render lines, one per text line, each terminated by ``\\n``."""
        return "".join(f"{self.render_line(line)}\n" for line in lines)

    def render_line(self, line: Line) -> str:
        """Render a single line without a trailing newline.

        Raises:
            TypeError: If ``line`` is not a Command or ProgramNumber
        """
        match line:
            case Command() | ProgramNumber():
                text = str(line)
            case _:
                msg = f"Cannot render {type(line).__name__}"
                raise TypeError(msg)

        if self._annotate_spans:
            text += f"\t(line: {line.span.lineno}, column: {line.span.col_offset})"
        return text


def render(lines: Iterable[Line], *, annotate_spans: bool = False) -> str:
    """Render lines to canonical G-code text.

    Example:
        >>> from fresa import parse
        >>> render(parse("O7 M30"))
        'O7\\nM30\\n'
    """
    return GCodeRenderer(annotate_spans=annotate_spans).render(lines)
