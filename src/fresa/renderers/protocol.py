"""LineRenderer protocol: stable interface for line renderers.

Any renderer that implements ``render(lines) -> str`` conforms to this
protocol. The built-in ``GCodeRenderer`` is the reference implementation.

Example:
    from fresa.renderers.protocol import LineRenderer

    def write_program(renderer: LineRenderer, lines: list[Line]) -> str:
        return renderer.render(lines)

"""

from collections.abc import Iterable
from typing import Protocol

from fresa.nodes import Line


class LineRenderer(Protocol):
    """Protocol for line renderers.

    Implementations must accept an iterable of lines and return a string.

    """

    def render(self, lines: Iterable[Line]) -> str:
        """Render lines to a string.

        Args:
            lines: Parsed lines in program order.

        Returns:
            Rendered string output.

        """
        ...
