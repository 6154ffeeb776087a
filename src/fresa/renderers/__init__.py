"""Renderers for Fresa lines."""

from fresa.renderers.gcode import GCodeRenderer, render
from fresa.renderers.protocol import LineRenderer

__all__ = ["GCodeRenderer", "LineRenderer", "render"]
