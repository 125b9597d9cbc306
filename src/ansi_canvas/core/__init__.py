"""Core data structures: colors, cells and the diffing canvas."""

from ansi_canvas.core.cell import Cell, DisplayOptions
from ansi_canvas.core.canvas import Canvas, CanvasOptions
from ansi_canvas.core.color import NO_COLOR, RGB, Color, ColorParseError, parse_color, resolve_color
from ansi_canvas.core.sink import Sink, TerminalSize, sink_size

__all__ = [
    "Cell",
    "DisplayOptions",
    "Canvas",
    "CanvasOptions",
    "Color",
    "ColorParseError",
    "RGB",
    "NO_COLOR",
    "parse_color",
    "resolve_color",
    "Sink",
    "TerminalSize",
    "sink_size",
]
