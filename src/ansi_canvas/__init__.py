"""
ansi-canvas: diff-based true-color rendering for character terminals

Keep a virtual frame buffer of styled cells and send the terminal only
the escape sequences for cells that actually changed.

Quick Start:
    >>> import ansi_canvas as ac
    >>> canvas = ac.Canvas(width=40, height=10)
    >>> canvas.move_to(2, 1).foreground('gold').bold().write('Hello').flush()
    >>> canvas.move_to(2, 1).write('Hello').flush()  # nothing written

Features:
    - Colors from CSS names, rgb(r, g, b), #RRGGBB or raw triples
    - 24-bit foreground/background and six display attributes per cell
    - Deterministic per-cell serialization with a frame cache
    - Viewport clipping: off-grid writes are dropped, the cursor still moves
    - Any object with a write() method as the output sink
"""

__version__ = "0.1.0"

# Core types
from ansi_canvas.core.cell import Cell, DisplayOptions
from ansi_canvas.core.canvas import Canvas, CanvasOptions
from ansi_canvas.core.color import NO_COLOR, RGB, Color, ColorParseError, parse_color

# Renderers
from ansi_canvas.render.text import TextRenderer


def create(**options) -> Canvas:
    """Create a Canvas from keyword options (sink, width, height, encoding)."""
    return Canvas(CanvasOptions(**options))


__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "DisplayOptions",
    "Canvas",
    "CanvasOptions",
    "Color",
    "ColorParseError",
    "RGB",
    "NO_COLOR",
    "parse_color",
    # Renderers
    "TextRenderer",
    # Creation
    "create",
]
