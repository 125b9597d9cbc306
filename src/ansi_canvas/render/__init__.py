"""Renderers for outputting a Canvas to other formats."""

from ansi_canvas.render.text import TextRenderer

__all__ = ["TextRenderer"]
