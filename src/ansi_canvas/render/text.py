"""Render a Canvas grid as text for inspecting the diff."""

from __future__ import annotations

from ansi_canvas.core.canvas import Canvas


class TextRenderer:
    """
    Full-width text snapshot of a Canvas, one line per row.

    With a ``pending`` marker, every cell the next flush would write is
    drawn as that marker instead of its glyph. Rendering never changes
    the canvas, so it can be called between ``write`` and ``flush`` to see
    what a frame will cost.
    """

    def __init__(self, pending: str | None = None):
        self.pending = pending[:1] if pending else None

    def render(self, canvas: Canvas) -> str:
        marked: set[int] = set()
        if self.pending:
            marked = {index for index, _ in canvas.pending()}

        lines: list[str] = []
        for row in canvas.rows():
            lines.append(''.join(
                self.pending
                if canvas.get_pointer_from_xy(cell.x, cell.y) in marked
                else cell.char or ' '
                for cell in row
            ))
        return '\n'.join(lines)
