"""Canvas - buffered cell grid that flushes only what changed."""

from __future__ import annotations

import dataclasses
import logging
import math
import sys
from dataclasses import dataclass
from typing import Any, Iterator

from ansi_canvas.core.cell import Cell, DisplayOptions
from ansi_canvas.core.color import NO_COLOR, RGB, ColorLike, resolve_color
from ansi_canvas.core.sink import Sink, emit, sink_size
from ansi_canvas.core.vt100 import (
    HIDE_CURSOR,
    RESET_TERMINAL,
    RESTORE_SCREEN,
    SAVE_SCREEN,
    SHOW_CURSOR,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanvasOptions:
    """
    Construction-time configuration for a Canvas.

    Attributes:
        sink: Destination with a ``write`` method (default: ``sys.stdout``)
        width: Number of columns (default: reported by the sink)
        height: Number of rows (default: reported by the sink)
        encoding: If set, payloads are encoded to bytes before writing,
            for binary sinks such as ``sys.stdout.buffer``
    """
    sink: Sink | None = None
    width: int | None = None
    height: int | None = None
    encoding: str | None = None


class Canvas:
    """
    A virtual terminal made of Cells that renders with minimal output.

    ``write()`` only touches the in-memory grid. ``flush()`` serializes the
    cells modified since the last flush, compares each one against what was
    last emitted at that position, and writes just the differences to the
    sink in a single call.

    Screen-level operations (``save_screen``, ``hide_cursor``, ``reset``...)
    bypass the grid and are written immediately.

    Every mutator returns the canvas, so calls can be chained:

        >>> canvas = Canvas(width=20, height=10, sink=io.StringIO())
        >>> canvas.move_to(2, 1).foreground('yellow').bold().write('Hi').flush()
    """

    def __init__(self, options: CanvasOptions | None = None, **overrides: Any):
        if options is None:
            options = CanvasOptions()
        if overrides:
            options = dataclasses.replace(options, **overrides)
        self.options = options

        self.sink: Sink = options.sink if options.sink is not None else sys.stdout
        self.encoding = options.encoding

        width, height = options.width, options.height
        if width is None or height is None:
            size = sink_size(self.sink)
            width = size.cols if width is None else width
            height = size.rows if height is None else height
        self.width: int = width
        self.height: int = height

        self.cells: list[Cell] = [
            Cell(' ', *self.get_xy_from_pointer(index))
            for index in range(self.width * self.height)
        ]
        self.last_frame: list[str] = [''] * (self.width * self.height)

        self.cursor_x = 0
        self.cursor_y = 0
        self.cursor_background: RGB = NO_COLOR
        self.cursor_foreground: RGB = NO_COLOR
        self.cursor_display = DisplayOptions()

        logger.debug("Canvas created: %dx%d, sink=%r", self.width, self.height, self.sink)

    @classmethod
    def create(cls, **options: Any) -> Canvas:
        """Wrapper around ``Canvas(CanvasOptions(**options))``."""
        return cls(CanvasOptions(**options))

    def __repr__(self) -> str:
        return (
            f"Canvas(width={self.width}, height={self.height}, "
            f"cursor=({self.cursor_x}, {self.cursor_y}))"
        )

    # -------------------------------------------------------------------------
    # Grid access
    # -------------------------------------------------------------------------

    def get_pointer_from_xy(self, x: int | None = None, y: int | None = None) -> int:
        """
        Get the buffer index for (x, y).

        The cursor position is used for an omitted coordinate.
        """
        if x is None:
            x = self.cursor_x
        if y is None:
            y = self.cursor_y
        return y * self.width + x

    def get_xy_from_pointer(self, index: int) -> tuple[int, int]:
        """Get (x, y) for a buffer index."""
        y, x = divmod(index, self.width)
        return x, y

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell | None:
        """Get the cell at (x, y), or None outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y * self.width + x]

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        width = self.width
        for start in range(0, len(self.cells), width):
            yield self.cells[start:start + width]

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def write(self, text: str) -> Canvas:
        """
        Write text at the cursor using the current paint state.

        Nothing is sent to the sink until ``flush()``. Characters that fall
        outside the grid are dropped, but the cursor still advances by one
        column per character; there is no wrapping to the next line.
        """
        width = self.width
        height = self.height
        cells = self.cells
        background = self.cursor_background
        foreground = self.cursor_foreground
        display = self.cursor_display
        y = self.cursor_y
        row_visible = 0 <= y < height

        for char in text:
            x = self.cursor_x
            if row_visible and 0 <= x < width:
                cell = cells[y * width + x]
                cell.char = char
                cell.x = x
                cell.y = y
                cell.background = background
                cell.foreground = foreground
                cell.display = display
                cell.is_modified = True
            self.cursor_x = x + 1

        return self

    def pending(self) -> Iterator[tuple[int, str]]:
        """
        Yield ``(pointer, sequence)`` for every cell the next flush would write.

        Read-only: dirty flags and the frame cache are left untouched.
        """
        last_frame = self.last_frame
        for index, cell in enumerate(self.cells):
            if cell.is_modified:
                sequence = cell.to_sequence()
                if sequence != last_frame[index]:
                    yield index, sequence

    def flush(self) -> Canvas:
        """
        Send the changes since the last flush to the sink.

        Scans every cell in row-major order. Modified cells are serialized
        and compared against the last emitted frame; only those that differ
        are written. A cell rewritten with identical content costs nothing.
        The frame cache is updated before the write, so a sink error leaves
        the canvas believing the frame was delivered.
        """
        last_frame = self.last_frame
        payload: list[str] = []

        for index, sequence in self.pending():
            last_frame[index] = sequence
            payload.append(sequence)
        for cell in self.cells:
            cell.is_modified = False

        if not payload:
            return self

        data = ''.join(payload)
        logger.debug("Flushing %d changed cells (%d chars)", len(payload), len(data))
        emit(self.sink, data, self.encoding)
        return self

    # -------------------------------------------------------------------------
    # Cursor movement
    # -------------------------------------------------------------------------

    def up(self, y: float = 1) -> Canvas:
        """Move the cursor up."""
        self.cursor_y -= math.floor(y)
        return self

    def down(self, y: float = 1) -> Canvas:
        """Move the cursor down."""
        self.cursor_y += math.floor(y)
        return self

    def right(self, x: float = 1) -> Canvas:
        """Move the cursor right."""
        self.cursor_x += math.floor(x)
        return self

    def left(self, x: float = 1) -> Canvas:
        """Move the cursor left."""
        self.cursor_x -= math.floor(x)
        return self

    def move_by(self, x: float, y: float) -> Canvas:
        """Move the cursor relative to its current position."""
        if x < 0:
            self.left(-x)
        if x > 0:
            self.right(x)

        if y < 0:
            self.up(-y)
        if y > 0:
            self.down(y)

        return self

    def move_to(self, x: float, y: float) -> Canvas:
        """Move the cursor to absolute coordinates (may be off-grid)."""
        self.cursor_x = math.floor(x)
        self.cursor_y = math.floor(y)
        return self

    # -------------------------------------------------------------------------
    # Paint state
    # -------------------------------------------------------------------------

    def foreground(self, color: ColorLike | bool | None) -> Canvas:
        """
        Set the foreground color for subsequent writes.

        Accepts a color name, ``rgb(r, g, b)``, ``#RRGGBB`` or a raw
        triple. ``'none'`` disables the foreground.

        Raises:
            ColorParseError: If the color can't be parsed.
        """
        self.cursor_foreground = resolve_color(color)
        return self

    def background(self, color: ColorLike | bool | None) -> Canvas:
        """Set the background color for subsequent writes (see ``foreground``)."""
        self.cursor_background = resolve_color(color)
        return self

    def _set_display(self, **flags: bool) -> Canvas:
        self.cursor_display = dataclasses.replace(self.cursor_display, **flags)
        return self

    def bold(self, is_bold: bool = True) -> Canvas:
        return self._set_display(bold=is_bold)

    def dim(self, is_dim: bool = True) -> Canvas:
        return self._set_display(dim=is_dim)

    def underlined(self, is_underlined: bool = True) -> Canvas:
        return self._set_display(underlined=is_underlined)

    def blink(self, is_blink: bool = True) -> Canvas:
        return self._set_display(blink=is_blink)

    def reverse(self, is_reverse: bool = True) -> Canvas:
        return self._set_display(reverse=is_reverse)

    def hidden(self, is_hidden: bool = True) -> Canvas:
        return self._set_display(hidden=is_hidden)

    # -------------------------------------------------------------------------
    # Erasing
    # -------------------------------------------------------------------------

    def erase(self, x1: float, y1: float, x2: float, y2: float) -> Canvas:
        """
        Reset every cell in the inclusive rectangle (x1, y1)-(x2, y2).

        Coordinates outside the grid are skipped. Erased cells are emitted
        on the next flush.
        """
        x_start = max(math.floor(x1), 0)
        x_end = min(math.floor(x2), self.width - 1)
        y_start = max(math.floor(y1), 0)
        y_end = min(math.floor(y2), self.height - 1)

        for y in range(y_start, y_end + 1):
            row = y * self.width
            for x in range(x_start, x_end + 1):
                self.cells[row + x].reset()

        return self

    def erase_to_end(self) -> Canvas:
        """Erase from the cursor to the end of the line."""
        return self.erase(self.cursor_x, self.cursor_y, self.width - 1, self.cursor_y)

    def erase_to_start(self) -> Canvas:
        """Erase from the start of the line to the cursor."""
        return self.erase(0, self.cursor_y, self.cursor_x, self.cursor_y)

    def erase_to_down(self) -> Canvas:
        """Erase from the cursor line to the bottom of the screen."""
        return self.erase(0, self.cursor_y, self.width - 1, self.height - 1)

    def erase_to_up(self) -> Canvas:
        """Erase from the top of the screen to the cursor line."""
        return self.erase(0, 0, self.width - 1, self.cursor_y)

    def erase_line(self) -> Canvas:
        """Erase the cursor line."""
        return self.erase(0, self.cursor_y, self.width - 1, self.cursor_y)

    def erase_screen(self) -> Canvas:
        """Erase the entire screen."""
        return self.erase(0, 0, self.width - 1, self.height - 1)

    # -------------------------------------------------------------------------
    # Immediate operations (no flush needed)
    # -------------------------------------------------------------------------

    def save_screen(self) -> Canvas:
        """Save the terminal screen contents."""
        emit(self.sink, SAVE_SCREEN, self.encoding)
        return self

    def restore_screen(self) -> Canvas:
        """Restore the saved terminal screen contents."""
        emit(self.sink, RESTORE_SCREEN, self.encoding)
        return self

    def hide_cursor(self) -> Canvas:
        emit(self.sink, HIDE_CURSOR, self.encoding)
        return self

    def show_cursor(self) -> Canvas:
        emit(self.sink, SHOW_CURSOR, self.encoding)
        return self

    def reset(self) -> Canvas:
        """Reset the terminal (ESC c). The grid and frame cache are untouched."""
        emit(self.sink, RESET_TERMINAL, self.encoding)
        return self
