"""Cell - one addressable position of the terminal grid."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Union

from ansi_canvas.core.color import NO_COLOR, RGB
from ansi_canvas.core.constants import DISPLAY_ORDER, RESET
from ansi_canvas.core.vt100 import background_rgb, cursor_position, foreground_rgb, sgr


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """Display attributes of a cell. All off by default."""
    bold: bool = False
    dim: bool = False
    underlined: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, bool]) -> DisplayOptions:
        """Build from a partial mapping; missing attributes are False."""
        return cls(**{f.name: bool(options.get(f.name, False)) for f in fields(cls)})


DEFAULT_DISPLAY = DisplayOptions()

DisplayLike = Union[DisplayOptions, Mapping[str, bool]]


@dataclass(slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    Holds the glyph, position, 24-bit colors and display attributes of one
    grid position, plus a dirty flag for the canvas diff. ``str(cell)``
    serializes to a VT100 sequence that depends only on these fields, in a
    fixed order, so two cells with equal state always serialize the same.
    """
    char: str = ' '
    x: int = 0
    y: int = 0
    background: RGB = NO_COLOR
    foreground: RGB = NO_COLOR
    display: DisplayOptions = DEFAULT_DISPLAY
    is_modified: bool = False

    def __post_init__(self) -> None:
        self.char = self.char[:1]
        self.x = math.floor(self.x)
        self.y = math.floor(self.y)

    @classmethod
    def create(
        cls,
        char: str = ' ',
        x: float = 0,
        y: float = 0,
        background: RGB | None = None,
        foreground: RGB | None = None,
        display: DisplayLike | None = None,
    ) -> Cell:
        """Create a cell, normalizing colors and partial display options."""
        cell = cls(char, x, y)
        if background is not None:
            cell.set_background(*background)
        if foreground is not None:
            cell.set_foreground(*foreground)
        if display is not None:
            cell.set_display(display)
        return cell

    def set_char(self, char: str) -> Cell:
        """Store the first symbol of char."""
        self.char = char[:1]
        return self

    def set_x(self, x: float) -> Cell:
        self.x = math.floor(x)
        return self

    def set_y(self, y: float) -> Cell:
        self.y = math.floor(y)
        return self

    def set_background(self, r: int, g: int, b: int) -> Cell:
        """Set background channels; -1 means unset."""
        self.background = RGB(r, g, b)
        return self

    def reset_background(self) -> Cell:
        self.background = NO_COLOR
        return self

    def set_foreground(self, r: int, g: int, b: int) -> Cell:
        """Set foreground channels; -1 means unset."""
        self.foreground = RGB(r, g, b)
        return self

    def reset_foreground(self) -> Cell:
        self.foreground = NO_COLOR
        return self

    def set_display(self, display: DisplayLike) -> Cell:
        """
        Replace the display attributes.

        This is a full replace, not a merge: attributes missing from a
        mapping are turned off.
        """
        if isinstance(display, DisplayOptions):
            self.display = display
        else:
            self.display = DisplayOptions.from_mapping(display)
        return self

    def reset_display(self) -> Cell:
        self.display = DEFAULT_DISPLAY
        return self

    def reset(self) -> Cell:
        """
        Restore the blank state and mark the cell dirty.

        The cell is marked dirty even if it already looks blank, so the
        erase reaches the terminal on the next flush.
        """
        self.char = ' '
        self.background = NO_COLOR
        self.foreground = NO_COLOR
        self.display = DEFAULT_DISPLAY
        self.is_modified = True
        return self

    def to_sequence(self) -> str:
        """
        Serialize to a VT100 control sequence.

        Order: position, background, foreground, attributes
        (bold, dim, underlined, blink, reverse, hidden), char, reset.
        """
        parts = [cursor_position(self.y + 1, self.x + 1)]

        background = self.background
        if background.r > -1:
            parts.append(background_rgb(*background))

        foreground = self.foreground
        if foreground.r > -1:
            parts.append(foreground_rgb(*foreground))

        display = self.display
        for name, code in DISPLAY_ORDER:
            if getattr(display, name):
                parts.append(sgr(code))

        parts.append(self.char)
        parts.append(RESET)
        return ''.join(parts)

    def __str__(self) -> str:
        return self.to_sequence()
