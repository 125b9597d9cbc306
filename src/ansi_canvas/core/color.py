"""Color parsing and normalization for true-color output."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any, NamedTuple, Union

from ansi_canvas.core.constants import NAMED_COLORS

RGB_REGEX = re.compile(r"^\s*rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)\s*$", re.IGNORECASE)
HEX_REGEX = re.compile(r"^\s*#([0-9A-F]{2})([0-9A-F]{2})([0-9A-F]{2})\s*$", re.IGNORECASE)


class RGB(NamedTuple):
    """Plain (r, g, b) channel triple."""
    r: int
    g: int
    b: int


# Sentinel for "no color, use the terminal default"
NO_COLOR = RGB(-1, -1, -1)

ColorLike = Union[str, "Color", RGB, Mapping[str, Any], Sequence[Any]]


class ColorParseError(ValueError):
    """Raised when a color expression matches none of the known grammars."""

    def __init__(self, value: object, message: str | None = None):
        self.value = value
        super().__init__(message or f"Color {value!r} can't be parsed")


def _clamp(value: float) -> float:
    return max(0.0, min(float(value), 255.0))


def _round(value: float) -> int:
    # Half-up: 126.5 -> 127 (round() gives 126)
    return math.floor(value + 0.5)


def _is_channel(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)


class Color:
    """
    A 24-bit color with clamped channels.

    Channels are clamped to 0-255 on write and rounded to the nearest
    integer on read, so ``to_rgb()`` is always in range no matter what
    was passed in.

    Example:
        >>> Color.parse('black').to_rgb()
        RGB(r=0, g=0, b=0)
        >>> Color.parse('rgb(0, 100, 200)').to_hex()
        '#0064c8'
        >>> Color(300, -5, 12.4).to_rgb()
        RGB(r=255, g=0, b=12)
    """

    __slots__ = ("_r", "_g", "_b")

    def __init__(self, r: float = 0, g: float = 0, b: float = 0):
        self._r = _clamp(r)
        self._g = _clamp(g)
        self._b = _clamp(b)

    # -------------------------------------------------------------------------
    # Channels
    # -------------------------------------------------------------------------

    @property
    def r(self) -> int:
        return _round(self._r)

    @r.setter
    def r(self, value: float) -> None:
        self._r = _clamp(value)

    @property
    def g(self) -> int:
        return _round(self._g)

    @g.setter
    def g(self, value: float) -> None:
        self._g = _clamp(value)

    @property
    def b(self) -> int:
        return _round(self._b)

    @b.setter
    def b(self, value: float) -> None:
        self._b = _clamp(value)

    def set_r(self, value: float) -> Color:
        """Set the red channel (clamped)."""
        self.r = value
        return self

    def set_g(self, value: float) -> Color:
        """Set the green channel (clamped)."""
        self.g = value
        return self

    def set_b(self, value: float) -> Color:
        """Set the blue channel (clamped)."""
        self.b = value
        return self

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_rgb(self) -> RGB:
        """Return the rounded channels as an RGB triple."""
        return RGB(self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Return the color as ``#rrggbb``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Color):
            return self.to_rgb() == other.to_rgb()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_rgb())

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b})"

    # -------------------------------------------------------------------------
    # Grammar checks
    # -------------------------------------------------------------------------

    @staticmethod
    def is_named(value: object) -> bool:
        """Check if value is a known color name (case-insensitive)."""
        return isinstance(value, str) and value.strip().upper() in NAMED_COLORS

    @staticmethod
    def is_rgb(value: object) -> bool:
        """Check if value is written as ``rgb(r, g, b)``."""
        return isinstance(value, str) and RGB_REGEX.match(value) is not None

    @staticmethod
    def is_hex(value: object) -> bool:
        """Check if value is written as ``#RRGGBB``."""
        return isinstance(value, str) and HEX_REGEX.match(value) is not None

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Look up a named color."""
        hex_value = NAMED_COLORS.get(name.strip().upper())
        if hex_value is None:
            raise ColorParseError(name, f"Unknown color name: {name}")
        return cls.from_hex(hex_value)

    @classmethod
    def from_rgb_string(cls, value: str) -> Color:
        """Parse ``rgb(r, g, b)`` text."""
        match = RGB_REGEX.match(value)
        if match is None:
            raise ColorParseError(value, f"Unrecognized RGB pattern: {value}")
        r, g, b = match.groups()
        return cls(int(r), int(g), int(b))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RRGGBB`` text."""
        match = HEX_REGEX.match(value)
        if match is None:
            raise ColorParseError(value, f"Unrecognized HEX pattern: {value}")
        r, g, b = match.groups()
        return cls(int(r, 16), int(g, 16), int(b, 16))

    @classmethod
    def from_triple(cls, value: object) -> Color:
        """Build from a Color, an RGB/3-item sequence, or an r/g/b mapping."""
        if isinstance(value, Color):
            return cls(value.r, value.g, value.b)

        channels: tuple[Any, ...] | None = None
        if isinstance(value, Mapping):
            if all(key in value for key in ("r", "g", "b")):
                channels = (value["r"], value["g"], value["b"])
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) == 3:
                channels = tuple(value)

        if channels is None or not all(_is_channel(c) for c in channels):
            raise ColorParseError(value)
        return cls(*channels)

    @classmethod
    def parse(cls, value: ColorLike) -> Color:
        """
        Parse any supported color expression.

        Tried in order: color name, ``rgb(...)``, ``#RRGGBB``, raw triple.
        The first grammar that matches wins.

        Raises:
            ColorParseError: If nothing matches.
        """
        if isinstance(value, str):
            if cls.is_named(value):
                return cls.from_name(value)
            if cls.is_rgb(value):
                return cls.from_rgb_string(value)
            if cls.is_hex(value):
                return cls.from_hex(value)
            raise ColorParseError(value)
        return cls.from_triple(value)


def parse_color(value: ColorLike) -> Color:
    """Parse a color expression into a Color (see ``Color.parse``)."""
    return Color.parse(value)


def resolve_color(value: ColorLike | bool | None) -> RGB:
    """
    Resolve a caller-facing color value to channels.

    ``"none"``, ``None`` and ``False`` disable the channel and map to
    ``NO_COLOR``; anything else is parsed.
    """
    if value is None or value is False:
        return NO_COLOR
    if isinstance(value, str) and value.strip().lower() == "none":
        return NO_COLOR
    return Color.parse(value).to_rgb()  # type: ignore[arg-type]
