"""Build VT100 control sequences."""

from ansi_canvas.core.constants import ESC


def encode(code: str) -> str:
    """Prefix a control code with ESC, e.g. ``encode('[?25l')``."""
    return ESC + code


# Immediate screen-level sequences (bypass the cell grid)
SAVE_SCREEN = encode("[?47h")
RESTORE_SCREEN = encode("[?47l")
HIDE_CURSOR = encode("[?25l")
SHOW_CURSOR = encode("[?25h")
RESET_TERMINAL = encode("c")


def cursor_position(row: int, col: int) -> str:
    """Absolute cursor position (1-indexed)."""
    return encode(f"[{row};{col}f")


def sgr(code: int) -> str:
    """Single SGR (Select Graphic Rendition) sequence."""
    return encode(f"[{int(code)}m")


def background_rgb(r: int, g: int, b: int) -> str:
    """24-bit background color."""
    return encode(f"[48;2;{r};{g};{b}m")


def foreground_rgb(r: int, g: int, b: int) -> str:
    """24-bit foreground color."""
    return encode(f"[38;2;{r};{g};{b}m")
