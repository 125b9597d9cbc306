"""Output sinks - where escape sequences end up."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Protocol

DEFAULT_ROWS = 24
DEFAULT_COLS = 80


class Sink(Protocol):
    """Anything with a ``write`` method: a text stream, a binary stream, a socket wrapper..."""

    def write(self, data: Any, /) -> Any: ...


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


def sink_size(sink: object) -> TerminalSize:
    """
    Get the size reported by a sink.

    Uses ``columns``/``rows`` attributes when the sink has them, then the
    terminal attached to ``sink.fileno()``, then falls back to 24x80.
    """
    cols = getattr(sink, "columns", None)
    rows = getattr(sink, "rows", None)
    if isinstance(cols, int) and isinstance(rows, int):
        return TerminalSize(rows, cols)

    fileno = getattr(sink, "fileno", None)
    if callable(fileno):
        try:
            size = os.get_terminal_size(fileno())
        except (OSError, ValueError):
            # Not a tty (pipe, file, pytest capture)
            return TerminalSize(DEFAULT_ROWS, DEFAULT_COLS)
        return TerminalSize(size.lines, size.columns)

    return TerminalSize(DEFAULT_ROWS, DEFAULT_COLS)


def emit(sink: Sink, data: str, encoding: str | None = None) -> None:
    """Write data to the sink, encoding it first for binary sinks."""
    sink.write(data.encode(encoding) if encoding else data)
    flush = getattr(sink, "flush", None)
    if callable(flush):
        flush()
