"""Shared pytest fixtures."""

import pytest

from ansi_canvas.core.canvas import Canvas, CanvasOptions


class RecordingSink:
    """Sink that records every write call."""

    def __init__(self) -> None:
        self.writes: list[str] = []

    def write(self, data: str) -> int:
        self.writes.append(data)
        return len(data)

    @property
    def output(self) -> str:
        return ''.join(self.writes)

    def clear(self) -> None:
        self.writes.clear()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def canvas(sink: RecordingSink) -> Canvas:
    """A 20x10 canvas writing to a recording sink."""
    return Canvas(CanvasOptions(sink=sink, width=20, height=10))
