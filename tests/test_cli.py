"""Tests for the command line interface."""

import json

import pytest

typer = pytest.importorskip("typer")
from typer.testing import CliRunner  # noqa: E402

from ansi_canvas.cli.app import create_app  # noqa: E402

runner = CliRunner()


class TestColorCommand:
    """Tests for `ansi-canvas color`."""

    def test_json(self) -> None:
        result = runner.invoke(create_app(), ["color", "rgb(0, 100, 200)", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"hex": "#0064c8", "r": 0, "g": 100, "b": 200}

    def test_pretty(self) -> None:
        result = runner.invoke(create_app(), ["color", "#102030"])
        assert result.exit_code == 0
        assert "#102030" in result.stdout
        assert "rgb(16, 32, 48)" in result.stdout

    def test_invalid(self) -> None:
        result = runner.invoke(create_app(), ["color", "not a color"])
        assert result.exit_code == 1
        assert "can't be parsed" in result.stdout


class TestDrawCommand:
    """Tests for `ansi-canvas draw`."""

    def test_draw(self) -> None:
        result = runner.invoke(
            create_app(),
            ["draw", "Hi", "--x", "2", "--y", "1", "--fg", "#ff0000", "--bold", "--width", "10", "--height", "3"],
        )
        assert result.exit_code == 0
        assert result.stdout == (
            '\x1b[2;3f\x1b[38;2;255;0;0m\x1b[1mH\x1b[0m'
            '\x1b[2;4f\x1b[38;2;255;0;0m\x1b[1mi\x1b[0m'
        )

    def test_draw_clips_to_width(self) -> None:
        result = runner.invoke(create_app(), ["draw", "abcdef", "--x", "2", "--width", "4", "--height", "1"])
        assert result.exit_code == 0
        assert result.stdout == '\x1b[1;3fa\x1b[0m\x1b[1;4fb\x1b[0m'

    def test_draw_has_no_per_attribute_flags(self) -> None:
        result = runner.invoke(create_app(), ["draw", "x", "--blink", "--width", "4", "--height", "1"])
        assert result.exit_code == 2

    def test_draw_bad_color(self) -> None:
        result = runner.invoke(create_app(), ["draw", "x", "--bg", "nope", "--width", "4", "--height", "1"])
        assert result.exit_code == 1
