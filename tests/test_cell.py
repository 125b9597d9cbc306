"""Tests for Cell serialization and mutation."""

from ansi_canvas.core.cell import Cell, DisplayOptions
from ansi_canvas.core.color import NO_COLOR, RGB


class TestCell:
    """Tests for Cell state."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.x == 0
        assert cell.y == 0
        assert cell.background == NO_COLOR
        assert cell.foreground == NO_COLOR
        assert cell.display == DisplayOptions()
        assert cell.is_modified is False

    def test_char_is_truncated(self) -> None:
        assert Cell('test').char == 't'
        assert Cell().set_char('abc').char == 'a'

    def test_coordinates_are_floored(self) -> None:
        cell = Cell('x', 2.7, 3.2)
        assert (cell.x, cell.y) == (2, 3)
        cell.set_x(-0.5).set_y(9.99)
        assert (cell.x, cell.y) == (-1, 9)

    def test_create_with_options(self) -> None:
        cell = Cell.create(
            'A',
            x=1,
            y=2,
            background=RGB(1, 2, 3),
            foreground=RGB(4, 5, 6),
            display={'bold': True},
        )
        assert cell.background == RGB(1, 2, 3)
        assert cell.foreground == RGB(4, 5, 6)
        assert cell.display.bold is True
        assert cell.display.dim is False

    def test_set_and_reset_colors(self) -> None:
        cell = Cell()
        cell.set_background(1, 2, 3).set_foreground(4, 5, 6)
        assert cell.background == RGB(1, 2, 3)
        assert cell.foreground == RGB(4, 5, 6)
        cell.reset_background().reset_foreground()
        assert cell.background == NO_COLOR
        assert cell.foreground == NO_COLOR

    def test_set_display_replaces(self) -> None:
        cell = Cell()
        cell.set_display({'bold': True, 'underlined': True})
        assert cell.display == DisplayOptions(bold=True, underlined=True)

        # Omitted attributes are turned off, not merged
        cell.set_display({'dim': True})
        assert cell.display == DisplayOptions(dim=True)

        cell.set_display(DisplayOptions(hidden=True))
        assert cell.display == DisplayOptions(hidden=True)

        cell.reset_display()
        assert cell.display == DisplayOptions()

    def test_reset_marks_dirty(self) -> None:
        cell = Cell.create('X', background=RGB(1, 1, 1), display={'blink': True})
        assert cell.is_modified is False

        cell.reset()
        assert str(cell) == str(Cell())
        assert cell.is_modified is True

    def test_reset_of_blank_cell_still_marks_dirty(self) -> None:
        cell = Cell()
        cell.reset()
        assert cell.is_modified is True


class TestCellSerialization:
    """Tests for Cell.to_sequence / str(cell)."""

    def test_plain_char(self) -> None:
        assert str(Cell('t')) == '\x1b[1;1ft\x1b[0m'
        assert Cell('e', 1, 0).to_sequence() == '\x1b[1;2fe\x1b[0m'

    def test_position_is_one_indexed_row_then_column(self) -> None:
        assert str(Cell('z', 4, 9)) == '\x1b[10;5fz\x1b[0m'

    def test_colors(self) -> None:
        cell = Cell('c').set_background(1, 2, 3).set_foreground(4, 5, 6)
        assert str(cell) == '\x1b[1;1f\x1b[48;2;1;2;3m\x1b[38;2;4;5;6mc\x1b[0m'

    def test_unset_channel_is_skipped(self) -> None:
        cell = Cell('c').set_foreground(-1, -1, -1)
        assert str(cell) == '\x1b[1;1fc\x1b[0m'

    def test_attribute_order_is_fixed(self) -> None:
        cell = Cell('a').set_display({
            'hidden': True,
            'reverse': True,
            'blink': True,
            'underlined': True,
            'dim': True,
            'bold': True,
        })
        assert str(cell) == (
            '\x1b[1;1f'
            '\x1b[1m\x1b[2m\x1b[4m\x1b[5m\x1b[7m\x1b[8m'
            'a\x1b[0m'
        )

    def test_full_order(self) -> None:
        cell = Cell.create(
            '#',
            x=3,
            y=1,
            background=RGB(0, 0, 0),
            foreground=RGB(255, 255, 255),
            display={'underlined': True, 'bold': True},
        )
        assert str(cell) == (
            '\x1b[2;4f'
            '\x1b[48;2;0;0;0m'
            '\x1b[38;2;255;255;255m'
            '\x1b[1m\x1b[4m'
            '#\x1b[0m'
        )

    def test_equal_state_serializes_identically(self) -> None:
        a = Cell.create('q', x=2, y=2, foreground=RGB(9, 9, 9), display={'dim': True})
        b = Cell('q', 2, 2)
        b.set_display(DisplayOptions(dim=True)).set_foreground(9, 9, 9)
        b.is_modified = True
        assert str(a) == str(b)

    def test_dirty_flag_does_not_affect_output(self) -> None:
        cell = Cell('k')
        before = str(cell)
        cell.is_modified = True
        assert str(cell) == before
