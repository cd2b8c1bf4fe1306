import os

import pytest

from braille_cli_graphics.dot_table import DOT_POSITIONS
from braille_cli_graphics.errors import OutOfBounds
from braille_cli_graphics.surface import Surface, round_half_up


def test_plot_then_read_every_dot() -> None:
    s = Surface(2, 2)
    for y in range(s.pixel_height):
        for x in range(s.pixel_width):
            s.plot(x, y, True)
            assert s.get_dot(x, y)
            s.plot(x, y, False)
            assert not s.get_dot(x, y)
    assert s.data == bytearray(4)


def test_out_of_range_raises_and_leaves_buffer() -> None:
    s = Surface(2, 2)
    s.plot(1, 1)
    before = bytes(s.data)
    for x, y in [(-1, 0), (4, 0), (0, 8), (0, -0.6), (3.6, 0)]:
        with pytest.raises(OutOfBounds):
            s.plot(x, y)
    assert bytes(s.data) == before


def test_out_of_bounds_carries_rounded_point() -> None:
    s = Surface(1, 1)
    with pytest.raises(OutOfBounds) as info:
        s.plot(2.4, 0)
    assert (info.value.x, info.value.y) == (2, 0)
    assert isinstance(info.value, IndexError)


def test_plot_is_idempotent() -> None:
    once = Surface(3, 2)
    twice = Surface(3, 2)
    once.plot(4, 5)
    twice.plot(4, 5)
    twice.plot(4, 5)
    assert once.data == twice.data


def test_cell_mapping_puts_y_zero_at_bottom_line() -> None:
    s = Surface(2, 2)
    s.plot(0, 0)
    # Bottom-left pixel lives in the bottom buffer row, first column
    assert s.data == bytearray([0, 0, DOT_POSITIONS[(0, 0)], 0])

    s.clear()
    s.plot(3, 7)
    assert s.data == bytearray([0, DOT_POSITIONS[(1, 3)], 0, 0])


def test_clearing_one_dot_keeps_its_neighbours() -> None:
    s = Surface(1, 1)
    for y in range(4):
        for x in range(2):
            s.plot(x, y)
    assert s.data[0] == 0xFF
    s.plot(1, 2, False)
    assert s.data[0] == 0xFF & ~DOT_POSITIONS[(1, 2)]


def test_rounding_is_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(1.49) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(-0.6) == -1

    s = Surface(1, 1)
    s.plot(0.5, 0.4)
    assert s.get_dot(1, 0)


def test_lit_dots_and_clear() -> None:
    s = Surface(2, 1)
    s.plot(0, 0)
    s.plot(3, 3)
    assert s.lit_dots() == {(0, 0), (3, 3)}
    s.clear()
    assert s.lit_dots() == set()
    assert len(s.data) == 2


def test_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Surface(0, 4)
    with pytest.raises(ValueError):
        Surface(4, -1)


def test_from_terminal_uses_window_size(monkeypatch) -> None:
    monkeypatch.setattr(
        "braille_cli_graphics.surface.shutil.get_terminal_size",
        lambda fallback: os.terminal_size((10, 5)))
    s = Surface.from_terminal()
    assert (s.width, s.height) == (10, 5)
    assert (s.pixel_width, s.pixel_height) == (20, 20)
    assert s.data == bytearray(50)
