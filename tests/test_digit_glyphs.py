from __future__ import annotations

import pytest

from digitfield.digit_glyph import DigitGlyph, set_segment
from digitfield.digits import digit_glyph_for
from digitfield.errors import GridIndexError, InvalidArgumentError
from digitfield.grid import Grid
from digitfield.render import render
from digitfield.segments import SEGMENT_COORDINATES, Segment
from digitfield.symbols import Symbol
from digitfield.transformations import invert_horizontal, invert_vertical


EXPECTED_GLYPHS = {
    0: [" -- ", "|  |", "    ", "|  |", " -- "],
    1: ["    ", "   |", "    ", "   |", "    "],
    2: [" -- ", "   |", " -- ", "|   ", " -- "],
    3: [" -- ", "   |", " -- ", "   |", " -- "],
    4: ["    ", "|  |", " -- ", "   |", "    "],
    5: [" -- ", "|   ", " -- ", "   |", " -- "],
    6: [" -- ", "|   ", " -- ", "|  |", " -- "],
    7: [" -- ", "   |", "    ", "   |", "    "],
    8: [" -- ", "|  |", " -- ", "|  |", " -- "],
    9: [" -- ", "|  |", " -- ", "   |", " -- "],
}


@pytest.mark.parametrize("value, expected", sorted(EXPECTED_GLYPHS.items()))
def test_digit_glyph_renders(value: int, expected: list[str]) -> None:
    assert render(digit_glyph_for(value)) == expected


def test_derived_digits_follow_their_recipes() -> None:
    five = invert_horizontal(digit_glyph_for(2))
    assert five == digit_glyph_for(5)

    six = five.copy()
    six.set_left_pipe()
    assert six == digit_glyph_for(6)

    nine = invert_vertical(invert_horizontal(six))
    assert nine == digit_glyph_for(9)


@pytest.mark.parametrize("value", [-1, 10, 42])
def test_digit_out_of_range_rejected(value: int) -> None:
    with pytest.raises(InvalidArgumentError):
        digit_glyph_for(value)


def test_digit_lookup_rejects_non_integers() -> None:
    with pytest.raises(InvalidArgumentError):
        digit_glyph_for(True)
    with pytest.raises(InvalidArgumentError):
        digit_glyph_for("3")  # type: ignore[arg-type]


def test_digit_lookup_returns_independent_copies() -> None:
    glyph = digit_glyph_for(1)
    glyph.set_top_bar()

    assert render(digit_glyph_for(1))[0] == "    "


def test_new_glyph_is_blank_five_by_four() -> None:
    glyph = DigitGlyph()

    assert glyph.grid().shape == (5, 4)
    assert render(glyph) == ["    "] * 5


@pytest.mark.parametrize("row, col", [(5, 0), (0, 4), (-1, 2)])
def test_set_cell_outside_glyph_raises(row: int, col: int) -> None:
    glyph = DigitGlyph()

    with pytest.raises(GridIndexError):
        glyph.set_cell(row, col, Symbol.VBAR)
    with pytest.raises(GridIndexError):
        glyph.get_cell(row, col)


def test_set_segment_writes_every_coordinate() -> None:
    glyph = DigitGlyph()

    set_segment(glyph, Segment.LEFT, Symbol.VBAR)
    set_segment(glyph, "middle", Symbol.HBAR)

    for row, col in SEGMENT_COORDINATES[Segment.LEFT]:
        assert glyph.get_cell(row, col) is Symbol.VBAR
    assert render(glyph) == ["    ", "|   ", "|-- ", "    ", "    "]


def test_set_segment_rejects_unknown_name() -> None:
    with pytest.raises(InvalidArgumentError):
        set_segment(DigitGlyph(), "diagonal", Symbol.VBAR)


def test_half_pipes_touch_single_cells() -> None:
    glyph = DigitGlyph()
    glyph.set_right_bottom_pipe()
    glyph.set_left_top_pipe()

    assert render(glyph) == ["    ", "|   ", "    ", "   |", "    "]


def test_set_positions_is_all_or_nothing() -> None:
    glyph = DigitGlyph()

    with pytest.raises(GridIndexError):
        glyph.set_positions([(0, 0), (5, 0)], Symbol.HBAR)
    assert glyph == DigitGlyph()


def test_glyph_rejects_only_empty_grids() -> None:
    wide = DigitGlyph(Grid(5, 8))

    assert wide.grid().shape == (5, 8)
    with pytest.raises(InvalidArgumentError):
        DigitGlyph(Grid(0, 4))
    with pytest.raises(InvalidArgumentError):
        DigitGlyph().set_grid(Grid(5, 0))
