from __future__ import annotations

import pytest

from digitfield.errors import GridIndexError, InvalidArgumentError
from digitfield.grid import Grid
from digitfield.number import Number
from digitfield.render import render, render_text
from digitfield.symbols import Symbol


def test_new_grid_is_blank() -> None:
    grid = Grid(2, 3)

    assert grid.shape == (2, 3)
    assert all(symbol is Symbol.BLANK for row in grid.rows_of() for symbol in row)
    assert render(grid) == ["   ", "   "]


def test_set_and_get_round_trip_cells() -> None:
    grid = Grid(2, 2)
    grid.set(1, 0, Symbol.VBAR)

    assert grid.get(1, 0) is Symbol.VBAR
    assert grid.get(0, 0) is Symbol.BLANK


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_out_of_range_access_raises(row: int, col: int) -> None:
    grid = Grid(2, 3)

    with pytest.raises(GridIndexError):
        grid.get(row, col)
    with pytest.raises(IndexError):
        grid.set(row, col, Symbol.HBAR)


def test_negative_dimensions_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        Grid(-1, 2)


def test_set_rejects_non_symbol_values() -> None:
    with pytest.raises(InvalidArgumentError):
        Grid(1, 1).set(0, 0, "|")  # type: ignore[arg-type]


def test_equality_compares_shape_and_cells() -> None:
    first = Grid.from_lines(["|-", "  "])
    second = Grid.from_lines(["|-", "  "])

    assert first == second
    second.set(1, 1, Symbol.VBAR)
    assert first != second
    assert Grid(1, 2) != Grid(2, 1)


def test_copy_is_independent() -> None:
    original = Grid.from_lines(["| "])
    clone = original.copy()
    clone.set(0, 1, Symbol.HBAR)

    assert render(original) == ["| "]
    assert render(clone) == ["|-"]


def test_paste_places_block_at_offset() -> None:
    target = Grid(3, 4)
    target.paste(Grid.from_lines(["||", "--"]), 1, 2)

    assert render_text(target) == "    \n  ||\n  --"


def test_paste_that_overflows_leaves_target_untouched() -> None:
    target = Grid(2, 2)

    with pytest.raises(GridIndexError):
        target.paste(Grid.from_lines(["||", "||"]), 1, 1)
    assert target == Grid(2, 2)


def test_from_lines_rejects_ragged_and_unknown_text() -> None:
    with pytest.raises(InvalidArgumentError):
        Grid.from_lines(["||", "|"])
    with pytest.raises(InvalidArgumentError):
        Grid.from_lines(["x"])


def test_row_and_column_snapshots() -> None:
    grid = Grid.from_lines(["|-", " |"])

    assert grid.row(0) == (Symbol.VBAR, Symbol.HBAR)
    assert grid.column(1) == (Symbol.HBAR, Symbol.VBAR)
    with pytest.raises(GridIndexError):
        grid.row(2)


def test_symbol_text_round_trip() -> None:
    assert [symbol.text for symbol in Symbol] == ["|", "-", " "]
    assert Symbol.from_text("-") is Symbol.HBAR
    with pytest.raises(InvalidArgumentError):
        Symbol.from_text("+")


def test_render_accepts_grid_or_entity() -> None:
    grid = Grid.from_lines(["|-"])

    assert render(grid) == render(Number(grid)) == ["|-"]
