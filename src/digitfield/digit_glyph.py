"""Single-digit glyph entity and its segment writers."""
from __future__ import annotations

from typing import Iterable

from .errors import GridIndexError
from .grid import Grid
from .matrix_entity import require_non_empty
from .segments import Coordinate, Segment, segment_coordinates
from .symbols import Symbol

GLYPH_ROWS = 5
GLYPH_COLS = 4


class DigitGlyph:
    """Drawing of one decimal digit.

    A new glyph is five rows by four columns and the cell writers address that
    area.  Transformations may rebuild a glyph around any non-empty grid, so
    concatenated glyphs keep their type.
    """

    def __init__(self, grid: Grid | None = None) -> None:
        if grid is None:
            grid = Grid(GLYPH_ROWS, GLYPH_COLS)
        self._grid = require_non_empty(grid)

    # MatrixEntity

    def grid(self) -> Grid:
        return self._grid

    def set_grid(self, grid: Grid) -> None:
        self._grid = require_non_empty(grid)

    def create_from(self, grid: Grid) -> "DigitGlyph":
        return DigitGlyph(grid)

    def copy(self) -> "DigitGlyph":
        return DigitGlyph(self._grid.copy())

    # Cell access

    def set_cell(self, row: int, col: int, symbol: Symbol) -> None:
        if not (0 <= row < GLYPH_ROWS and 0 <= col < GLYPH_COLS):
            raise GridIndexError(row, col, GLYPH_ROWS, GLYPH_COLS)
        self._grid.set(row, col, symbol)

    def get_cell(self, row: int, col: int) -> Symbol:
        if not (0 <= row < GLYPH_ROWS and 0 <= col < GLYPH_COLS):
            raise GridIndexError(row, col, GLYPH_ROWS, GLYPH_COLS)
        return self._grid.get(row, col)

    def set_positions(self, positions: Iterable[Coordinate], symbol: Symbol) -> None:
        # Validate every position first so a bad entry leaves the glyph untouched.
        cells = list(positions)
        for row, col in cells:
            if not (0 <= row < GLYPH_ROWS and 0 <= col < GLYPH_COLS):
                raise GridIndexError(row, col, GLYPH_ROWS, GLYPH_COLS)
        for row, col in cells:
            self.set_cell(row, col, symbol)

    def set_segment(self, segment: Segment | str, symbol: Symbol) -> None:
        self.set_positions(segment_coordinates(segment), symbol)

    # Named segment writers

    def set_top_bar(self) -> None:
        self.set_segment(Segment.TOP, Symbol.HBAR)

    def set_middle_bar(self) -> None:
        self.set_segment(Segment.MIDDLE, Symbol.HBAR)

    def set_bottom_bar(self) -> None:
        self.set_segment(Segment.BOTTOM, Symbol.HBAR)

    def set_right_pipe(self) -> None:
        self.set_segment(Segment.RTOP, Symbol.VBAR)
        self.set_segment(Segment.RBOTTOM, Symbol.VBAR)

    def set_left_pipe(self) -> None:
        self.set_segment(Segment.LTOP, Symbol.VBAR)
        self.set_segment(Segment.LBOTTOM, Symbol.VBAR)

    def set_right_top_pipe(self) -> None:
        self.set_segment(Segment.RTOP, Symbol.VBAR)

    def set_left_top_pipe(self) -> None:
        self.set_segment(Segment.LTOP, Symbol.VBAR)

    def set_right_bottom_pipe(self) -> None:
        self.set_segment(Segment.RBOTTOM, Symbol.VBAR)

    def set_left_bottom_pipe(self) -> None:
        self.set_segment(Segment.LBOTTOM, Symbol.VBAR)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitGlyph):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DigitGlyph({self._grid!r})"


def set_segment(glyph: DigitGlyph, segment: Segment | str, symbol: Symbol) -> None:
    """Write ``symbol`` into every cell covered by ``segment``."""

    glyph.set_segment(segment, symbol)


__all__ = ["DigitGlyph", "GLYPH_COLS", "GLYPH_ROWS", "set_segment"]
