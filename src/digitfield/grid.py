"""Fixed-size two-dimensional container of :class:`Symbol` cells."""
from __future__ import annotations

from typing import Iterable, Iterator

from .errors import GridIndexError, InvalidArgumentError
from .symbols import Symbol


class Grid:
    """Rectangular ``rows`` × ``cols`` symbol matrix with bounds-checked access.

    Dimensions are fixed at construction and every cell starts out as
    :attr:`Symbol.BLANK`.  Two grids compare equal when they share the same
    shape and the same symbol in every cell.
    """

    __slots__ = ("_rows", "_cols", "_cells")

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise InvalidArgumentError(
                f"grid dimensions must not be negative, received {rows}x{cols}"
            )
        self._rows = int(rows)
        self._cols = int(cols)
        self._cells: list[list[Symbol]] = [
            [Symbol.BLANK] * self._cols for _ in range(self._rows)
        ]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """Build a grid from rendered text, one string per row."""

        rows = list(lines)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise InvalidArgumentError("grid lines must all have the same length")
        grid = cls(len(rows), width)
        for row_index, row in enumerate(rows):
            grid._cells[row_index] = [Symbol.from_text(char) for char in row]
        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def is_empty(self) -> bool:
        """Return ``True`` when the grid has no rows or no columns."""

        return self._rows == 0 or self._cols == 0

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise GridIndexError(row, col, self._rows, self._cols)

    def get(self, row: int, col: int) -> Symbol:
        self._check(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, symbol: Symbol) -> None:
        self._check(row, col)
        if not isinstance(symbol, Symbol):
            raise InvalidArgumentError(f"expected a Symbol, received {symbol!r}")
        self._cells[row][col] = symbol

    def row(self, index: int) -> tuple[Symbol, ...]:
        """Return a snapshot of row ``index``."""

        if not 0 <= index < self._rows:
            raise GridIndexError(index, 0, self._rows, self._cols)
        return tuple(self._cells[index])

    def rows_of(self) -> Iterator[tuple[Symbol, ...]]:
        for cells in self._cells:
            yield tuple(cells)

    def column(self, index: int) -> tuple[Symbol, ...]:
        """Return a snapshot of column ``index``."""

        if not 0 <= index < self._cols:
            raise GridIndexError(0, index, self._rows, self._cols)
        return tuple(cells[index] for cells in self._cells)

    def copy(self) -> "Grid":
        clone = Grid(self._rows, self._cols)
        clone._cells = [list(cells) for cells in self._cells]
        return clone

    def paste(self, source: "Grid", row: int = 0, col: int = 0) -> None:
        """Copy ``source`` into this grid with its top-left cell at ``(row, col)``.

        The whole block must fit; nothing is written when it does not.
        """

        if source.is_empty():
            return
        self._check(row, col)
        self._check(row + source.rows - 1, col + source.cols - 1)
        for offset, cells in enumerate(source._cells):
            self._cells[row + offset][col : col + source.cols] = cells

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"


__all__ = ["Grid"]
