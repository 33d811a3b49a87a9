"""Exception hierarchy shared by the glyph engine and its front ends."""
from __future__ import annotations


class DigitFieldError(Exception):
    """Base class for errors raised by :mod:`digitfield`."""


class InvalidArgumentError(DigitFieldError, ValueError):
    """Raised when an operation receives a value outside its contract."""


class GridIndexError(DigitFieldError, IndexError):
    """Raised when a cell access falls outside the grid dimensions."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"cell ({row}, {col}) outside {rows}x{cols} grid"
        )
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class NumberInputError(InvalidArgumentError):
    """Raised when user-supplied number text cannot be turned into digits."""


__all__ = [
    "DigitFieldError",
    "GridIndexError",
    "InvalidArgumentError",
    "NumberInputError",
]
