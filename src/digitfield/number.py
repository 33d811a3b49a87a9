"""Multi-digit number glyph built by joining digit glyphs side by side."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .digit_glyph import GLYPH_COLS, DigitGlyph
from .digits import digit_glyph_for
from .errors import InvalidArgumentError
from .grid import Grid
from .matrix_entity import require_non_empty
from .transformations import Axis, concat_all

LOGGER = logging.getLogger(__name__)


class Number:
    """Five-row glyph strip holding one or more digits."""

    def __init__(self, grid: Grid) -> None:
        self._grid = require_non_empty(grid)

    @classmethod
    def from_glyphs(cls, glyphs: Iterable[DigitGlyph]) -> "Number":
        """Concatenate ``glyphs`` left to right into a new number."""

        items = list(glyphs)
        if not items:
            raise InvalidArgumentError("a number needs at least one digit glyph")
        number = cls(concat_all(items, Axis.HORIZONTAL).grid())
        LOGGER.debug("built %d-digit number %dx%d", len(items), *number.grid().shape)
        return number

    @classmethod
    def from_digits(cls, values: Sequence[int]) -> "Number":
        return cls.from_glyphs([digit_glyph_for(value) for value in values])

    @property
    def digit_count(self) -> int:
        return self._grid.cols // GLYPH_COLS

    def grid(self) -> Grid:
        return self._grid

    def set_grid(self, grid: Grid) -> None:
        self._grid = require_non_empty(grid)

    def create_from(self, grid: Grid) -> "Number":
        return Number(grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Number({self._grid!r})"


def build_number(glyphs: Iterable[DigitGlyph]) -> Number:
    """Return the :class:`Number` spelled by ``glyphs``."""

    return Number.from_glyphs(glyphs)


__all__ = ["Number", "build_number"]
