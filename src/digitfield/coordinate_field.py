"""Four-quadrant field that mirrors a number across two axis lines."""
from __future__ import annotations

import logging
from enum import Enum

from .errors import InvalidArgumentError
from .grid import Grid
from .number import Number
from .symbols import Symbol
from .transformations import invert_horizontal, invert_vertical

LOGGER = logging.getLogger(__name__)


class Mirror(Enum):
    """Mirrored quadrants that can be filled, keyed by their menu token."""

    HORIZONTAL = "x"
    VERTICAL = "y"
    BOTH = "xy"

    @classmethod
    def from_token(cls, token: str) -> "Mirror":
        try:
            return cls(token.strip().lower())
        except ValueError as exc:
            raise InvalidArgumentError(f"unknown mirror {token!r}") from exc


class CoordinateField:
    """Number placed in the top-left quadrant of a ``(2R+1)×(2C+1)`` grid.

    Row ``R`` holds the horizontal axis and column ``C`` the vertical one; the
    crossing cell belongs to the horizontal axis.  The remaining quadrants stay
    blank until the matching ``fill_*`` call places a mirrored copy of the
    original number there.  Each fill happens at most once.
    """

    def __init__(self, number: Number) -> None:
        self._number = number
        # Fills read this snapshot, not the caller's live grid.
        self._source = number.create_from(number.grid().copy())
        self._number_rows, self._number_cols = self._source.grid().shape
        self._grid = self._seed()
        self._filled: dict[Mirror, bool] = {mirror: False for mirror in Mirror}

    def _seed(self) -> Grid:
        rows, cols = self._number_rows, self._number_cols
        grid = Grid(rows * 2 + 1, cols * 2 + 1)
        grid.paste(self._source.grid(), 0, 0)
        for col in range(grid.cols):
            grid.set(rows, col, Symbol.HBAR)
        for row in range(grid.rows):
            if row != rows:
                grid.set(row, cols, Symbol.VBAR)
        return grid

    @property
    def number(self) -> Number:
        return self._number

    @property
    def horizontal_filled(self) -> bool:
        return self._filled[Mirror.HORIZONTAL]

    @property
    def vertical_filled(self) -> bool:
        return self._filled[Mirror.VERTICAL]

    @property
    def both_filled(self) -> bool:
        return self._filled[Mirror.BOTH]

    @property
    def is_complete(self) -> bool:
        return all(self._filled.values())

    def grid(self) -> Grid:
        """Return a copy of the composed field."""

        return self._grid.copy()

    def fill_horizontal_mirror(self) -> None:
        if self._skip(Mirror.HORIZONTAL):
            return
        mirrored = invert_horizontal(self._source)
        self._grid.paste(mirrored.grid(), 0, self._number_cols + 1)
        self._mark(Mirror.HORIZONTAL)

    def fill_vertical_mirror(self) -> None:
        if self._skip(Mirror.VERTICAL):
            return
        mirrored = invert_vertical(self._source)
        self._grid.paste(mirrored.grid(), self._number_rows + 1, 0)
        self._mark(Mirror.VERTICAL)

    def fill_both_mirror(self) -> None:
        if self._skip(Mirror.BOTH):
            return
        # Vertical first, then horizontal.
        mirrored = invert_horizontal(invert_vertical(self._source))
        self._grid.paste(
            mirrored.grid(), self._number_rows + 1, self._number_cols + 1
        )
        self._mark(Mirror.BOTH)

    def fill(self, mirror: Mirror | str) -> bool:
        """Fill the quadrant for ``mirror``; return ``True`` if it changed."""

        if not isinstance(mirror, Mirror):
            mirror = Mirror.from_token(mirror)
        already = self._filled[mirror]
        if mirror is Mirror.HORIZONTAL:
            self.fill_horizontal_mirror()
        elif mirror is Mirror.VERTICAL:
            self.fill_vertical_mirror()
        else:
            self.fill_both_mirror()
        return not already

    def _skip(self, mirror: Mirror) -> bool:
        if self._filled[mirror]:
            LOGGER.debug("%s mirror already filled", mirror.name.lower())
            return True
        return False

    def _mark(self, mirror: Mirror) -> None:
        self._filled[mirror] = True
        LOGGER.debug("filled %s mirror", mirror.name.lower())

    def __repr__(self) -> str:
        filled = ",".join(m.value for m, done in self._filled.items() if done)
        return f"CoordinateField({self._grid!r}, filled=[{filled}])"


def build_coordinate_field(number: Number) -> CoordinateField:
    """Return a field seeded with ``number`` and both axis lines."""

    return CoordinateField(number)


__all__ = ["CoordinateField", "Mirror", "build_coordinate_field"]
