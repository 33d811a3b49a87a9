"""Capability shared by every grid-backed object the transformations accept."""
from __future__ import annotations

from typing import Protocol, TypeVar

from .errors import InvalidArgumentError
from .grid import Grid


EntityT = TypeVar("EntityT", bound="MatrixEntity")


class MatrixEntity(Protocol):
    """Object that exposes a :class:`Grid` and can rebuild itself from one.

    ``create_from(g).grid() == g`` must hold for every grid the concrete type
    accepts.
    """

    def grid(self) -> Grid:
        ...

    def set_grid(self, grid: Grid) -> None:
        ...

    def create_from(self: EntityT, grid: Grid) -> EntityT:
        ...


def require_non_empty(grid: Grid) -> Grid:
    """Return ``grid`` or raise when it has zero rows or zero columns."""

    if grid.is_empty():
        raise InvalidArgumentError(
            f"cannot build an entity from an empty {grid.rows}x{grid.cols} grid"
        )
    return grid


__all__ = ["EntityT", "MatrixEntity", "require_non_empty"]
