"""Text rendering of symbol grids."""
from __future__ import annotations

from typing import Protocol

from .grid import Grid


class _HasGrid(Protocol):
    def grid(self) -> Grid:
        ...


GridLike = Grid | _HasGrid


def _resolve_grid(grid_like: GridLike) -> Grid:
    if isinstance(grid_like, Grid):
        return grid_like
    return grid_like.grid()


def render(grid_like: GridLike) -> list[str]:
    """Return one line of symbol text per grid row."""

    grid = _resolve_grid(grid_like)
    return ["".join(symbol.text for symbol in cells) for cells in grid.rows_of()]


def render_text(grid_like: GridLike) -> str:
    return "\n".join(render(grid_like))


__all__ = ["GridLike", "render", "render_text"]
