"""Type-preserving flips and concatenations over :class:`MatrixEntity` objects.

Every operation reads its operands and returns a new entity built through the
operand's own ``create_from``; inputs are never mutated, so they can be reused
freely afterwards.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable

from .errors import InvalidArgumentError
from .grid import Grid
from .matrix_entity import EntityT


class Axis(Enum):
    """Direction along which :func:`concat` joins two grids."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def invert_horizontal(entity: EntityT) -> EntityT:
    """Return ``entity`` mirrored left-to-right."""

    source = entity.grid()
    inverted = Grid(source.rows, source.cols)
    last = source.cols - 1
    for row in range(source.rows):
        for col in range(source.cols):
            inverted.set(row, col, source.get(row, last - col))
    return entity.create_from(inverted)


def invert_vertical(entity: EntityT) -> EntityT:
    """Return ``entity`` mirrored top-to-bottom."""

    source = entity.grid()
    inverted = Grid(source.rows, source.cols)
    last = source.rows - 1
    for row in range(source.rows):
        for col in range(source.cols):
            inverted.set(row, col, source.get(last - row, col))
    return entity.create_from(inverted)


def concat(first: EntityT, second: EntityT, axis: Axis) -> EntityT:
    """Join ``second`` after ``first`` along ``axis``.

    The shorter operand on the other axis leaves its uncovered cells blank.
    The result type follows ``first``.
    """

    left = first.grid()
    right = second.grid()
    if axis is Axis.HORIZONTAL:
        result = Grid(max(left.rows, right.rows), left.cols + right.cols)
        result.paste(left, 0, 0)
        result.paste(right, 0, left.cols)
    elif axis is Axis.VERTICAL:
        result = Grid(left.rows + right.rows, max(left.cols, right.cols))
        result.paste(left, 0, 0)
        result.paste(right, left.rows, 0)
    else:
        raise InvalidArgumentError(f"unsupported axis {axis!r}")
    return first.create_from(result)


def concat_all(entities: Iterable[EntityT], axis: Axis) -> EntityT:
    """Left-fold :func:`concat` over ``entities`` in order."""

    items = list(entities)
    if not items:
        raise InvalidArgumentError("cannot concatenate an empty sequence")
    result = items[0].create_from(items[0].grid().copy())
    for item in items[1:]:
        result = concat(result, item, axis)
    return result


__all__ = [
    "Axis",
    "concat",
    "concat_all",
    "invert_horizontal",
    "invert_vertical",
]
