"""Named regions of a 5×4 digit glyph and the cells each one covers."""
from __future__ import annotations

from enum import Enum, auto
from types import MappingProxyType
from typing import Final, Mapping

from .errors import InvalidArgumentError


class Segment(Enum):
    """Drawable region of a digit glyph."""

    TOP = auto()
    MIDDLE = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    LTOP = auto()
    LBOTTOM = auto()
    RTOP = auto()
    RBOTTOM = auto()


Coordinate = tuple[int, int]

SEGMENT_COORDINATES: Final[Mapping[Segment, tuple[Coordinate, ...]]] = MappingProxyType(
    {
        Segment.TOP: ((0, 1), (0, 2)),
        Segment.MIDDLE: ((2, 1), (2, 2)),
        Segment.BOTTOM: ((4, 1), (4, 2)),
        Segment.LEFT: ((1, 0), (2, 0)),
        Segment.RIGHT: ((1, 3), (2, 3)),
        Segment.LTOP: ((1, 0),),
        Segment.LBOTTOM: ((3, 0),),
        Segment.RTOP: ((1, 3),),
        Segment.RBOTTOM: ((3, 3),),
    }
)


def resolve_segment(segment: Segment | str) -> Segment:
    """Accept a :class:`Segment` or its case-insensitive name."""

    if isinstance(segment, Segment):
        return segment
    try:
        return Segment[str(segment).strip().upper()]
    except KeyError as exc:
        raise InvalidArgumentError(f"unknown segment {segment!r}") from exc


def segment_coordinates(segment: Segment | str) -> tuple[Coordinate, ...]:
    return SEGMENT_COORDINATES[resolve_segment(segment)]


__all__ = [
    "Coordinate",
    "SEGMENT_COORDINATES",
    "Segment",
    "resolve_segment",
    "segment_coordinates",
]
