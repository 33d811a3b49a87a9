"""Lookup from decimal digit values to their glyphs."""
from __future__ import annotations

import logging
from typing import Callable, Final

from .digit_glyph import DigitGlyph
from .errors import InvalidArgumentError
from .transformations import invert_horizontal, invert_vertical

LOGGER = logging.getLogger(__name__)


def _zero() -> DigitGlyph:
    glyph = DigitGlyph()
    glyph.set_top_bar()
    glyph.set_left_pipe()
    glyph.set_right_pipe()
    glyph.set_bottom_bar()
    return glyph


def _one() -> DigitGlyph:
    glyph = DigitGlyph()
    glyph.set_right_pipe()
    return glyph


def _two() -> DigitGlyph:
    glyph = DigitGlyph()
    glyph.set_top_bar()
    glyph.set_right_top_pipe()
    glyph.set_middle_bar()
    glyph.set_left_bottom_pipe()
    glyph.set_bottom_bar()
    return glyph


def _three() -> DigitGlyph:
    glyph = DigitGlyph()
    glyph.set_top_bar()
    glyph.set_right_pipe()
    glyph.set_middle_bar()
    glyph.set_bottom_bar()
    return glyph


def _four() -> DigitGlyph:
    glyph = DigitGlyph()
    glyph.set_right_pipe()
    glyph.set_left_top_pipe()
    glyph.set_middle_bar()
    return glyph


def _five() -> DigitGlyph:
    return invert_horizontal(_two())


def _six() -> DigitGlyph:
    glyph = _five()
    glyph.set_left_pipe()
    return glyph


def _seven() -> DigitGlyph:
    glyph = _one()
    glyph.set_top_bar()
    return glyph


def _eight() -> DigitGlyph:
    glyph = _three()
    glyph.set_left_pipe()
    return glyph


def _nine() -> DigitGlyph:
    # Horizontal first, then vertical.
    return invert_vertical(invert_horizontal(_six()))


_BUILDERS: Final[tuple[Callable[[], DigitGlyph], ...]] = (
    _zero,
    _one,
    _two,
    _three,
    _four,
    _five,
    _six,
    _seven,
    _eight,
    _nine,
)


def _build_table() -> tuple[DigitGlyph, ...]:
    table = tuple(builder() for builder in _BUILDERS)
    LOGGER.debug("built %d digit glyphs", len(table))
    return table


_DIGIT_GLYPHS: Final[tuple[DigitGlyph, ...]] = _build_table()


def digit_glyph_for(value: int) -> DigitGlyph:
    """Return a fresh copy of the glyph drawing ``value`` (0-9)."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"digit must be an integer, received {value!r}")
    if not 0 <= value < len(_DIGIT_GLYPHS):
        raise InvalidArgumentError(f"digit {value} outside supported range 0-9")
    return _DIGIT_GLYPHS[value].copy()


__all__ = ["digit_glyph_for"]
