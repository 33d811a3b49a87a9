"""Digit glyphs, grid transformations and mirrored coordinate fields."""
from __future__ import annotations

from .coordinate_field import CoordinateField, Mirror, build_coordinate_field
from .digit_glyph import DigitGlyph, set_segment
from .digits import digit_glyph_for
from .errors import (
    DigitFieldError,
    GridIndexError,
    InvalidArgumentError,
    NumberInputError,
)
from .grid import Grid
from .matrix_entity import MatrixEntity
from .number import Number, build_number
from .render import render, render_text
from .segments import Segment
from .symbols import Symbol
from .transformations import (
    Axis,
    concat,
    concat_all,
    invert_horizontal,
    invert_vertical,
)

__all__ = [
    "Axis",
    "CoordinateField",
    "DigitFieldError",
    "DigitGlyph",
    "Grid",
    "GridIndexError",
    "InvalidArgumentError",
    "MatrixEntity",
    "Mirror",
    "Number",
    "NumberInputError",
    "Segment",
    "Symbol",
    "build_coordinate_field",
    "build_number",
    "concat",
    "concat_all",
    "digit_glyph_for",
    "invert_horizontal",
    "invert_vertical",
    "render",
    "render_text",
    "set_segment",
]
