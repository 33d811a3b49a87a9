"""Three-symbol alphabet used to draw digit glyphs."""
from __future__ import annotations

from enum import Enum

from .errors import InvalidArgumentError


class Symbol(Enum):
    """Cell value of a glyph grid; the enum value is its textual form."""

    VBAR = "|"
    HBAR = "-"
    BLANK = " "

    @property
    def text(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, char: str) -> "Symbol":
        """Return the symbol rendered as ``char``."""

        try:
            return cls(char)
        except ValueError as exc:
            raise InvalidArgumentError(f"no symbol renders as {char!r}") from exc


__all__ = ["Symbol"]
