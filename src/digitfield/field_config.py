"""TOML configuration for the coordinate-field command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import tomllib

from .coordinate_field import Mirror


VALID_DIGIT_RANGE = range(1, 17)
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_KNOWN_KEYS = frozenset({"max_digits", "pad_width", "mirrors", "log_level"})


class FieldConfigError(ValueError):
    """Raised when a field configuration file fails validation."""


@dataclass(frozen=True)
class FieldConfig:
    """Input limits and start-up mirrors used by the CLI."""

    max_digits: int = 4
    pad_width: int = 4
    mirrors: tuple[Mirror, ...] = ()
    log_level: str | None = None

    def __post_init__(self) -> None:
        if self.max_digits not in VALID_DIGIT_RANGE:
            raise FieldConfigError(
                f"max_digits {self.max_digits} outside supported range "
                f"{VALID_DIGIT_RANGE.start}-{VALID_DIGIT_RANGE.stop - 1}"
            )
        if not 0 <= self.pad_width <= self.max_digits:
            raise FieldConfigError(
                f"pad_width {self.pad_width} must be between 0 and max_digits"
            )
        object.__setattr__(self, "mirrors", tuple(self.mirrors))


def load_field_config(config_path: Path) -> FieldConfig:
    """Parse and validate the field configuration at ``config_path``."""

    with config_path.open("rb") as stream:
        try:
            raw_data = tomllib.load(stream)
        except tomllib.TOMLDecodeError as exc:
            raise FieldConfigError(f"{config_path}: {exc}") from exc

    section = _parse_section(raw_data)
    unknown = sorted(set(section) - _KNOWN_KEYS)
    if unknown:
        raise FieldConfigError(f"unknown [digitfield] keys: {', '.join(unknown)}")

    defaults = FieldConfig()
    max_digits = _coerce_int(section.get("max_digits", defaults.max_digits), "max_digits")
    pad_width = _coerce_int(
        section.get("pad_width", min(defaults.pad_width, max_digits)), "pad_width"
    )
    return FieldConfig(
        max_digits=max_digits,
        pad_width=pad_width,
        mirrors=_parse_mirrors(section.get("mirrors", [])),
        log_level=_parse_log_level(section.get("log_level")),
    )


def _parse_section(data: Mapping[str, Any]) -> Mapping[str, Any]:
    section = data.get("digitfield")
    if section is None:
        raise FieldConfigError("field configuration requires a [digitfield] table")
    if not isinstance(section, Mapping):
        raise FieldConfigError("[digitfield] section must be a mapping")
    return section


def _coerce_int(raw: Any, name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise FieldConfigError(f"{name} must be an integer, received {raw!r}")
    return raw


def _parse_mirrors(raw: Any) -> tuple[Mirror, ...]:
    if not isinstance(raw, list):
        raise FieldConfigError("mirrors must be an array of strings")
    mirrors: list[Mirror] = []
    for index, entry in enumerate(raw, start=1):
        if not isinstance(entry, str):
            raise FieldConfigError(f"mirror #{index} must be a string, received {entry!r}")
        try:
            mirrors.append(Mirror(entry.strip().lower()))
        except ValueError as exc:
            raise FieldConfigError(
                f"mirror #{index} must be one of x, y, xy; received {entry!r}"
            ) from exc
    return tuple(mirrors)


def _parse_log_level(raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str) or raw.upper() not in VALID_LOG_LEVELS:
        raise FieldConfigError(f"invalid log_level: {raw!r}")
    return raw.upper()


__all__ = [
    "FieldConfig",
    "FieldConfigError",
    "load_field_config",
]
