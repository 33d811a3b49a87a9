"""Command-line front end that draws a number and its mirrored copies."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, Sequence

from .coordinate_field import CoordinateField, Mirror, build_coordinate_field
from .digits import digit_glyph_for
from .errors import DigitFieldError, NumberInputError
from .field_config import FieldConfig, FieldConfigError, load_field_config
from .number import build_number
from .render import render

LOGGER = logging.getLogger(__name__)

_QUIT = "q"
_INVERT = "i"


def parse_digits(
    text: str, *, max_digits: int = 4, pad_width: int = 4
) -> tuple[int, ...]:
    """Return the digit values spelled by ``text``.

    Input shorter than ``pad_width`` is left-padded with zeros.
    """

    stripped = text.strip()
    if not stripped:
        raise NumberInputError("enter at least one digit")
    if len(stripped) > max_digits:
        raise NumberInputError(
            f"the amount of digits should be between 1 and {max_digits}"
        )
    if not all(char in "0123456789" for char in stripped):
        raise NumberInputError(f"{stripped!r} is not a number")
    if len(stripped) < pad_width:
        stripped = stripped.rjust(pad_width, "0")
    return tuple(int(char) for char in stripped)


def build_field(
    digits: Sequence[int], mirrors: Iterable[Mirror] = ()
) -> CoordinateField:
    """Build the field for ``digits`` and apply ``mirrors`` in order."""

    number = build_number([digit_glyph_for(value) for value in digits])
    coordinate_field = build_coordinate_field(number)
    for mirror in mirrors:
        coordinate_field.fill(mirror)
    return coordinate_field


def write_field(coordinate_field: CoordinateField, stream: IO[str]) -> None:
    for line in render(coordinate_field):
        stream.write(line + "\n")


@dataclass
class InteractiveSession:
    """Prompt-driven loop that reads a number and fills mirrors on request."""

    stdin: IO[str]
    stdout: IO[str]
    config: FieldConfig = field(default_factory=FieldConfig)
    coordinate_field: CoordinateField | None = field(init=False, default=None)

    def _say(self, *lines: str) -> None:
        for line in lines:
            self.stdout.write(line + "\n")

    def _read(self) -> str | None:
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def read_number(self) -> tuple[int, ...] | None:
        """Prompt until a valid number is entered; ``None`` on end of input."""

        while True:
            self._say(
                f"The amount of digits should be between 1 and {self.config.max_digits}",
                "Enter your number:",
            )
            text = self._read()
            if text is None:
                return None
            try:
                return parse_digits(
                    text,
                    max_digits=self.config.max_digits,
                    pad_width=self.config.pad_width,
                )
            except NumberInputError as exc:
                LOGGER.debug("rejected number input %r: %s", text, exc)

    def run(self) -> int:
        digits = self.read_number()
        if digits is None:
            self._say("No valid digits to display.")
            return 1
        self.coordinate_field = build_field(digits, self.config.mirrors)
        write_field(self.coordinate_field, self.stdout)

        while True:
            self._say("What's next?", "Press 'i' to invert", "Press 'q' to exit")
            action = self._read()
            if action is None:
                return 0
            if action == _QUIT:
                self._say("Closing application...")
                return 0
            if action == _INVERT and self._invert_menu():
                return 0

    def _invert_menu(self) -> bool:
        """Run the mirror sub-menu; return ``True`` when the session should end."""

        assert self.coordinate_field is not None
        while True:
            self._say(
                "Which inversion should it be?",
                "Press 'x' to invert the number along the x-axis",
                "Press 'y' to invert the number along the y-axis",
                "Press 'xy' to invert the number along both axes",
                "Press 'q' to exit",
            )
            choice = self._read()
            if choice is None:
                return True
            choice = choice.lower()
            if choice == _QUIT:
                self._say("Closing application...")
                return True
            try:
                mirror = Mirror(choice)
            except ValueError:
                self._say("Invalid input, please try again!")
                continue
            self.coordinate_field.fill(mirror)
            write_field(self.coordinate_field, self.stdout)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed arguments for the coordinate-field CLI."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "number",
        nargs="?",
        default=None,
        help="Digits to draw; omit to start the interactive prompt",
    )
    parser.add_argument(
        "--mirror",
        action="append",
        default=[],
        choices=[mirror.value for mirror in Mirror],
        help="Fill a mirrored quadrant before printing (repeatable)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a TOML file with a [digitfield] table",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to the config value or WARNING)",
    )
    return parser.parse_args(argv)


def _load_config(config_path: Path | None) -> FieldConfig:
    if config_path is None:
        return FieldConfig()
    if not config_path.exists():
        raise SystemExit(f"configuration file not found: {config_path}")
    try:
        return load_field_config(config_path)
    except FieldConfigError as exc:
        raise SystemExit(f"invalid configuration {config_path}: {exc}") from exc


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Entry point for the ``digitfield`` command."""

    args = parse_args(argv)
    config = _load_config(args.config)
    logging.basicConfig(level=getattr(logging, args.log_level or config.log_level or "WARNING"))

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    if args.number is None:
        return InteractiveSession(stdin=stdin, stdout=stdout, config=config).run()

    try:
        digits = parse_digits(
            args.number, max_digits=config.max_digits, pad_width=config.pad_width
        )
        mirrors = list(config.mirrors) + [Mirror(token) for token in args.mirror]
        coordinate_field = build_field(digits, mirrors)
    except DigitFieldError as exc:
        stderr.write(f"error: {exc}\n")
        return 2
    LOGGER.info("drawing %s with mirrors %s", args.number, [m.value for m in mirrors])
    write_field(coordinate_field, stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(main())
