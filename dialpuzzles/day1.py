"""Count how often a 100-position dial passes or lands on zero."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from pathlib import Path

DIAL_SIZE = 100
START_POSITION = 50
DEFAULT_INPUT = "12_1.txt"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _amount(text: str) -> int:
    """Parse a rotation amount; anything that is not an integer counts as zero."""
    return int(text) if _INTEGER.fullmatch(text) else 0


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Quotient and remainder with the quotient rounded toward zero."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def parse_rotations(text: str) -> list[str]:
    """Split the puzzle input into whitespace-separated rotation words."""
    return text.split()


def count_zero_passes(rotations: Iterable[str], start: int = START_POSITION) -> int:
    """Count the clicks on which the dial points at zero while applying rotations.

    A rotation is a direction letter followed by an amount. ``L`` turns the
    dial down; any other letter turns it up.
    """
    position = start
    passes = 0
    for rotation in rotations:
        if not rotation:
            raise ValueError("empty rotation")
        direction = rotation[0]
        turns, step = _trunc_divmod(_amount(rotation[1:]), DIAL_SIZE)
        passes += turns

        if direction == "L":
            _, landed = _trunc_divmod(position - step, DIAL_SIZE)
            if landed <= 0:
                if position != 0:
                    passes += 1
                if landed != 0:
                    landed += DIAL_SIZE
        else:
            _, landed = _trunc_divmod(position + step, DIAL_SIZE)
            if position != 0 and position + step >= DIAL_SIZE:
                passes += 1
        position = landed
    return passes


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count dial passes through zero.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT, help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"cannot read {args.path}: {exc}") from exc
    print(count_zero_passes(parse_rotations(text)))
    return 0