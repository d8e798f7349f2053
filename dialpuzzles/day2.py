"""Sum product IDs in ranges whose digits are made of a repeated block."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from pathlib import Path

DEFAULT_INPUT = "12_2.txt"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _integer(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Parse comma-separated ``head-tail`` ranges; line breaks are ignored."""
    joined = "".join(text.splitlines())
    ranges = []
    for piece in joined.split(","):
        parts = piece.split("-")
        if len(parts) < 2:
            raise ValueError(f"malformed range: {piece!r}")
        ranges.append((_integer(parts[0]), _integer(parts[1])))
    return ranges


def is_doubled(digits: str) -> bool:
    """True when the string is some block written exactly twice."""
    if len(digits) % 2:
        return False
    middle = len(digits) // 2
    return digits[:middle] == digits[middle:]


def is_repeated(digits: str) -> bool:
    """True when the string is some block written two or more times."""
    length = len(digits)
    if length < 2:
        return False
    return any(
        digits[:size] * (length // size) == digits
        for size in range(1, length // 2 + 1)
        if length % size == 0
    )


def _sum_matching(ranges: Iterable[tuple[int, int]], predicate) -> int:
    return sum(
        number
        for head, tail in ranges
        for number in range(head, tail + 1)
        if predicate(str(number))
    )


def sum_doubled(ranges: Iterable[tuple[int, int]]) -> int:
    """Sum every number in the inclusive ranges whose digits are a doubled block."""
    return _sum_matching(ranges, is_doubled)


def sum_repeated(ranges: Iterable[tuple[int, int]]) -> int:
    """Sum every number in the inclusive ranges whose digits are a repeated block."""
    return _sum_matching(ranges, is_repeated)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum IDs made of repeated digit blocks.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT, help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="print only this part")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"cannot read {args.path}: {exc}") from exc
    try:
        ranges = parse_ranges(text)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if args.part in (None, 1):
        print(sum_doubled(ranges))
    if args.part in (None, 2):
        print(sum_repeated(ranges))
    return 0