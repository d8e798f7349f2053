"""Check ingredient IDs against inclusive fresh-ID ranges."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = "12_5.txt"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _integer(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


@dataclass(frozen=True)
class IdRange:
    """An inclusive range of IDs."""

    head: int
    tail: int

    @classmethod
    def parse(cls, text: str) -> IdRange:
        """Parse a ``head-tail`` line."""
        parts = text.split("-")
        if len(parts) < 2:
            raise ValueError(f"malformed range: {text!r}")
        return cls(_integer(parts[0]), _integer(parts[1]))

    def contains(self, value: int) -> bool:
        return self.head <= value <= self.tail


def parse_database(text: str) -> tuple[list[IdRange], list[int]]:
    """Split the input at its first blank line into ranges and available IDs."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("no blank line separating ranges from IDs") from None
    ranges = [IdRange.parse(line) for line in lines[:blank]]
    ids = [_integer(line) for line in lines[blank + 1 :]]
    return ranges, ids


def count_fresh(ranges: Iterable[IdRange], ids: Sequence[int]) -> int:
    """Count the listed IDs (each listing separately) that fall in any range."""
    ranges = list(ranges)
    return sum(1 for value in ids if any(r.contains(value) for r in ranges))


def count_covered(ranges: Iterable[IdRange]) -> int:
    """Count the distinct IDs covered by the ranges, merging overlaps and neighbours."""
    ordered = sorted(ranges, key=lambda r: r.head)
    if not ordered:
        return 0
    total = 0
    head, tail = ordered[0].head, ordered[0].tail
    for following in ordered[1:]:
        if following.head <= tail + 1:
            tail = max(tail, following.tail)
        else:
            total += tail - head + 1
            head, tail = following.head, following.tail
    return total + tail - head + 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count fresh ingredient IDs.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT, help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="print only this part")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"cannot read {args.path}: {exc}") from exc
    try:
        ranges, ids = parse_database(text)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if args.part in (None, 1):
        print(count_fresh(ranges, ids))
    if args.part in (None, 2):
        print(count_covered(ranges))
    return 0