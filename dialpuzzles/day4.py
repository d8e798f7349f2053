"""Find paper rolls on a grid that a forklift can reach."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from pathlib import Path

ROLL = "@"
EMPTY = "."
CROWD_LIMIT = 4
DEFAULT_INPUT = "12_4.txt"

_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _dimensions(grid: Sequence[str]) -> tuple[int, int]:
    if not grid:
        raise ValueError("grid is empty")
    cols = len(grid[0])
    if any(len(line) != cols for line in grid):
        raise ValueError("grid rows differ in length")
    return len(grid), cols


def parse_grid(text: str) -> list[str]:
    """Split the input into grid rows, checking that it is a non-empty rectangle."""
    grid = text.splitlines()
    _dimensions(grid)
    return grid


def _accessible_cells(grid: Sequence[str]) -> Iterator[tuple[int, int]]:
    rows, cols = _dimensions(grid)
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell != ROLL:
                continue
            neighbours = sum(
                1
                for dr, dc in _OFFSETS
                if 0 <= row + dr < rows
                and 0 <= col + dc < cols
                and grid[row + dr][col + dc] == ROLL
            )
            if neighbours < CROWD_LIMIT:
                yield row, col


def count_accessible(grid: Sequence[str]) -> int:
    """Count rolls with fewer than four rolls among their eight neighbours."""
    return sum(1 for _ in _accessible_cells(grid))


def remove_accessible(grid: Sequence[str]) -> tuple[list[str], int]:
    """Remove every accessible roll at once; return the new grid and how many went."""
    accessible = set(_accessible_cells(grid))
    remaining = [
        "".join(
            EMPTY if (row, col) in accessible else cell
            for col, cell in enumerate(line)
        )
        for row, line in enumerate(grid)
    ]
    return remaining, len(accessible)


def total_removable(grid: Sequence[str]) -> int:
    """Repeatedly remove accessible rolls until none are left; return the total."""
    total = 0
    current = list(grid)
    while True:
        current, removed = remove_accessible(current)
        if removed == 0:
            return total
        total += removed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count reachable paper rolls.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT, help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="print only this part")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"cannot read {args.path}: {exc}") from exc
    try:
        grid = parse_grid(text)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if args.part in (None, 1):
        print(count_accessible(grid))
    if args.part in (None, 2):
        print(total_removable(grid))
    return 0