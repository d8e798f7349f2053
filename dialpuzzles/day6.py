"""Solve a worksheet of arithmetic problems laid out in columns."""

from __future__ import annotations

import argparse
import math
import re
from collections.abc import Sequence
from pathlib import Path

DEFAULT_INPUT = "12_6.txt"
OPERATORS = ("*", "+")

_INTEGER = re.compile(r"[+-]?[0-9]+")


def read_lines(text: str) -> list[str]:
    """Split the worksheet into its lines."""
    return text.splitlines()


def _row_numbers(line: str) -> list[int]:
    """Numbers of a space-separated row; blanks, non-numbers and zeros are dropped."""
    numbers = []
    for piece in line.split(" "):
        value = int(piece) if _INTEGER.fullmatch(piece) else 0
        if value != 0:
            numbers.append(value)
    return numbers


def solve_rows(lines: Sequence[str]) -> int:
    """Read numbers row by row; each column is one problem. Return the grand total."""
    try:
        split = next(
            index
            for index, line in enumerate(lines)
            if any(op in line for op in OPERATORS)
        )
    except StopIteration:
        raise ValueError("worksheet has no operator line") from None
    rows = [_row_numbers(line) for line in lines[:split]]
    if not rows:
        raise ValueError("worksheet has no number rows")
    operators = [char for char in lines[split] if char in OPERATORS]

    problems = len(rows[0])
    if any(len(row) < problems for row in rows):
        raise ValueError("number rows differ in length")
    if len(operators) < problems:
        raise ValueError("fewer operators than problems")

    total = 0
    for index, operator in enumerate(operators[:problems]):
        column = [row[index] for row in rows]
        total += math.prod(column) if operator == "*" else sum(column)
    return total


def solve_columns(lines: Sequence[str]) -> int:
    """Read each number top to bottom within a column. Return the grand total."""
    lines = list(lines)
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        return 0

    bottom = lines[-1]
    starts = [col for col, char in enumerate(bottom) if char != " "]
    operators = [bottom[col] for col in starts]
    bounds = starts + [len(bottom)]

    data = lines[:-1]
    if not data:
        return 0

    total = 0
    for index, operator in enumerate(operators):
        start, end = bounds[index], bounds[index + 1]
        if index < len(operators) - 1:
            end -= 1
        result = 1 if operator == "*" else 0
        for col in range(start, end):
            number = 0
            for row in data:
                if col >= len(row):
                    raise ValueError("number row is shorter than the operator line")
                char = row[col]
                if char != " ":
                    number = number * 10 + (ord(char) - ord("0"))
            if operator == "*":
                result *= number
            else:
                result += number
        total += result
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a columnar arithmetic worksheet.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT, help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), help="print only this part")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"cannot read {args.path}: {exc}") from exc
    lines = read_lines(text)
    try:
        if args.part in (None, 1):
            print(solve_rows(lines))
        if args.part in (None, 2):
            print(solve_columns(lines))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    return 0