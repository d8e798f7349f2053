# dialpuzzles

Small solvers for a series of daily puzzles. Each day has a module of plain
functions that work on puzzle text, and a command that reads a puzzle input
file and prints the answers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

Each command takes the path of a puzzle input file as its only positional
argument. When it is left out, the file named in the table is read from the
current directory.

| Command            | Default input | Puzzle                                               |
|--------------------|---------------|------------------------------------------------------|
| `dialpuzzles-day1` | `12_1.txt`    | Count clicks on which a safe dial points at zero     |
| `dialpuzzles-day2` | `12_2.txt`    | Sum product IDs made of repeated digit blocks        |
| `dialpuzzles-day4` | `12_4.txt`    | Count paper rolls a forklift can reach               |
| `dialpuzzles-day5` | `12_5.txt`    | Count fresh ingredient IDs                           |
| `dialpuzzles-day6` | `12_6.txt`    | Add up the answers of a column-laid arithmetic sheet |

`dialpuzzles-day1` prints one number. The other commands print the answer to
part 1 and then the answer to part 2; `--part 1` or `--part 2` prints only
that one.

```
dialpuzzles-day1 input.txt
dialpuzzles-day4 input.txt --part 2
```

A file that cannot be read, or input that cannot be parsed, ends the command
with an error message.

## Library use

```python
from dialpuzzles import day1, day2, day4, day5, day6

rotations = day1.parse_rotations("L68 L30 R48")
print(day1.count_zero_passes(rotations, 50))

ranges = day2.parse_ranges("11-22,95-115")
print(day2.sum_doubled(ranges), day2.sum_repeated(ranges))

grid = day4.parse_grid("..@@.\n@@@.@\n")
print(day4.count_accessible(grid), day4.total_removable(grid))

ranges, ids = day5.parse_database("3-5\n10-14\n\n1\n5\n")
print(day5.count_fresh(ranges, ids), day5.count_covered(ranges))

lines = day6.read_lines("123 328\n 45 64 \n*   +  \n")
print(day6.solve_rows(lines), day6.solve_columns(lines))
```

What each day offers:

- `day1`: `parse_rotations` splits the input into rotation words such as
  `L68`; `count_zero_passes` turns a 100-position dial (starting at 50 by
  default) and counts the clicks on which it points at zero. `L` turns down,
  any other letter turns up.
- `day2`: `parse_ranges` reads comma-separated `head-tail` ranges;
  `is_doubled` and `is_repeated` test a digit string; `sum_doubled` and
  `sum_repeated` add up the numbers in the ranges that pass each test.
- `day4`: `parse_grid` checks that the grid is a non-empty rectangle;
  `count_accessible` counts `@` rolls with fewer than four rolls around them;
  `remove_accessible` removes them all at once and returns the new grid with
  the count; `total_removable` repeats that until nothing more can go.
- `day5`: `parse_database` splits the input at its first blank line into
  `IdRange` values and IDs; `IdRange.parse("3-5")` builds a range and
  `contains` tells whether an ID falls inside it; `count_fresh` counts the
  listed IDs that fall in any range; `count_covered` counts the distinct IDs
  the ranges cover.
- `day6`: `read_lines` splits the worksheet; `solve_rows` reads numbers row by
  row, `solve_columns` reads each number top to bottom within a column, and
  both return the grand total.

Malformed input raises `ValueError`.