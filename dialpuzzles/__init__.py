"""Solvers for daily puzzles: dials, repeated IDs, paper rolls, fresh IDs and column arithmetic."""

__version__ = "0.1.0"
__all__ = ["day1", "day2", "day4", "day5", "day6"]