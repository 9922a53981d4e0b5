"""Solutions to the 2024 Advent of Code puzzles, days 1 to 16 and 18 to 20."""

__version__ = "1.0.0"