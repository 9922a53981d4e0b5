"""Day 2: checking reactor reports for safe level changes."""

from __future__ import annotations

from itertools import combinations, pairwise

from advent2024.day01 import _run_puzzle


def parse(text):
    """Return one list of levels per non-blank line."""
    return [[int(token) for token in line.split()] for line in text.splitlines() if line.strip()]


def is_safe(levels):
    """True if the levels strictly rise or fall by 1 to 3 at every step."""
    steps = [b - a for a, b in pairwise(levels)]
    return all(1 <= step <= 3 for step in steps) or all(-3 <= step <= -1 for step in steps)


def is_safe_with_removal(levels):
    """True if the report is safe, or becomes safe after dropping one level."""
    levels = list(levels)
    if is_safe(levels):
        return True
    return any(is_safe(rest) for rest in combinations(levels, len(levels) - 1))


def part1(text):
    """Number of safe reports."""
    return sum(is_safe(levels) for levels in parse(text))


def part2(text):
    """Number of reports that are safe with the problem dampener."""
    return sum(is_safe_with_removal(levels) for levels in parse(text))


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day02", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())