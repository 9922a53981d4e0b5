"""Day 4: a word search for XMAS."""

from __future__ import annotations

from advent2024.day01 import _run_puzzle

_WORD = "XMAS"
_DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]
_ARMS = {"M", "S"}


def _at(grid, row, col):
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def _grid(text):
    return [line for line in text.splitlines() if line]


def count_xmas(grid):
    """Count occurrences of XMAS in all eight directions."""
    return sum(
        all(_at(grid, r + k * dr, c + k * dc) == letter for k, letter in enumerate(_WORD))
        for r, row in enumerate(grid)
        for c, char in enumerate(row)
        if char == _WORD[0]
        for dr, dc in _DIRECTIONS
    )


def count_x_mas(grid):
    """Count the MAS crosses centred on an A."""
    total = 0
    for r, row in enumerate(grid):
        for c, char in enumerate(row):
            if char != "A":
                continue
            falling = {_at(grid, r - 1, c - 1), _at(grid, r + 1, c + 1)}
            rising = {_at(grid, r - 1, c + 1), _at(grid, r + 1, c - 1)}
            total += falling == _ARMS and rising == _ARMS
    return total


def part1(text):
    """Number of XMAS occurrences in the puzzle."""
    return count_xmas(_grid(text))


def part2(text):
    """Number of X-MAS crosses in the puzzle."""
    return count_x_mas(_grid(text))


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day04", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())