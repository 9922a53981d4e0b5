"""Day 10: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from advent2024.day01 import _run_puzzle

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_PEAK = 9


def parse(text):
    """Return {(row, col): height} for every digit on the map."""
    return {
        (r, c): int(char)
        for r, line in enumerate(text.splitlines())
        for c, char in enumerate(line)
        if char.isdigit()
    }


def _uphill(heights, position):
    r, c = position
    target = heights[position] + 1
    for dr, dc in _STEPS:
        neighbour = (r + dr, c + dc)
        if heights.get(neighbour) == target:
            yield neighbour


def _trailheads(heights):
    return [position for position, height in heights.items() if height == 0]


def _peaks_reachable(heights, start):
    seen = {start}
    stack = [start]
    peaks = set()
    while stack:
        position = stack.pop()
        if heights[position] == _PEAK:
            peaks.add(position)
            continue
        for neighbour in _uphill(heights, position):
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return peaks


def part1(text):
    """Sum over trailheads of the number of distinct peaks they reach."""
    heights = parse(text)
    return sum(len(_peaks_reachable(heights, head)) for head in _trailheads(heights))


def part2(text):
    """Sum over trailheads of the number of distinct trails to any peak."""
    heights = parse(text)
    ratings = {}

    def rating(position):
        if heights[position] == _PEAK:
            return 1
        if position not in ratings:
            ratings[position] = sum(rating(step) for step in _uphill(heights, position))
        return ratings[position]

    return sum(rating(head) for head in _trailheads(heights))


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day10", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())