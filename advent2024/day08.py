"""Day 8: counting antinodes of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from itertools import count, permutations

from advent2024.day01 import _run_puzzle


def parse(text):
    """Return (height, width, {frequency: [positions]}) for the antenna map."""
    rows = [line for line in text.splitlines() if line.strip()]
    antennas = defaultdict(list)
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char != ".":
                antennas[char].append((r, c))
    width = max(map(len, rows), default=0)
    return len(rows), width, dict(antennas)


def _count_antinodes(text, harmonics):
    height, width, antennas = parse(text)

    def inside(row, col):
        return 0 <= row < height and 0 <= col < width

    found = set()
    for positions in antennas.values():
        for (r1, c1), (r2, c2) in permutations(positions, 2):
            dr, dc = r2 - r1, c2 - c1
            if harmonics:
                for k in count(1):
                    point = (r1 + k * dr, c1 + k * dc)
                    if not inside(*point):
                        break
                    found.add(point)
            else:
                point = (r1 + 2 * dr, c1 + 2 * dc)
                if inside(*point):
                    found.add(point)
    return len(found)


def part1(text):
    """Distinct in-map antinodes at twice the distance between antenna pairs."""
    return _count_antinodes(text, harmonics=False)


def part2(text):
    """Distinct in-map antinodes anywhere along the line through each pair."""
    return _count_antinodes(text, harmonics=True)


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day08", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())