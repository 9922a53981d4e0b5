"""Day 12: fencing garden regions by perimeter and by side count."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass(frozen=True)
class Region:
    """A connected patch of one plant type."""

    plant: str
    cells: frozenset

    @property
    def area(self):
        return len(self.cells)

    @property
    def perimeter(self):
        return sum(
            (r + dr, c + dc) not in self.cells
            for r, c in self.cells
            for dr, dc in _DIRECTIONS
        )

    @property
    def sides(self):
        """Number of straight fence sides, counted at the start of each side."""
        total = 0
        for r, c in self.cells:
            for index, (dr, dc) in enumerate(_DIRECTIONS):
                if (r + dr, c + dc) in self.cells:
                    continue
                lr, lc = _DIRECTIONS[index - 1]
                beside = (r + lr, c + lc)
                if beside not in self.cells or (beside[0] + dr, beside[1] + dc) in self.cells:
                    total += 1
        return total


def regions(grid):
    """Yield every region of the grid, in reading order of their first cell."""
    plants = {(r, c): char for r, row in enumerate(grid) for c, char in enumerate(row)}
    seen = set()
    for start, plant in plants.items():
        if start in seen:
            continue
        seen.add(start)
        cells = {start}
        stack = [start]
        while stack:
            r, c = stack.pop()
            for dr, dc in _DIRECTIONS:
                neighbour = (r + dr, c + dc)
                if neighbour not in seen and plants.get(neighbour) == plant:
                    seen.add(neighbour)
                    cells.add(neighbour)
                    stack.append(neighbour)
        yield Region(plant, frozenset(cells))


def _grid(text):
    return [line.strip() for line in text.splitlines() if line.strip()]


def part1(text):
    """Total fence price using area times perimeter."""
    return sum(region.area * region.perimeter for region in regions(_grid(text)))


def part2(text):
    """Total fence price using area times number of sides."""
    return sum(region.area * region.sides for region in regions(_grid(text)))


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day12")
    parser.add_argument("input", nargs="?", default="-", help="input file (default: stdin)")
    parser.add_argument("--part", type=int, choices=(1, 2))
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solvers = {1: part1, 2: part2}
    for part in [args.part] if args.part else [1, 2]:
        print(solvers[part](text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())