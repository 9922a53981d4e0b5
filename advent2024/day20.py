"""Day 20: counting shortcuts through the walls of a race track."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_MIN_SAVE = 100
_SHORT_CHEAT = 2
_LONG_CHEAT = 20


@dataclass(frozen=True)
class Racetrack:
    """Open track cells of the map with the start and end cells."""

    open_cells: frozenset
    start: tuple
    end: tuple

    @classmethod
    def parse(cls, text):
        """Build a track from its map; '.', 'S' and 'E' are track, the rest is wall."""
        open_cells = set()
        start = end = None
        for r, line in enumerate(text.splitlines()):
            for c, char in enumerate(line):
                if char == "S":
                    start = (r, c)
                elif char == "E":
                    end = (r, c)
                elif char != ".":
                    continue
                open_cells.add((r, c))
        if start is None or end is None:
            raise ValueError("the track needs a start 'S' and an end 'E'")
        return cls(frozenset(open_cells), start, end)

    @cached_property
    def _distances(self):
        """Steps from every reachable track cell to the end."""
        distance = {self.end: 0}
        queue = deque([self.end])
        while queue:
            r, c = queue.popleft()
            for dr, dc in _STEPS:
                neighbour = (r + dr, c + dc)
                if neighbour in self.open_cells and neighbour not in distance:
                    distance[neighbour] = distance[(r, c)] + 1
                    queue.append(neighbour)
        if self.start not in distance:
            raise ValueError("the end cannot be reached from the start")
        return distance

    def count_cheats(self, max_cheat, min_save):
        """Number of cheats of at most max_cheat steps saving at least min_save."""
        if max_cheat < 0:
            raise ValueError("max_cheat must not be negative")
        distance = self._distances
        total = 0
        for (r, c), remaining in distance.items():
            for dr in range(-max_cheat, max_cheat + 1):
                reach = max_cheat - abs(dr)
                for dc in range(-reach, reach + 1):
                    landing = distance.get((r + dr, c + dc))
                    if landing is None:
                        continue
                    if remaining - landing - abs(dr) - abs(dc) >= min_save:
                        total += 1
        return total


def part1(text, min_save=_MIN_SAVE):
    """Cheats of up to 2 picoseconds saving at least min_save."""
    return Racetrack.parse(text).count_cheats(_SHORT_CHEAT, min_save)


def part2(text, min_save=_MIN_SAVE):
    """Cheats of up to 20 picoseconds saving at least min_save."""
    return Racetrack.parse(text).count_cheats(_LONG_CHEAT, min_save)


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day20")
    parser.add_argument("input", nargs="?", default="-", help="input file (default: stdin)")
    parser.add_argument("--part", type=int, choices=(1, 2))
    parser.add_argument("--min-save", type=int, default=_MIN_SAVE)
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solvers = {
        1: lambda data: part1(data, args.min_save),
        2: lambda data: part2(data, args.min_save),
    }
    for part in [args.part] if args.part else [1, 2]:
        print(solvers[part](text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())