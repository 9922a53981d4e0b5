"""Day 6: tracing a patrolling guard and finding obstructions that trap it."""

from __future__ import annotations

from dataclasses import dataclass

from advent2024.day01 import _run_puzzle

_HEADINGS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}


@dataclass(frozen=True)
class Lab:
    """The lab map: its size, the obstacles and the guard's starting pose."""

    height: int
    width: int
    obstacles: frozenset
    start: tuple
    heading: tuple

    @classmethod
    def parse(cls, text):
        """Build a lab from its map; any character but '.' and the guard is an obstacle."""
        rows = [line for line in text.splitlines() if line.strip()]
        obstacles = set()
        start = heading = None
        for r, row in enumerate(rows):
            for c, char in enumerate(row):
                if char in _HEADINGS:
                    start, heading = (r, c), _HEADINGS[char]
                elif char != ".":
                    obstacles.add((r, c))
        if start is None:
            raise ValueError("map has no guard")
        return cls(len(rows), max(map(len, rows)), frozenset(obstacles), start, heading)

    def _inside(self, position):
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def walk(self, extra_block=None):
        """Follow the guard; return (visited positions, whether the guard loops)."""
        position = self.start
        dr, dc = self.heading
        seen = set()
        looped = False
        while self._inside(position):
            state = (position, (dr, dc))
            if state in seen:
                looped = True
                break
            seen.add(state)
            for _ in range(4):
                ahead = (position[0] + dr, position[1] + dc)
                if ahead not in self.obstacles and ahead != extra_block:
                    break
                dr, dc = dc, -dr
            else:
                looped = True
                break
            position = ahead
        return frozenset(pos for pos, _ in seen), looped


def part1(text):
    """Number of distinct positions the guard visits."""
    visited, _ = Lab.parse(text).walk()
    return len(visited)


def part2(text):
    """Number of positions where one new obstruction makes the guard loop."""
    lab = Lab.parse(text)
    visited, looped = lab.walk()
    if looped:
        candidates = {
            (r, c) for r in range(lab.height) for c in range(lab.width)
        } - lab.obstacles
    else:
        candidates = visited
    return sum(lab.walk(cell)[1] for cell in candidates if cell != lab.start)


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day06", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())