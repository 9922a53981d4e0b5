"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
import sys
from itertools import dropwhile
from pathlib import Path

_ROBOT = "@"
_BOX = "O"
_BOX_LEFT = "["
_BOX_RIGHT = "]"
_EMPTY = "."
_WALL = "#"
_BOXES = frozenset((_BOX, _BOX_LEFT, _BOX_RIGHT))
_MOVES = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_WIDE = {_BOX: _BOX_LEFT + _BOX_RIGHT, _ROBOT: _ROBOT + _EMPTY}


def _split(text):
    """Return the map rows and the move characters of a puzzle input."""
    lines = list(dropwhile(lambda line: not line.strip(), text.splitlines()))
    rows = []
    for index, line in enumerate(lines):
        if not line.strip():
            return rows, "".join(lines[index + 1:])
        rows.append(line.rstrip())
    return rows, ""


class Warehouse:
    """A warehouse map with one robot, walls and boxes."""

    def __init__(self, rows):
        self._grid = [list(row) for row in rows]
        robots = [
            (r, c)
            for r, row in enumerate(self._grid)
            for c, char in enumerate(row)
            if char == _ROBOT
        ]
        if len(robots) != 1:
            raise ValueError(f"the map needs exactly one robot, found {len(robots)}")
        self.robot = robots[0]

    @classmethod
    def parse(cls, text, wide=False):
        """Build a warehouse from the map part of the text, doubled in width if wide."""
        rows, _ = _split(text)
        if wide:
            rows = ["".join(_WIDE.get(char, char * 2) for char in row) for row in rows]
        return cls(rows)

    def _cell(self, row, col):
        if 0 <= row < len(self._grid) and 0 <= col < len(self._grid[row]):
            return self._grid[row][col]
        return _WALL

    def move(self, direction):
        """Try to move the robot one step, pushing boxes; return whether it moved."""
        try:
            dr, dc = _MOVES[direction]
        except KeyError:
            raise ValueError(f"unknown move {direction!r}") from None
        to_move = []
        seen = set()
        pending = [self.robot]
        while pending:
            cell = pending.pop()
            if cell in seen:
                continue
            seen.add(cell)
            to_move.append(cell)
            row, col = cell[0] + dr, cell[1] + dc
            ahead = self._cell(row, col)
            if ahead == _WALL:
                return False
            if ahead in _BOXES:
                pending.append((row, col))
                if ahead == _BOX_LEFT:
                    pending.append((row, col + 1))
                elif ahead == _BOX_RIGHT:
                    pending.append((row, col - 1))
        contents = [(cell, self._grid[cell[0]][cell[1]]) for cell in to_move]
        for row, col in to_move:
            self._grid[row][col] = _EMPTY
        for (row, col), char in contents:
            self._grid[row + dr][col + dc] = char
        self.robot = (self.robot[0] + dr, self.robot[1] + dc)
        return True

    def gps_sum(self):
        """Sum of 100 * row + column over every box (its left edge when wide)."""
        return sum(
            100 * r + c
            for r, row in enumerate(self._grid)
            for c, char in enumerate(row)
            if char in (_BOX, _BOX_LEFT)
        )

    def render(self):
        """The map as text, one line per row."""
        return "\n".join("".join(row) for row in self._grid)


def _run(text, wide):
    warehouse = Warehouse.parse(text, wide)
    _, moves = _split(text)
    for direction in moves:
        if not direction.isspace():
            warehouse.move(direction)
    return warehouse.gps_sum()


def part1(text):
    """Sum of box GPS coordinates after all moves."""
    return _run(text, wide=False)


def part2(text):
    """Sum of box GPS coordinates after all moves in the widened warehouse."""
    return _run(text, wide=True)


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day15")
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