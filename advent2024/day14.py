"""Day 14: predicting robot positions in a wrapping bathroom grid."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, replace
from pathlib import Path

_WIDTH = 101
_HEIGHT = 103
_STEPS = 100
_CLUSTER = 40
_NEIGHBOURS = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass(frozen=True)
class Robot:
    """A robot's position and velocity per second."""

    x: int
    y: int
    dx: int
    dy: int

    def step(self, width, height):
        """The robot one second later, wrapping around the grid edges."""
        return replace(self, x=(self.x + self.dx) % width, y=(self.y + self.dy) % height)


def parse(text):
    """Return one robot per non-blank line of 'p=x,y v=dx,dy'."""
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        numbers = [int(token) for token in re.findall(r"-?\d+", line)]
        if len(numbers) != 4:
            raise ValueError(f"malformed robot: {line!r}")
        robots.append(Robot(*numbers))
    return robots


def _quadrant(index, size):
    start = index * (size + 1) // 2
    return range(start, start + size // 2)


def safety_factor(robots, width, height):
    """Product of the robot counts in the four quadrants, middle lines excluded."""
    factor = 1
    for qx, qy in ((0, 0), (1, 0), (0, 1), (1, 1)):
        xs, ys = _quadrant(qx, width), _quadrant(qy, height)
        factor *= sum(robot.x in xs and robot.y in ys for robot in robots)
    return factor


def largest_cluster(robots, width, height):
    """Size of the largest 4-connected group of occupied cells."""
    occupied = {(robot.x, robot.y) for robot in robots if 0 <= robot.x < width and 0 <= robot.y < height}
    largest = 0
    while occupied:
        stack = [occupied.pop()]
        size = 0
        while stack:
            x, y = stack.pop()
            size += 1
            for dx, dy in _NEIGHBOURS:
                neighbour = (x + dx, y + dy)
                if neighbour in occupied:
                    occupied.remove(neighbour)
                    stack.append(neighbour)
        largest = max(largest, size)
    return largest


def _advance(robots, width, height):
    return [robot.step(width, height) for robot in robots]


def part1(text, width=_WIDTH, height=_HEIGHT, steps=_STEPS):
    """Safety factor after the given number of seconds."""
    robots = parse(text)
    for _ in range(steps):
        robots = _advance(robots, width, height)
    return safety_factor(robots, width, height)


def part2(text, width=_WIDTH, height=_HEIGHT, threshold=_CLUSTER):
    """Seconds until some group of at least threshold robots touches."""
    robots = parse(text)
    if not robots:
        raise ValueError("no robots to watch")
    for elapsed in range(width * height):
        if largest_cluster(robots, width, height) >= threshold:
            return elapsed
        robots = _advance(robots, width, height)
    raise ValueError("the robots never form a large enough group")


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day14")
    parser.add_argument("input", nargs="?", default="-", help="input file (default: stdin)")
    parser.add_argument("--part", type=int, choices=(1, 2))
    parser.add_argument("--width", type=int, default=_WIDTH)
    parser.add_argument("--height", type=int, default=_HEIGHT)
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solvers = {
        1: lambda data: part1(data, args.width, args.height),
        2: lambda data: part2(data, args.width, args.height),
    }
    for part in [args.part] if args.part else [1, 2]:
        print(solvers[part](text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())