"""Day 18: escaping a memory grid as bytes fall into it."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from pathlib import Path

_SIZE = 71
_COUNT = 1024
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


class DisjointSet:
    """Union-find over hashable items, created on first use."""

    def __init__(self):
        self._parent = {}

    def find(self, item):
        """Representative of the set holding item."""
        root = item
        while self._parent.setdefault(root, root) != root:
            root = self._parent[root]
        while item != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a, b):
        """Merge the sets of a and b; return False if they were already one."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True


def parse(text):
    """Return the falling byte positions as (x, y) pairs."""
    points = []
    for line in text.splitlines():
        if not line.strip():
            continue
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"malformed byte position: {line!r}")
        points.append((int(x), int(y)))
    return points


def _neighbours(point, size):
    x, y = point
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size:
            yield nx, ny


def _checked(points, size):
    points = list(points)
    for x, y in points:
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"byte position {x},{y} lies outside the grid")
    return points


def shortest_path(corrupted, size):
    """Fewest steps from the top-left to the bottom-right corner, or None."""
    corrupted = set(corrupted)
    start, goal = (0, 0), (size - 1, size - 1)
    if start in corrupted:
        return None
    distance = {start: 0}
    queue = deque([start])
    while queue:
        point = queue.popleft()
        if point == goal:
            return distance[point]
        for neighbour in _neighbours(point, size):
            if neighbour not in corrupted and neighbour not in distance:
                distance[neighbour] = distance[point] + 1
                queue.append(neighbour)
    return None


def first_blocking(points, size):
    """First byte after which the exit can no longer be reached.

    Works backwards from the fully corrupted grid, freeing bytes and joining
    regions until the two corners are connected.
    """
    order = list(dict.fromkeys(_checked(points, size)))
    corrupted = set(order)
    start, goal = (0, 0), (size - 1, size - 1)
    regions = DisjointSet()
    for x in range(size):
        for y in range(size):
            if (x, y) in corrupted:
                continue
            for neighbour in _neighbours((x, y), size):
                if neighbour not in corrupted:
                    regions.union((x, y), neighbour)
    if start not in corrupted and goal not in corrupted and regions.find(start) == regions.find(goal):
        raise ValueError("no byte blocks the path")
    for point in reversed(order):
        corrupted.discard(point)
        for neighbour in _neighbours(point, size):
            if neighbour not in corrupted:
                regions.union(point, neighbour)
        if start not in corrupted and goal not in corrupted and regions.find(start) == regions.find(goal):
            return point
    raise ValueError("no byte blocks the path")


def first_blocking_search(points, size):
    """First byte after which the exit can no longer be reached, by repeated search."""
    corrupted = set()
    for point in _checked(points, size):
        corrupted.add(point)
        if shortest_path(corrupted, size) is None:
            return point
    raise ValueError("no byte blocks the path")


def part1(text, size=_SIZE, count=_COUNT):
    """Fewest steps to the exit after the first count bytes have fallen."""
    steps = shortest_path(_checked(parse(text)[:count], size), size)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text, size=_SIZE):
    """Coordinates 'x,y' of the first byte that cuts off the exit."""
    x, y = first_blocking(parse(text), size)
    return f"{x},{y}"


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day18")
    parser.add_argument("input", nargs="?", default="-", help="input file (default: stdin)")
    parser.add_argument("--part", type=int, choices=(1, 2))
    parser.add_argument("--size", type=int, default=_SIZE)
    parser.add_argument("--count", type=int, default=_COUNT)
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    solvers = {
        1: lambda data: part1(data, args.size, args.count),
        2: lambda data: part2(data, args.size),
    }
    for part in [args.part] if args.part else [1, 2]:
        print(solvers[part](text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())