"""Day 16: the cheapest routes through the reindeer maze."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections import deque
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EAST = 1
_TURN_COST = 1000
_STEP_COST = 1


@dataclass(frozen=True)
class Maze:
    """Open tiles of the maze with its start and end tiles."""

    open_cells: frozenset
    start: tuple
    end: tuple

    @classmethod
    def parse(cls, text):
        """Build a maze from its map; '.', 'S' and 'E' are open, the rest is wall."""
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
            raise ValueError("the maze needs a start 'S' and an end 'E'")
        return cls(frozenset(open_cells), start, end)

    @cached_property
    def _search(self):
        """Best score and best predecessors for each (tile, heading) state."""
        origin = (self.start, _EAST)
        scores = {origin: 0}
        predecessors = {origin: []}
        heap = [(0, self.start, _EAST)]
        while heap:
            score, position, heading = heapq.heappop(heap)
            if score != scores[(position, heading)]:
                continue
            for turn in range(4):
                new_heading = (heading + turn) % 4
                dr, dc = _DIRECTIONS[new_heading]
                neighbour = (position[0] + dr, position[1] + dc)
                if neighbour not in self.open_cells:
                    continue
                cost = score + _STEP_COST + _TURN_COST * min(turn, 4 - turn)
                state = (neighbour, new_heading)
                known = scores.get(state)
                if known is None or cost < known:
                    scores[state] = cost
                    predecessors[state] = [(position, heading)]
                    heapq.heappush(heap, (cost, neighbour, new_heading))
                elif cost == known:
                    predecessors[state].append((position, heading))
        return scores, predecessors

    def lowest_score(self):
        """Lowest score of any route from start to end."""
        scores, _ = self._search
        reached = [scores[(self.end, h)] for h in range(4) if (self.end, h) in scores]
        if not reached:
            raise ValueError("the end cannot be reached")
        return min(reached)

    def best_path_tiles(self):
        """Tiles that lie on at least one lowest-score route."""
        best = self.lowest_score()
        scores, predecessors = self._search
        pending = deque(
            (self.end, h) for h in range(4) if scores.get((self.end, h)) == best
        )
        seen = set(pending)
        while pending:
            state = pending.popleft()
            for previous in predecessors[state]:
                if previous not in seen:
                    seen.add(previous)
                    pending.append(previous)
        return frozenset(position for position, _ in seen)


def part1(text):
    """Lowest possible score through the maze."""
    return Maze.parse(text).lowest_score()


def part2(text):
    """Number of tiles on any lowest-score route."""
    return len(Maze.parse(text).best_path_tiles())


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day16")
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