"""Day 19: arranging striped towels into requested designs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def parse(text):
    """Return (towels, designs) from the towel line and the design lines."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("the input has no towel patterns")
    towels = [towel.strip() for towel in lines[0].split(",") if towel.strip()]
    return towels, lines[1:]


def count_arrangements(design, towels):
    """Number of ways to build design by laying towels end to end.

    A towel listed twice counts as two different towels.
    """
    towels = list(towels)
    if any(not towel for towel in towels):
        raise ValueError("towel patterns must not be empty")
    ways = [1] + [0] * len(design)
    for end in range(1, len(design) + 1):
        ways[end] = sum(
            ways[end - len(towel)]
            for towel in towels
            if len(towel) <= end and design.startswith(towel, end - len(towel))
        )
    return ways[-1]


def part1(text):
    """Number of designs that can be made at all."""
    towels, designs = parse(text)
    return sum(count_arrangements(design, towels) > 0 for design in designs)


def part2(text):
    """Total number of arrangements over every design."""
    towels, designs = parse(text)
    return sum(count_arrangements(design, towels) for design in designs)


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day19")
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