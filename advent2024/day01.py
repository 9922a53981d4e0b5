"""Day 1: reconciling two lists of location identifiers."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path


def _run_puzzle(prog, solvers, argv=None):
    """Read the puzzle input from a file or stdin and print the chosen answers."""
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("input", nargs="?", default="-", help="input file (default: stdin)")
    parser.add_argument("--part", type=int, choices=sorted(solvers))
    args = parser.parse_args(argv)
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    for part in [args.part] if args.part else sorted(solvers):
        print(solvers[part](text))
    return 0


def parse(text):
    """Return the left and right columns of the input as two lists of ints.

    A trailing value without a partner is ignored.
    """
    numbers = [int(token) for token in text.split()]
    paired = len(numbers) // 2 * 2
    return numbers[0:paired:2], numbers[1:paired:2]


def part1(text):
    """Total distance between the sorted columns."""
    left, right = parse(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text):
    """Similarity score: each left value times its count in the right column."""
    left, right = parse(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day01", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())