"""Day 11: counting stones that split and change as you blink."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path


def blink(stone):
    """Return the stones that one stone becomes after a single blink."""
    if stone < 0:
        raise ValueError("stones carry non-negative numbers")
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2:
        return (stone * 2024,)
    half = len(digits) // 2
    return (int(digits[:half]), int(digits[half:]))


def count_after(stones, steps):
    """Number of stones after blinking steps times."""
    counts = Counter(stones)
    for _ in range(steps):
        following = Counter()
        for stone, amount in counts.items():
            for child in blink(stone):
                following[child] += amount
        counts = following
    return sum(counts.values())


def _parse(text):
    return [int(token) for token in text.split()]


def part1(text):
    """Stones after 25 blinks."""
    return count_after(_parse(text), 25)


def part2(text):
    """Stones after 75 blinks."""
    return count_after(_parse(text), 75)


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day11")
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