"""Day 3: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import re

from advent2024.day01 import _run_puzzle

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"mul\(([0-9]+),([0-9]+)\)|do\(\)|don't\(\)")


def part1(text):
    """Sum of the products of every well-formed mul(x,y)."""
    return sum(int(x) * int(y) for x, y in _MUL.findall(text))


def part2(text):
    """Sum of the products, honouring do() and don't() switches."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        if match[0] == "do()":
            enabled = True
        elif match[0] == "don't()":
            enabled = False
        elif enabled:
            total += int(match[1]) * int(match[2])
    return total


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day03", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())