"""Day 13: winning prizes from claw machines for the fewest tokens."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, replace
from pathlib import Path

_PRIZE_OFFSET = 10_000_000_000_000
_COST_A = 3
_COST_B = 1


@dataclass(frozen=True)
class Machine:
    """Claw machine: the moves of buttons A and B and the prize location."""

    a: tuple
    b: tuple
    prize: tuple


def parse(text):
    """Return the machines described in the text, six numbers each."""
    numbers = [int(token) for token in re.findall(r"\d+", text)]
    if len(numbers) % 6:
        raise ValueError("each machine needs exactly six numbers")
    return [
        Machine(tuple(numbers[i:i + 2]), tuple(numbers[i + 2:i + 4]), tuple(numbers[i + 4:i + 6]))
        for i in range(0, len(numbers), 6)
    ]


def cheapest_brute(machine, max_presses=100):
    """Fewest tokens trying every press count up to max_presses, or None."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    costs = [
        _COST_A * pa + _COST_B * pb
        for pa in range(max_presses + 1)
        for pb in range(max_presses + 1)
        if pa * ax + pb * bx == px and pa * ay + pb * by == py
    ]
    return min(costs, default=None)


def cheapest_exact(machine):
    """Tokens for the unique integer solution of the button equations, or None."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    denominator = bx * ay - by * ax
    numerator = px * ay - py * ax
    if denominator == 0 or ax == 0 or numerator % denominator:
        return None
    pb = numerator // denominator
    if (px - pb * bx) % ax:
        return None
    pa = (px - pb * bx) // ax
    if pa * ax + pb * bx != px or pa * ay + pb * by != py:
        return None
    return _COST_A * pa + _COST_B * pb


def part1(text):
    """Fewest tokens for all winnable prizes, at most 100 presses per button."""
    costs = (cheapest_brute(machine) for machine in parse(text))
    return sum(cost for cost in costs if cost is not None)


def part2(text):
    """Fewest tokens once every prize is moved far away."""
    total = 0
    for machine in parse(text):
        px, py = machine.prize
        moved = replace(machine, prize=(px + _PRIZE_OFFSET, py + _PRIZE_OFFSET))
        cost = cheapest_exact(moved)
        if cost is not None:
            total += cost
    return total


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day13")
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