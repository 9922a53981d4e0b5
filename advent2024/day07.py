"""Day 7: finding operator placements that produce calibration targets."""

from __future__ import annotations

from advent2024.day01 import _run_puzzle


def parse(text):
    """Return a list of (target, numbers) pairs, one per equation line."""
    equations = []
    for line in text.splitlines():
        if not line.strip():
            continue
        target, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"malformed equation: {line!r}")
        equations.append((int(target), [int(token) for token in rest.split()]))
    return equations


def concat(a, b, limit):
    """Join the digits of a and b; anything above limit becomes limit + 1."""
    shift = 10 ** len(str(b)) if b > 0 else 1
    joined = a * shift + b
    return limit + 1 if joined > limit else joined


def can_obtain(target, numbers, allow_concat=False):
    """True if combining numbers left to right with +, * (and ||) can give target."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    first, *rest = numbers
    reachable = {first} if first <= target else set()
    for number in rest:
        candidates = {value + number for value in reachable}
        candidates |= {value * number for value in reachable}
        if allow_concat:
            candidates |= {concat(value, number, target) for value in reachable}
        reachable = {value for value in candidates if value <= target}
    return target in reachable


def _calibration(text, allow_concat):
    return sum(
        target for target, numbers in parse(text) if can_obtain(target, numbers, allow_concat)
    )


def part1(text):
    """Sum of targets reachable with addition and multiplication."""
    return _calibration(text, False)


def part2(text):
    """Sum of targets reachable when concatenation is also allowed."""
    return _calibration(text, True)


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day07", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())