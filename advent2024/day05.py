"""Day 5: checking and repairing the page order of safety manual updates."""

from __future__ import annotations

from graphlib import TopologicalSorter
from itertools import combinations

from advent2024.day01 import _run_puzzle


def parse(text):
    """Return the set of (before, after) rules and the list of updates."""
    rules = set()
    updates = []
    lines = iter(text.splitlines())
    for line in lines:
        if not line.strip():
            break
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"malformed ordering rule: {line!r}")
        rules.add((int(before), int(after)))
    for line in lines:
        if line.strip():
            updates.append([int(page) for page in line.split(",")])
    return frozenset(rules), updates


def is_ordered(update, rules):
    """True if no later page is required to come before an earlier one."""
    return not any((later, earlier) in rules for earlier, later in combinations(update, 2))


def reorder(update, rules):
    """Return the pages sorted so that every applicable rule holds.

    Raises graphlib.CycleError if the rules among these pages are cyclic.
    """
    pages = set(update)
    sorter = TopologicalSorter({page: set() for page in update})
    for before, after in rules:
        if before in pages and after in pages:
            sorter.add(after, before)
    return list(sorter.static_order())


def _middle(update):
    return update[len(update) // 2]


def part1(text):
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = parse(text)
    return sum(_middle(update) for update in updates if is_ordered(update, rules))


def part2(text):
    """Sum of middle pages of the misordered updates after reordering."""
    rules, updates = parse(text)
    return sum(
        _middle(reorder(update, rules)) for update in updates if not is_ordered(update, rules)
    )


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    return _run_puzzle("advent2024.day05", {1: part1, 2: part2}, argv)


if __name__ == "__main__":
    raise SystemExit(main())