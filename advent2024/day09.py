"""Day 9: compacting an amphipod's disk map."""

from __future__ import annotations

import argparse
import sys
from itertools import groupby, islice
from pathlib import Path

_DIGITS = frozenset("0123456789")


class FreeSpaceTree:
    """Max segment tree over free-space chunk sizes, for leftmost-fit lookups."""

    def __init__(self, sizes):
        sizes = list(sizes)
        self._count = len(sizes)
        self._leaves = 1
        while self._leaves < self._count:
            self._leaves *= 2
        self._tree = [0] * (2 * self._leaves)
        self._tree[self._leaves:self._leaves + self._count] = sizes
        for node in range(self._leaves - 1, 0, -1):
            self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def allocate(self, size):
        """Index of the leftmost chunk holding at least size blocks, or None."""
        if size < 1:
            raise ValueError("size must be positive")
        if self._tree[1] < size:
            return None
        node = 1
        while node < self._leaves:
            node *= 2
            if self._tree[node] < size:
                node += 1
        return node - self._leaves

    def shrink(self, index, amount):
        """Take amount blocks away from the chunk at index."""
        if not 0 <= index < self._count:
            raise IndexError(f"chunk index {index} out of range")
        node = index + self._leaves
        if amount > self._tree[node]:
            raise ValueError("cannot take more blocks than the chunk holds")
        self._tree[node] -= amount
        node //= 2
        while node > 0:
            self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2


def expand(disk_map):
    """Return the block layout: a file id per block, None for free blocks."""
    digits = disk_map.strip()
    if not set(digits) <= _DIGITS:
        raise ValueError("a disk map holds digits only")
    blocks = []
    for index, length in enumerate(map(int, digits)):
        blocks.extend([index // 2 if index % 2 == 0 else None] * length)
    return blocks


def checksum(blocks):
    """Sum of position times file id over the occupied blocks."""
    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id is not None)


def _compact(blocks):
    left, right = 0, len(blocks) - 1
    while True:
        while right >= 0 and blocks[right] is None:
            right -= 1
        while left <= right and blocks[left] is not None:
            left += 1
        if right <= left:
            return blocks
        blocks[left], blocks[right] = blocks[right], blocks[left]


def _move_files(blocks, find):
    right = len(blocks) - 1
    while right >= 0:
        file_id = blocks[right]
        if file_id is None:
            right -= 1
            continue
        end = right
        while right >= 0 and blocks[right] == file_id:
            right -= 1
        size = end - right
        position = find(size, right)
        if position is not None:
            blocks[position:position + size] = [file_id] * size
            blocks[right + 1:end + 1] = [None] * size
    return blocks


def _free_runs(blocks):
    runs = []
    for is_free, group in groupby(enumerate(blocks), key=lambda item: item[1] is None):
        if is_free:
            members = list(group)
            runs.append((members[0][0], len(members)))
    return runs


def part1(text):
    """Checksum after moving single blocks into the leftmost free space."""
    return checksum(_compact(expand(text)))


def part2(text):
    """Checksum after moving whole files, using a segment tree of free chunks."""
    blocks = expand(text)
    runs = _free_runs(blocks)
    starts = [start for start, _ in runs]
    tree = FreeSpaceTree(length for _, length in runs)

    def find(size, max_position):
        index = tree.allocate(size)
        if index is None or starts[index] > max_position:
            return None
        position = starts[index]
        starts[index] += size
        tree.shrink(index, size)
        return position

    return checksum(_move_files(blocks, find))


def part2_scan(text):
    """Checksum after moving whole files, scanning for free space each time."""
    blocks = expand(text)

    def find(size, max_position):
        run = 0
        for position, file_id in enumerate(islice(blocks, max_position + 1)):
            run = run + 1 if file_id is None else 0
            if run == size:
                return position - size + 1
        return None

    return checksum(_move_files(blocks, find))


def main(argv=None):
    """Print the answers for the puzzle input given as a file or on stdin."""
    parser = argparse.ArgumentParser(prog="advent2024.day09")
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