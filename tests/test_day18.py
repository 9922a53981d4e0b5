import random

import pytest

from advent2024.day18 import (
    DisjointSet,
    first_blocking,
    first_blocking_search,
    parse,
    part1,
    part2,
    shortest_path,
)

EXAMPLE = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def _shuffled_cells(size, seed):
    cells = [(x, y) for x in range(size) for y in range(size)]
    random.Random(seed).shuffle(cells)
    return cells


def test_part1_example():
    assert part1(EXAMPLE, size=7, count=12) == 22


def test_part2_example():
    assert part2(EXAMPLE, size=7) == "6,1"


def test_both_blocking_methods_agree_on_example():
    points = parse(EXAMPLE)
    assert first_blocking(points, 7) == first_blocking_search(points, 7)


@pytest.mark.parametrize("seed", range(6))
def test_both_blocking_methods_agree_on_random_grids(seed):
    points = _shuffled_cells(6, seed)
    assert first_blocking(points, 6) == first_blocking_search(points, 6)


@pytest.mark.parametrize("size", [1, 2, 5, 9])
def test_empty_grid_path_is_manhattan_distance(size):
    assert shortest_path(set(), size) == 2 * (size - 1)


def test_full_wall_blocks_path():
    wall = {(1, y) for y in range(5)}
    assert shortest_path(wall, 5) is None


def test_parse_reads_pairs():
    assert parse("3,4\n\n0,12\n") == [(3, 4), (0, 12)]


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse("3;4\n")


def test_point_outside_grid_is_rejected():
    with pytest.raises(ValueError):
        first_blocking([(7, 0)], 7)


def test_no_blocking_byte_is_reported():
    points = [(1, 1), (2, 2)]
    with pytest.raises(ValueError):
        first_blocking(points, 7)
    with pytest.raises(ValueError):
        first_blocking_search(points, 7)


def test_disjoint_set_union_and_find():
    sets = DisjointSet()
    assert sets.union("a", "b") is True
    assert sets.union("b", "c") is True
    assert sets.union("a", "c") is False
    assert sets.find("a") == sets.find("c")
    assert sets.find("d") == "d"
    assert sets.find("d") != sets.find("a")