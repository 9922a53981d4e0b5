import pytest

from advent2024.day12 import Region, regions, part1, part2

SMALL = "AAAA\nBBCD\nBBCC\nEEEC\n"
E_SHAPE = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE\n"
LARGER = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""


def test_part1_small_example():
    assert part1(SMALL) == 140


def test_part2_small_example():
    assert part2(SMALL) == 80


def test_part2_e_shape():
    assert part2(E_SHAPE) == 236


@pytest.mark.parametrize("text", [SMALL, E_SHAPE, LARGER])
def test_areas_cover_grid(text):
    grid = [line for line in text.splitlines() if line]
    assert sum(region.area for region in regions(grid)) == sum(map(len, grid))


@pytest.mark.parametrize("text", [SMALL, E_SHAPE, LARGER])
def test_sides_bounded_and_even(text):
    grid = [line for line in text.splitlines() if line]
    for region in regions(grid):
        assert region.sides <= region.perimeter
        assert region.sides % 2 == 0


def test_discount_never_costs_more():
    assert part2(LARGER) <= part1(LARGER)


def test_same_plant_disconnected_is_separate():
    found = list(regions(["ABA"]))
    assert [region.plant for region in found] == ["A", "B", "A"]
    assert all(region.area == 1 for region in found)


def test_single_cell_perimeter_equals_sides():
    region = Region("Z", frozenset({(0, 0)}))
    assert region.perimeter == region.sides


def test_rectangle_sides_match_single_cell():
    rectangle = Region("A", frozenset((r, c) for r in range(3) for c in range(5)))
    assert rectangle.sides == Region("A", frozenset({(0, 0)})).sides