import pytest

from advent2024.day16 import Maze, part1, part2

EXAMPLE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""


def test_part1_example():
    assert part1(EXAMPLE) == 7036


def test_part2_example():
    assert part2(EXAMPLE) == 45


def test_turning_north_costs_a_turn():
    assert Maze.parse("###\n#E#\n#S#\n###").lowest_score() == 1001


def test_straight_corridor_needs_no_turn():
    maze = Maze.parse("#######\n#S....E#\n#######")
    assert maze.lowest_score() < 1000
    assert maze.best_path_tiles() == maze.open_cells


def test_best_tiles_include_start_and_end():
    maze = Maze.parse(EXAMPLE)
    tiles = maze.best_path_tiles()
    assert maze.start in tiles
    assert maze.end in tiles
    assert tiles <= maze.open_cells


def test_unreachable_end_is_rejected():
    maze = Maze.parse("#####\n#S#E#\n#####")
    with pytest.raises(ValueError):
        maze.lowest_score()


def test_missing_end_is_rejected():
    with pytest.raises(ValueError):
        Maze.parse("####\n#S.#\n####")