import pytest

from advent2024.day19 import count_arrangements, parse, part1, part2

EXAMPLE = """r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb
"""


def test_parse_splits_towels_and_designs():
    towels, designs = parse(EXAMPLE)
    assert towels == ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]
    assert designs == ["brwrr", "bggr", "gbbr", "rrbgbr", "ubwu", "bwurrg", "brgr", "bbrgwb"]


def test_parse_rejects_empty_input():
    with pytest.raises(ValueError):
        parse("\n\n")


def test_example_part1():
    assert part1(EXAMPLE) == 6


def test_example_part2():
    assert part2(EXAMPLE) == 16


def test_single_design_count():
    towels, _ = parse(EXAMPLE)
    assert count_arrangements("brwrr", towels) == 2


def test_impossible_design_has_no_arrangement():
    towels, _ = parse(EXAMPLE)
    assert not count_arrangements("ubwu", towels)


def test_single_towel_repeated_has_one_way():
    for length in range(1, 6):
        assert count_arrangements("r" * length, ["r"]) == count_arrangements("r", ["r"])


def test_duplicate_towels_double_the_count():
    single = count_arrangements("gbbr", ["gb", "b", "r", "g"])
    doubled = count_arrangements("gbbr", ["gb", "b", "r", "g", "r"])
    assert doubled == 2 * single


def test_part2_bounds_part1():
    _, designs = parse(EXAMPLE)
    assert part1(EXAMPLE) <= part2(EXAMPLE)
    assert part1(EXAMPLE) <= len(designs)


def test_empty_towel_rejected():
    with pytest.raises(ValueError):
        count_arrangements("abc", ["a", ""])