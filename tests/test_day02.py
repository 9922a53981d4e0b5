import io

import pytest

from advent2024.day02 import is_safe, is_safe_with_removal, main, parse, part1, part2

EXAMPLE = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_parse_reads_levels():
    assert parse("7 6 4\n\n1 2\n") == [[7, 6, 4], [1, 2]]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse("1 two 3\n")


def test_example_part1():
    assert part1(EXAMPLE) == 2


def test_example_part2():
    assert part2(EXAMPLE) == 4


def test_decreasing_report_is_safe():
    assert is_safe([7, 6, 4, 2, 1])


def test_large_jump_is_unsafe():
    assert not is_safe([1, 2, 7, 8, 9])
    assert not is_safe_with_removal([1, 2, 7, 8, 9])


@pytest.mark.parametrize("levels", [[1, 3, 2, 4, 5], [9, 1, 2, 3]])
def test_removal_fixes_single_bad_level(levels):
    assert not is_safe(levels)
    assert is_safe_with_removal(levels)


@pytest.mark.parametrize("levels", parse(EXAMPLE))
def test_safety_is_reversal_invariant(levels):
    assert is_safe(levels) == is_safe(levels[::-1])
    assert is_safe_with_removal(levels) == is_safe_with_removal(levels[::-1])


@pytest.mark.parametrize("levels", parse(EXAMPLE))
def test_safe_implies_safe_with_removal(levels):
    assert not is_safe(levels) or is_safe_with_removal(levels)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE))
    main([])
    assert capsys.readouterr().out.split() == ["2", "4"]