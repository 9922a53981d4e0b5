import io

import pytest

from advent2024.day01 import main, parse, part1, part2

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def _swap(text):
    left, right = parse(text)
    return "\n".join(f"{b} {a}" for a, b in zip(left, right))


def test_parse_splits_columns():
    assert parse("1 2\n3 4\n") == ([1, 3], [2, 4])


def test_parse_ignores_unpaired_trailing_value():
    assert parse("1 2\n3") == ([1], [2])


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse("1 x\n")


def test_example_part1():
    assert part1(EXAMPLE) == 11


def test_example_part2():
    assert part2(EXAMPLE) == 31


def test_identical_columns_have_no_distance():
    assert part1("5 5\n1 1\n9 9\n") == 0


@pytest.mark.parametrize("solver", [part1, part2])
def test_symmetric_in_columns(solver):
    assert solver(_swap(EXAMPLE)) == solver(EXAMPLE)


@pytest.mark.parametrize(
    ("extra", "expected"),
    [([], ["11", "31"]), (["--part", "1"], ["11"]), (["--part", "2"], ["31"])],
)
def test_main_reads_file(tmp_path, capsys, extra, expected):
    source = tmp_path / "lists.txt"
    source.write_text(EXAMPLE)
    assert main([str(source), *extra]) == 0
    assert capsys.readouterr().out.split() == expected


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE))
    main(["--part", "1"])
    assert capsys.readouterr().out == "11\n"


def test_main_rejects_unknown_part():
    with pytest.raises(SystemExit):
        main(["-", "--part", "3"])