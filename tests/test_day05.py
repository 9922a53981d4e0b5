import graphlib

import pytest

from advent2024.day05 import is_ordered, main, parse, part1, part2, reorder

EXAMPLE = """\
47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_parse_reads_rules_and_updates():
    rules, updates = parse(EXAMPLE)
    assert (47, 53) in rules
    assert (53, 47) not in rules
    assert updates[2] == [75, 29, 13]


def test_parse_rejects_malformed_rule():
    with pytest.raises(ValueError):
        parse("47-53\n\n1,2,3\n")


def test_example_part1():
    assert part1(EXAMPLE) == 143


def test_example_part2():
    assert part2(EXAMPLE) == 123


def test_first_update_is_ordered():
    rules, updates = parse(EXAMPLE)
    assert is_ordered(updates[0], rules)
    assert not is_ordered(updates[3], rules)


def test_reorder_produces_ordered_permutation():
    rules, updates = parse(EXAMPLE)
    for update in updates:
        fixed = reorder(update, rules)
        assert sorted(fixed) == sorted(update)
        assert is_ordered(fixed, rules)


def test_reorder_keeps_ordered_update():
    rules, updates = parse(EXAMPLE)
    assert reorder(updates[1], rules) == updates[1]


def test_reorder_rejects_cyclic_rules():
    rules = {(1, 2), (2, 3), (3, 1)}
    with pytest.raises(graphlib.CycleError):
        reorder([1, 2, 3], rules)


def test_main_prints_both_sums(tmp_path, capsys):
    manual = tmp_path / "manual.txt"
    manual.write_text(EXAMPLE)
    main([str(manual)])
    assert capsys.readouterr().out == "143\n123\n"