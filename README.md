# advent2024

Solutions to the 2024 Advent of Code puzzles, days 1 to 16 and 18 to 20.
Every day is a module of the `advent2024` package (`advent2024.day01` and
so on) with a `part1` and a `part2` function that take the puzzle input as
text and return the answer.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

Each day has a command that reads the puzzle input from a file, or from
standard input when no file (or `-`) is given, and prints the answer to
each part on its own line:

```
advent2024-day01 input.txt
advent2024-day11 < input.txt
advent2024-day20 --part 2 input.txt
```

The commands are `advent2024-day01` through `advent2024-day16` and
`advent2024-day18` through `advent2024-day20`. Every command takes
`--part 1` or `--part 2` to print only one answer. A few take more options:

- `advent2024-day14`: `--width` and `--height` of the grid (default 101 by 103);
- `advent2024-day18`: `--size` of the grid (default 71) and `--count` of
  fallen bytes for part 1 (default 1024);
- `advent2024-day20`: `--min-save`, the least saving a cheat must bring
  (default 100).

## Library use

```python
from advent2024 import day01, day11

lists = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
day01.part1(lists)   # total distance between the sorted lists: 11
day01.part2(lists)   # similarity score: 31

day11.count_after([125, 17], 25)   # 55312 stones
```

Besides `part1` and `part2`, the modules expose the pieces the answers are
built from, for example:

- `day02.is_safe` and `day02.is_safe_with_removal` for single reports;
- `day05.is_ordered` and `day05.reorder` for page updates;
- `day06.Lab`, whose `walk` follows the guard, optionally with one extra
  obstruction, and reports the visited cells and whether the guard loops;
- `day07.can_obtain` and `day07.concat` for one calibration equation;
- `day09.expand` and `day09.checksum` for disk maps, and
  `day09.FreeSpaceTree`, the tree used by `part2` to find free space when
  compacting whole files; `day09.part2_scan` gives the same answer by
  scanning the disk instead;
- `day11.blink` for a single stone;
- `day12.regions`, yielding `Region` objects with `area`, `perimeter` and
  `sides`;
- `day13.cheapest_brute` and `day13.cheapest_exact` for one claw machine;
- `day14.Robot`, `day14.safety_factor` and `day14.largest_cluster`;
- `day15.Warehouse`, which can `move` the robot, give the `gps_sum` and
  `render` the map;
- `day16.Maze` with `lowest_score` and `best_path_tiles`;
- `day18.shortest_path`, `day18.first_blocking` (union-find, using
  `day18.DisjointSet`) and `day18.first_blocking_search` (repeated
  breadth-first search) for the falling bytes;
- `day19.count_arrangements` for one towel design;
- `day20.Racetrack.count_cheats` for any cheat length and saving threshold.

Functions whose puzzle depends on a grid size or threshold, such as
`day14.part1`, `day18.part1` and `day20.part1`, take it as a parameter so the
small examples from the puzzle text can be checked as well as real inputs.

Malformed input raises `ValueError`, as does a puzzle without an answer
(for example a maze whose end cannot be reached).

## What it does not do

- There is no module or command for day 17, nor for days 21 to 25.
- The package does not download puzzle inputs; supply your own input text.