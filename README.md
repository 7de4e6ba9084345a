# advent24

Solutions to puzzles from the 2024 Advent of Code, one module per day.
Each module has a `part_one` and a `part_two` function that take the
puzzle input as text and return the answer. Only the standard library is
used.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Usage

The days covered are 1 to 12, 14, 15 and 17 to 20, in the modules
`advent24.day01`, `advent24.day02`, … `advent24.day20`. The puzzle input is
passed in as a string:

```python
from pathlib import Path

from advent24 import day01, day07

text = Path("input/day01.txt").read_text()
print(day01.part_one(text))   # total distance between the two lists
print(day01.part_two(text))   # similarity score

print(day07.part_two(Path("input/day07.txt").read_text()))
```

Answers are integers, except `day17.part_one`, which returns the program
output as a comma separated string, and `day18.part_two`, which returns the
blocking coordinate as a string such as `"(6, 1)"`.

Malformed input (a missing separator, an unknown map tile, a missing start
or robot) raises `ValueError`.

### Building blocks

Several days expose the pieces they are built from:

- `day01.parse_columns(text)`
- `day02.parse_reports(text)`, `is_safe(report)`, `is_safe_with_dampener(report)`
- `day05.parse_manual(text)`, `is_ordered(update, rules)`
- `day06.visited_positions(grid, start)`, `gets_stuck(grid, start, obstacle)`
- `day07.parse_equations(text)`, `is_solvable(target, numbers, allow_concat)`
- `day08.parse_antennas(text)`
- `day09.Block`, a file on the disk map with its trailing free space
- `day11.count_stones(stone, blinks)`
- `day14.parse_robots(text)`, `mod_inverse(x, n)`
- `day15.Direction`, the robot moves keyed by their characters
- `day17.Opcode`, `parse_program(text)`, `run_program(a, b, c, program)`,
  the three-bit computer
- `day18.parse_points(text)`, `shortest_path_length(blocked, size)`
- `day19.parse_towels(text)`, `count_arrangements(pattern, towels)`
- `day20.race_path(text)`, `count_cheats(path, radius, threshold)`

### Sizes and thresholds

Days whose puzzle depends on a size or a count take it as a parameter with
the full puzzle's value as default, so the small worked examples from the
puzzle descriptions can be checked too:

- `day11.part_one(text, blinks=25)`, `day11.part_two(text, blinks=75)`
- `day14.part_one(text, width=101, height=103, seconds=100)`,
  `day14.part_two(text, width=101, height=103)`
- `day18.part_one(text, size=70, count=1024)`,
  `day18.part_two(text, size=70, start=1024)`
- `day20.part_one(text, threshold=100)`, `day20.part_two(text, threshold=100)`

## What it does not do

- There are no solutions for days 13 and 16, nor for days 21 to 25.
- There is no command-line program: nothing runs the days for you, checks
  answers against known values or times them. Call the functions from
  Python.
- No puzzle inputs are included; read your own and pass the text in.