import random

import pytest

from advent24.day01 import parse_columns, part_one, part_two

EXAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3
"""


def _swap_columns(text):
    return "\n".join(
        f"{b}   {a}" for a, b in (line.split() for line in text.strip().splitlines())
    )


def test_parse_columns_keeps_order():
    left, right = parse_columns("3   4\n4   3\n")
    assert left == [3, 4]
    assert right == [4, 3]


def test_example_part_one():
    assert part_one(EXAMPLE) == 11


def test_example_part_two():
    assert part_two(EXAMPLE) == 31


def test_part_one_symmetric_in_columns():
    assert part_one(_swap_columns(EXAMPLE)) == part_one(EXAMPLE)


def test_part_two_symmetric_in_columns():
    assert part_two(_swap_columns(EXAMPLE)) == part_two(EXAMPLE)


def test_row_order_does_not_matter():
    rows = EXAMPLE.strip().splitlines()
    random.Random(7).shuffle(rows)
    shuffled = "\n".join(rows)
    assert part_one(shuffled) == part_one(EXAMPLE)
    assert part_two(shuffled) == part_two(EXAMPLE)


def test_identical_columns_have_no_distance():
    text = "\n".join(f"{n}   {n}" for n in (5, 1, 9))
    assert part_one(text) == part_one(_swap_columns(text))
    assert part_two(text) == sum(n * n for n in (5, 1, 9))


def test_bad_line_raises():
    with pytest.raises(ValueError):
        parse_columns("1 2 3\n")


def test_non_numeric_raises():
    with pytest.raises(ValueError):
        part_one("a   b\n")