import pytest

from advent24.day18 import parse_points, part_one, part_two, shortest_path_length

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


def test_part_one_example():
    assert part_one(EXAMPLE, size=6, count=12) == 22


def test_part_two_example():
    assert part_two(EXAMPLE, size=6, start=12) == "(6, 1)"


def test_parse_points_round_trip():
    points = parse_points(EXAMPLE)
    assert "\n".join(f"{x},{y}" for x, y in points) == EXAMPLE.strip()


@pytest.mark.parametrize("size", [1, 6, 70])
def test_empty_grid_path_is_manhattan(size):
    assert shortest_path_length(set(), size) == 2 * size


def test_wall_blocks_path():
    size = 4
    wall = {(x, 2) for x in range(size + 1)}
    assert shortest_path_length(wall, size) is None


def test_part_one_raises_when_blocked():
    text = "\n".join(f"{x},2" for x in range(5))
    with pytest.raises(ValueError):
        part_one(text, size=4, count=5)


def test_part_two_raises_when_never_blocked():
    with pytest.raises(ValueError):
        part_two("1,1\n2,2", size=6, start=0)


def test_part_two_byte_is_the_first_that_blocks():
    points = parse_points(EXAMPLE)
    answer = part_two(EXAMPLE, size=6, start=0)
    index = [f"({x}, {y})" for x, y in points].index(answer)
    assert shortest_path_length(points[:index], 6) is not None
    assert shortest_path_length(points[: index + 1], 6) is None


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        parse_points("1;2")