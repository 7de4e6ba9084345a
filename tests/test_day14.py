import pytest

from advent24.day14 import mod_inverse, parse_robots, part_one, part_two

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_parse_robots_reads_negative_velocities():
    robots = parse_robots(EXAMPLE)
    assert len(robots) == 12
    assert robots[0] == ((0, 4), (3, -3))


def test_parse_robots_rejects_garbage():
    with pytest.raises(ValueError):
        parse_robots("p=1,2 velocity")


def test_part_one_example():
    assert part_one(EXAMPLE, width=11, height=7, seconds=100) == 12


def test_part_one_robot_on_middle_line_gives_zero():
    assert part_one("p=5,3 v=0,0", width=11, height=7, seconds=10) == 0


def test_part_one_one_robot_per_quadrant():
    text = "p=0,0 v=0,0\np=10,0 v=0,0\np=0,6 v=0,0\np=10,6 v=0,0"
    assert part_one(text, width=11, height=7, seconds=0) == 1


@pytest.mark.parametrize("x, n", [(3, 7), (101, 103), (103, 101), (5, 12)])
def test_mod_inverse_is_an_inverse(x, n):
    inverse = mod_inverse(x, n)
    assert 0 <= inverse < n
    assert (x * inverse) % n == 1


def test_mod_inverse_rejects_common_factor():
    with pytest.raises(ValueError):
        mod_inverse(2, 4)


def test_part_two_finds_time_robot_reaches_centre():
    width, height = 7, 5
    seconds = part_two("p=0,0 v=1,1", width=width, height=height)
    assert 0 <= seconds < width * height
    assert seconds % width == width // 2
    assert seconds % height == height // 2


def test_part_two_in_range_for_example():
    assert 0 <= part_two(EXAMPLE, width=11, height=7) < 77