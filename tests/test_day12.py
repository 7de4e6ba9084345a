import pytest

from advent24.day12 import part_one, part_two

EXAMPLE = """\
AAAA
BBCD
BBCC
EEEC
"""


def _rectangle(width: int, height: int, plant: str = "A") -> str:
    return "\n".join(plant * width for _ in range(height))


def test_part_one_example():
    assert part_one(EXAMPLE) == 140


def test_part_two_example():
    assert part_two(EXAMPLE) == 80


@pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (5, 7)])
def test_rectangle_perimeter_price(width, height):
    assert part_one(_rectangle(width, height)) == width * height * 2 * (width + height)


@pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (5, 7)])
def test_rectangle_has_four_sides(width, height):
    assert part_two(_rectangle(width, height)) == width * height * 4


def test_sides_never_exceed_perimeter():
    assert part_two(EXAMPLE) <= part_one(EXAMPLE)


def test_disconnected_same_plant_is_priced_separately():
    split = "AXA"
    assert part_one(split) == 2 * part_one("A") + part_one("X")
    assert part_two(split) == 2 * part_two("A") + part_two("X")


def test_enclosed_region_adds_inner_sides():
    ring = "AAA\nABA\nAAA"
    assert part_two(ring) == 8 * 8 + part_two("B")