import pytest

from advent24.day11 import count_stones, part_one, part_two


def test_example_after_six_blinks():
    assert part_one("125 17", blinks=6) == 22


def test_example_after_twenty_five_blinks():
    assert part_one("125 17") == 55312


@pytest.mark.parametrize("stone", [0, 1, 17, 125, 2024, 123456])
def test_zero_blinks_keeps_one_stone(stone):
    assert count_stones(stone, 0) == 1


@pytest.mark.parametrize("blinks", [1, 5, 20])
def test_zero_becomes_one(blinks):
    assert count_stones(0, blinks) == count_stones(1, blinks - 1)


@pytest.mark.parametrize("blinks", [1, 4, 15])
def test_odd_length_stone_is_multiplied(blinks):
    assert count_stones(1, blinks) == count_stones(2024, blinks - 1)


@pytest.mark.parametrize("blinks", [1, 3, 12])
def test_even_length_stone_splits(blinks):
    assert count_stones(1000, blinks) == count_stones(10, blinks - 1) + count_stones(
        0, blinks - 1
    )


def test_total_is_sum_of_stones():
    assert part_two("125 17", blinks=30) == count_stones(125, 30) + count_stones(17, 30)


def test_stone_count_never_shrinks():
    counts = [count_stones(125, blinks) for blinks in range(20)]
    assert counts == sorted(counts)


def test_negative_blinks_rejected():
    with pytest.raises(ValueError):
        count_stones(5, -1)