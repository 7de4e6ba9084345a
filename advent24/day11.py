"""Day 11: count the plutonian pebbles after repeated blinks."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=None)
def count_stones(stone: int, blinks: int) -> int:
    """Number of stones a single stone turns into after the given number of blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    if blinks == 0:
        return 1
    if stone == 0:
        return count_stones(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return count_stones(int(digits[:half]), blinks - 1) + count_stones(
            int(digits[half:]), blinks - 1
        )
    return count_stones(stone * 2024, blinks - 1)


def _total(text: str, blinks: int) -> int:
    return sum(count_stones(int(stone), blinks) for stone in text.split())


def part_one(text: str, blinks: int = 25) -> int:
    """Stones present after 25 blinks."""
    return _total(text, blinks)


def part_two(text: str, blinks: int = 75) -> int:
    """Stones present after 75 blinks."""
    return _total(text, blinks)