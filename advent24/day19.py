"""Day 19: arrange towels to make the requested patterns."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache


def parse_towels(text: str) -> tuple[list[str], list[str]]:
    """Return the available towels and the wanted patterns."""
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("input is empty")
    return lines[0].split(", "), lines[2:]


def count_arrangements(pattern: str, towels: Iterable[str]) -> int:
    """Number of ways the towels can be laid end to end to form the pattern."""
    usable = tuple(towel for towel in towels if towel)

    @lru_cache(maxsize=None)
    def count_from(start: int) -> int:
        if start == len(pattern):
            return 1
        return sum(
            count_from(start + len(towel))
            for towel in usable
            if pattern.startswith(towel, start)
        )

    return count_from(0)


def part_one(text: str) -> int:
    """Number of patterns that can be made at all."""
    towels, patterns = parse_towels(text)
    return sum(1 for pattern in patterns if pattern and count_arrangements(pattern, towels))


def part_two(text: str) -> int:
    """Total number of arrangements over all patterns."""
    towels, patterns = parse_towels(text)
    return sum(count_arrangements(pattern, towels) for pattern in patterns)