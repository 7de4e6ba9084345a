"""Day 1: compare two columns of location ids."""

from __future__ import annotations

from collections import Counter


def parse_columns(text: str) -> tuple[list[int], list[int]]:
    """Split the puzzle input into its left and right columns of integers."""
    left: list[int] = []
    right: list[int] = []
    for line in text.strip().splitlines():
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected two numbers per line, got {line!r}")
        first, second = (int(field) for field in fields)
        left.append(first)
        right.append(second)
    return left, right


def part_one(text: str) -> int:
    """Total distance between the sorted columns, paired element by element."""
    left, right = parse_columns(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(text: str) -> int:
    """Similarity score: each left number times its count in the right column."""
    left, right = parse_columns(text)
    occurrences = Counter(right)
    return sum(number * occurrences[number] for number in left)