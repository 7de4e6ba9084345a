"""Day 2: decide which reactor reports are safe."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report of space separated levels per line."""
    return [[int(level) for level in line.split(" ")] for line in text.splitlines()]


def _differences(report: Sequence[int]) -> list[int]:
    return [right - left for left, right in pairwise(report)]


def is_safe(report: Sequence[int]) -> bool:
    """True when the levels move in one direction by steps of 1 to 3."""
    diffs = _differences(report)
    directions = {(d > 0) - (d < 0) for d in diffs}
    return len(directions) <= 1 and all(1 <= abs(d) <= 3 for d in diffs)


def _first_violation(report: Sequence[int]) -> int | None:
    """Index of the first difference that breaks the rules, or None."""
    diffs = _differences(report)
    if not diffs:
        return None
    increasing = diffs[0] > 0
    for index, diff in enumerate(diffs):
        if (increasing and diff < 0) or (not increasing and diff > 0) or not 1 <= abs(diff) <= 3:
            return index
    return None


def is_safe_with_dampener(report: Sequence[int]) -> bool:
    """True when the report is safe, or becomes safe by dropping one level near the fault."""
    failure = _first_violation(report)
    if failure is None:
        return True
    for skip in range(max(failure - 1, 0), failure + 2):
        if is_safe([level for index, level in enumerate(report) if index != skip]):
            return True
    return False


def part_one(text: str) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in parse_reports(text))


def part_two(text: str) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(is_safe_with_dampener(report) for report in parse_reports(text))