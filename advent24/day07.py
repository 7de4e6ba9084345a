"""Day 7: find which calibration equations can be made true."""

from __future__ import annotations

from collections.abc import Sequence


def parse_equations(text: str) -> list[tuple[int, list[int]]]:
    """Parse lines of the form 'target: n1 n2 ...'."""
    equations = []
    for line in text.strip().splitlines():
        target, separator, rest = line.partition(":")
        if not separator:
            raise ValueError(f"missing ':' in {line!r}")
        equations.append((int(target), [int(n) for n in rest.split()]))
    return equations


def _concat(left: int, right: int) -> int:
    return left * 10 ** len(str(right)) + right


def is_solvable(target: int, numbers: Sequence[int], allow_concat: bool) -> bool:
    """True when +, * (and || if allowed), applied left to right, can reach the target."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    reachable = {numbers[0]}
    for number in numbers[1:]:
        following: set[int] = set()
        for value in reachable:
            candidates = [value + number, value * number]
            if allow_concat:
                candidates.append(_concat(value, number))
                candidates = [c for c in candidates if c <= target]
            following.update(candidates)
        reachable = following
    return target in reachable


def _total(text: str, allow_concat: bool) -> int:
    return sum(
        target
        for target, numbers in parse_equations(text)
        if is_solvable(target, numbers, allow_concat)
    )


def part_one(text: str) -> int:
    """Sum of targets reachable with addition and multiplication."""
    return _total(text, allow_concat=False)


def part_two(text: str) -> int:
    """Sum of targets reachable when concatenation is also allowed."""
    return _total(text, allow_concat=True)