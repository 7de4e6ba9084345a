"""Day 5: check and repair the order of print updates."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping, Sequence
from functools import cmp_to_key
from itertools import pairwise


def parse_manual(text: str) -> tuple[dict[int, set[int]], list[list[int]]]:
    """Split the input into ordering rules and page updates."""
    lines = text.rstrip().splitlines()
    try:
        split = lines.index("")
    except ValueError:
        raise ValueError("input has no blank line between rules and updates") from None
    rules: dict[int, set[int]] = defaultdict(set)
    for line in lines[:split]:
        before, after = line.split("|")
        rules[int(before)].add(int(after))
    updates = [[int(page) for page in line.split(",")] for line in lines[split + 1 :]]
    return dict(rules), updates


def is_ordered(update: Sequence[int], rules: Mapping[int, set[int]]) -> bool:
    """True when every adjacent pair of pages is allowed by a rule."""
    return all(b in rules.get(a, ()) for a, b in pairwise(update))


def part_one(text: str) -> int:
    """Sum of the middle pages of correctly ordered updates."""
    rules, updates = parse_manual(text)
    return sum(update[len(update) // 2] for update in updates if is_ordered(update, rules))


def part_two(text: str) -> int:
    """Sum of the middle pages of misordered updates after sorting them."""
    rules, updates = parse_manual(text)

    def compare(a: int, b: int) -> int:
        return -1 if b in rules.get(a, ()) else 1

    total = 0
    for update in updates:
        if is_ordered(update, rules):
            continue
        fixed = sorted(update, key=cmp_to_key(compare))
        total += fixed[len(fixed) // 2]
    return total