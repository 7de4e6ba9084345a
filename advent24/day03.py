"""Day 3: add up the valid multiplications in corrupted memory."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_MUL_OR_SWITCH = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|don't\(\)|do\(\)")


def part_one(text: str) -> int:
    """Sum of every mul(a,b) product."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part_two(text: str) -> int:
    """Sum of the products, honouring do() and don't() switches."""
    total = 0
    enabled = True
    for match in _MUL_OR_SWITCH.finditer(text):
        token = match.group(0)
        if token == "don't()":
            enabled = False
        elif token == "do()":
            enabled = True
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total