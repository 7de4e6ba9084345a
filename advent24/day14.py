"""Day 14: predict where the bathroom robots end up."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Sequence

Vector = tuple[int, int]
Robot = tuple[Vector, Vector]

WIDTH = 101
HEIGHT = 103
SECONDS = 100

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")


def parse_robots(text: str) -> list[Robot]:
    """Parse 'p=x,y v=dx,dy' lines into (position, velocity) pairs."""
    robots = []
    for line in text.strip().splitlines():
        match = _ROBOT.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"malformed robot {line!r}")
        px, py, vx, vy = (int(group) for group in match.groups())
        robots.append(((px, py), (vx, vy)))
    return robots


def mod_inverse(x: int, n: int) -> int:
    """Multiplicative inverse of x modulo n."""
    try:
        return pow(x, -1, n)
    except ValueError:
        raise ValueError(f"{x} has no inverse modulo {n}") from None


def part_one(
    text: str, width: int = WIDTH, height: int = HEIGHT, seconds: int = SECONDS
) -> int:
    """Safety factor: product of robot counts in the four quadrants after `seconds`."""
    vertical, horizontal = width // 2, height // 2
    quadrants: Counter[tuple[bool, bool]] = Counter()
    for (px, py), (vx, vy) in parse_robots(text):
        x = (px + vx * seconds) % width
        y = (py + vy * seconds) % height
        if x == vertical or y == horizontal:
            continue
        quadrants[(x < vertical, y < horizontal)] += 1
    return math.prod(
        quadrants[key] for key in ((True, True), (False, True), (False, False), (True, False))
    )


def _best_time(axis: Sequence[Vector], period: int, tries: int) -> int:
    """First time at which the robots sit closest to the centre line on one axis."""
    centre = period // 2
    return min(
        range(tries),
        key=lambda t: sum(abs((p + v * t) % period - centre) for p, v in axis),
    )


def part_two(text: str, width: int = WIDTH, height: int = HEIGHT) -> int:
    """Seconds until the robots gather into the picture, found per axis and combined."""
    robots = parse_robots(text)
    best_x = _best_time([(p[0], v[0]) for p, v in robots], width, width)
    best_y = _best_time([(p[1], v[1]) for p, v in robots], height, width)
    total = best_x * mod_inverse(height, width) * height
    total += best_y * mod_inverse(width, height) * width
    return total % (height * width)