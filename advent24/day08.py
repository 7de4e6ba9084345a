"""Day 8: count antinodes created by resonant antennas."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from itertools import combinations

Position = tuple[int, int]


def parse_antennas(text: str) -> tuple[dict[str, list[Position]], int, int]:
    """Return the antenna positions by frequency, and the map width and height."""
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("map is empty")
    antennas: dict[str, list[Position]] = defaultdict(list)
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != ".":
                antennas[char].append((x, y))
    return dict(sorted(antennas.items())), len(lines[0]), len(lines)


def _pairs(antennas: dict[str, list[Position]]) -> Iterator[tuple[Position, Position]]:
    for coords in antennas.values():
        yield from combinations(coords, 2)


def part_one(text: str) -> int:
    """Distinct in-bounds antinodes one step beyond each antenna pair."""
    antennas, width, height = parse_antennas(text)
    antinodes: set[Position] = set()
    for (x1, y1), (x2, y2) in _pairs(antennas):
        dx, dy = x1 - x2, y1 - y2
        for ax, ay in ((x1 + dx, y1 + dy), (x2 - dx, y2 - dy)):
            if 0 <= ax < width and 0 <= ay < height:
                antinodes.add((ax, ay))
    return len(antinodes)


def part_two(text: str) -> int:
    """Distinct in-bounds antinodes anywhere on the line through each antenna pair."""
    antennas, width, height = parse_antennas(text)
    antinodes: set[Position] = set()
    for (x1, y1), (x2, y2) in _pairs(antennas):
        dx, dy = x1 - x2, y1 - y2
        for (x, y), (sx, sy) in (((x1, y1), (dx, dy)), ((x2, y2), (-dx, -dy))):
            while 0 <= x < width and 0 <= y < height:
                antinodes.add((x, y))
                x, y = x + sx, y + sy
    return len(antinodes)