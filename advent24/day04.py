"""Day 4: word search for XMAS."""

from __future__ import annotations

_DIRECTIONS = ((0, -1), (0, 1), (1, -1), (1, 0), (1, 1), (-1, -1), (-1, 0), (-1, 1))
_WORD = "XMAS"


def _grid(text: str) -> list[str]:
    return text.rstrip().splitlines()


def _spells_word(lines: list[str], x: int, y: int, dx: int, dy: int) -> bool:
    height, width = len(lines), len(lines[0])
    for step, expected in enumerate(_WORD):
        px, py = x + dx * step, y + dy * step
        if not (0 <= py < height and 0 <= px < width) or lines[py][px] != expected:
            return False
    return True


def part_one(text: str) -> int:
    """Count XMAS in all eight directions."""
    lines = _grid(text)
    if not lines:
        return 0
    return sum(
        _spells_word(lines, x, y, dx, dy)
        for y in range(len(lines))
        for x in range(len(lines[0]))
        for dx, dy in _DIRECTIONS
    )


def part_two(text: str) -> int:
    """Count crossed MAS diagonals centred on an A."""
    lines = _grid(text)
    pair = {"M", "S"}
    seen = 0
    for y in range(1, len(lines) - 1):
        for x in range(1, len(lines[0]) - 1):
            if lines[y][x] != "A":
                continue
            rising = {lines[y - 1][x + 1], lines[y + 1][x - 1]}
            falling = {lines[y - 1][x - 1], lines[y + 1][x + 1]}
            if rising == pair and falling == pair:
                seen += 1
    return seen