"""Day 10: score and rate the hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

Position = tuple[int, int]
_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_SUMMIT = 9


def _parse(text: str) -> list[list[int | None]]:
    """Heights per tile; tiles that are not digits are impassable (None)."""
    return [
        [int(char) if char.isdigit() else None for char in line]
        for line in text.strip().splitlines()
    ]


def _trailheads(grid: list[list[int | None]]) -> Iterator[Position]:
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            if height == 0:
                yield x, y


def _uphill(grid: list[list[int | None]], position: Position) -> Iterator[Position]:
    x, y = position
    current = grid[y][x]
    if current is None:
        return
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]) and grid[ny][nx] == current + 1:
            yield nx, ny


def _summits(grid: list[list[int | None]], start: Position) -> set[Position]:
    """Every height-9 tile reachable from the start by steps of exactly +1."""
    found: set[Position] = set()
    stack = [start]
    explored: set[Position] = set()
    while stack:
        position = stack.pop()
        if position in explored:
            continue
        explored.add(position)
        for following in _uphill(grid, position):
            x, y = following
            if grid[y][x] == _SUMMIT:
                found.add(following)
            else:
                stack.append(following)
    return found


def part_one(text: str) -> int:
    """Sum over trailheads of the number of distinct summits each can reach."""
    grid = _parse(text)
    return sum(len(_summits(grid, head)) for head in _trailheads(grid))


def part_two(text: str) -> int:
    """Sum over trailheads of the number of distinct trails to any summit."""
    grid = _parse(text)

    @lru_cache(maxsize=None)
    def trails_from(position: Position) -> int:
        total = 0
        for following in _uphill(grid, position):
            x, y = following
            total += 1 if grid[y][x] == _SUMMIT else trails_from(following)
        return total

    return sum(trails_from(head) for head in _trailheads(grid))