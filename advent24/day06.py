"""Day 6: follow the patrolling guard around the lab."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Position = tuple[int, int]
_State = tuple[int, int, int, int]

_UP = (0, -1)
_TURN_RIGHT = {(0, -1): (1, 0), (1, 0): (0, 1), (0, 1): (-1, 0), (-1, 0): (0, -1)}


def _parse(text: str) -> tuple[list[str], Position]:
    grid = text.rstrip().splitlines()
    for y, line in enumerate(grid):
        x = line.find("^")
        if x >= 0:
            return grid, (x, y)
    raise ValueError("map has no guard '^'")


def _walk(
    grid: Sequence[str], start: Position, obstacle: Position | None = None
) -> Iterator[_State]:
    """Yield the guard's (x, y, dx, dy) after every move or turn until she leaves."""
    height, width = len(grid), len(grid[0])
    x, y = start
    dx, dy = _UP
    yield x, y, dx, dy
    while True:
        nx, ny = x + dx, y + dy
        if not (0 <= nx < width and 0 <= ny < height):
            return
        if grid[ny][nx] == "#" or (nx, ny) == obstacle:
            dx, dy = _TURN_RIGHT[(dx, dy)]
        else:
            x, y = nx, ny
        yield x, y, dx, dy


def visited_positions(grid: Sequence[str], start: Position) -> set[Position]:
    """Every tile the guard stands on before walking off the map."""
    return {(x, y) for x, y, _, _ in _walk(grid, start)}


def gets_stuck(grid: Sequence[str], start: Position, obstacle: Position) -> bool:
    """True when an extra obstacle at the given tile traps the guard in a loop."""
    seen: set[_State] = set()
    for state in _walk(grid, start, obstacle):
        if state in seen:
            return True
        seen.add(state)
    return False


def part_one(text: str) -> int:
    """Number of distinct tiles the guard visits."""
    grid, start = _parse(text)
    return len(visited_positions(grid, start))


def part_two(text: str) -> int:
    """Number of tiles on the guard's route where a new obstacle causes a loop."""
    grid, start = _parse(text)
    candidates = visited_positions(grid, start) - {start}
    return sum(gets_stuck(grid, start, tile) for tile in candidates)