"""Day 20: count the cheats that shorten the race through the program track."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Position = tuple[int, int]

SHORTCUT_THRESHOLD = 100
SHORT_CHEAT_RADIUS = 2
LONG_CHEAT_RADIUS = 20

_TILES = frozenset("SE.#")


def race_path(text: str) -> list[Position]:
    """The tiles of the shortest track from S to E, in the order they are run."""
    grid = text.strip().splitlines()
    start: Position | None = None
    goal: Position | None = None
    for y, line in enumerate(grid):
        for x, char in enumerate(line):
            if char not in _TILES:
                raise ValueError(f"unknown track tile {char!r}")
            if char == "S":
                start = (x, y)
            elif char == "E":
                goal = (x, y)
    if start is None:
        raise ValueError("track has no start 'S'")
    if goal is None:
        raise ValueError("track has no end 'E'")

    previous: dict[Position, Position | None] = {start: None}
    queue = deque([start])
    while queue:
        position = queue.popleft()
        if position == goal:
            break
        x, y = position
        for following in ((x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1)):
            nx, ny = following
            if (
                0 <= ny < len(grid)
                and 0 <= nx < len(grid[ny])
                and grid[ny][nx] != "#"
                and following not in previous
            ):
                previous[following] = position
                queue.append(following)

    if goal not in previous:
        raise ValueError("the end cannot be reached")
    path: list[Position] = []
    node: Position | None = goal
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()
    return path


def _offsets(radius: int) -> list[tuple[int, int, int]]:
    """Every (dx, dy, distance) a cheat can jump, at Manhattan distance 2 to radius."""
    offsets = []
    for dx in range(-radius, radius + 1):
        reach = radius - abs(dx)
        for dy in range(-reach, reach + 1):
            distance = abs(dx) + abs(dy)
            if distance >= 2:
                offsets.append((dx, dy, distance))
    return offsets


def count_cheats(path: Sequence[Position], radius: int, threshold: int) -> int:
    """Number of cheats of at most `radius` steps that save at least `threshold` picoseconds."""
    if radius < 0:
        raise ValueError("cheat radius must not be negative")
    index = {position: step for step, position in enumerate(path)}
    offsets = _offsets(radius)
    count = 0
    for step, (x, y) in enumerate(path):
        for dx, dy, distance in offsets:
            landing = index.get((x + dx, y + dy))
            if landing is not None and max(landing - step - distance, 0) >= threshold:
                count += 1
    return count


def part_one(text: str, threshold: int = SHORTCUT_THRESHOLD) -> int:
    """Cheats of up to two steps that save at least `threshold` picoseconds."""
    return count_cheats(race_path(text), SHORT_CHEAT_RADIUS, threshold)


def part_two(text: str, threshold: int = SHORTCUT_THRESHOLD) -> int:
    """Cheats of up to twenty steps that save at least `threshold` picoseconds."""
    return count_cheats(race_path(text), LONG_CHEAT_RADIUS, threshold)