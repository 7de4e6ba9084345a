"""Day 18: escape the memory grid as bytes fall into it."""

from __future__ import annotations

from collections import deque
from collections.abc import Collection, Sequence

Position = tuple[int, int]

MAP_MAX = 70
FIRST_BYTES = 1024


def parse_points(text: str) -> list[Position]:
    """Parse one 'x,y' coordinate per line."""
    points = []
    for line in text.strip().splitlines():
        x, separator, y = line.partition(",")
        if not separator:
            raise ValueError(f"missing ',' in {line!r}")
        points.append((int(x), int(y)))
    return points


def shortest_path_length(blocked: Collection[Position], size: int) -> int | None:
    """Fewest steps from (0, 0) to (size, size) avoiding blocked tiles, or None."""
    blocked = set(blocked)
    goal = (size, size)
    distances = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        if (x, y) == goal:
            return distances[goal]
        for nx, ny in ((x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1)):
            if (
                0 <= nx <= size
                and 0 <= ny <= size
                and (nx, ny) not in blocked
                and (nx, ny) not in distances
            ):
                distances[(nx, ny)] = distances[(x, y)] + 1
                queue.append((nx, ny))
    return None


def _path_exists(points: Sequence[Position], size: int) -> bool:
    return shortest_path_length(points, size) is not None


def part_one(text: str, size: int = MAP_MAX, count: int = FIRST_BYTES) -> int:
    """Shortest path length after the first `count` bytes have fallen."""
    steps = shortest_path_length(parse_points(text)[:count], size)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part_two(text: str, size: int = MAP_MAX, start: int = FIRST_BYTES) -> str:
    """Coordinates of the first byte that cuts off the exit, as '(x, y)'."""
    points = parse_points(text)
    if _path_exists(points, size):
        raise ValueError("no byte ever blocks the exit")
    low, high = min(start, len(points) - 1), len(points) - 1
    while low < high:
        middle = (low + high) // 2
        if _path_exists(points[: middle + 1], size):
            low = middle + 1
        else:
            high = middle
    x, y = points[low]
    return f"({x}, {y})"