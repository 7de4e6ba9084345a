"""Day 12: price the fencing for each garden region."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

Position = tuple[int, int]
_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _regions(text: str) -> Iterator[set[Position]]:
    """Yield each connected region of equal plants as a set of tiles."""
    grid = text.strip().splitlines()
    seen: set[Position] = set()
    for y, line in enumerate(grid):
        for x, plant in enumerate(line):
            if (x, y) in seen:
                continue
            region = {(x, y)}
            queue = deque([(x, y)])
            while queue:
                cx, cy = queue.popleft()
                for dx, dy in _STEPS:
                    nx, ny = cx + dx, cy + dy
                    if (
                        (nx, ny) not in region
                        and 0 <= ny < len(grid)
                        and 0 <= nx < len(grid[ny])
                        and grid[ny][nx] == plant
                    ):
                        region.add((nx, ny))
                        queue.append((nx, ny))
            seen |= region
            yield region


def _perimeter(region: set[Position]) -> int:
    return sum(
        (x + dx, y + dy) not in region for x, y in region for dx, dy in _STEPS
    )


def _corners(region: set[Position]) -> int:
    """Corners of the region, which equal the number of its straight sides."""
    total = 0
    for x, y in region:
        # Each pair of neighbouring orthogonal directions meets at one diagonal.
        for (ax, ay), (bx, by) in zip(_STEPS, _STEPS[1:] + _STEPS[:1]):
            first = (x + ax, y + ay) in region
            second = (x + bx, y + by) in region
            diagonal = (x + ax + bx, y + ay + by) in region
            if (not first and not second) or (first and second and not diagonal):
                total += 1
    return total


def part_one(text: str) -> int:
    """Total price with area times perimeter."""
    return sum(len(region) * _perimeter(region) for region in _regions(text))


def part_two(text: str) -> int:
    """Total price with area times number of sides."""
    return sum(len(region) * _corners(region) for region in _regions(text))