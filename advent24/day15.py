"""Day 15: simulate the warehouse robot pushing boxes around."""

from __future__ import annotations

from collections import deque
from enum import Enum

Position = tuple[int, int]
Grid = list[list[str]]

_NARROW_TILES = {"#", ".", "O"}
_WIDE_TILES = {"#": "##", ".": "..", "O": "[]"}


class Direction(Enum):
    """A robot move, keyed by the character that encodes it."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    @property
    def offset(self) -> Position:
        """The (dx, dy) step of this move."""
        return _OFFSETS[self]

    @property
    def vertical(self) -> bool:
        """True for moves up or down."""
        return self in (Direction.UP, Direction.DOWN)


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def _parse(text: str, widen: bool) -> tuple[Grid, Position, list[Direction]]:
    lines = text.rstrip().splitlines()
    try:
        split = lines.index("")
    except ValueError:
        raise ValueError("input has no blank line between the map and the moves") from None

    robot: Position | None = None
    grid: Grid = []
    for y, line in enumerate(lines[:split]):
        row: list[str] = []
        for char in line:
            if char == "@":
                if robot is not None:
                    raise ValueError("map has more than one robot")
                robot = (len(row), y)
                row.extend(".." if widen else ".")
            elif widen:
                if char not in _WIDE_TILES:
                    raise ValueError(f"unknown map tile {char!r}")
                row.extend(_WIDE_TILES[char])
            else:
                if char not in _NARROW_TILES:
                    raise ValueError(f"unknown map tile {char!r}")
                row.append(char)
        grid.append(row)
    if robot is None:
        raise ValueError("map has no robot '@'")

    moves = [Direction(char) for line in lines[split + 1:] for char in line.strip()]
    return grid, robot, moves


def _tile(grid: Grid, x: int, y: int) -> str:
    """The tile at (x, y); anything off the map behaves as a wall."""
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return "#"


def _move_narrow(grid: Grid, robot: Position, direction: Direction) -> Position:
    dx, dy = direction.offset
    x, y = robot[0] + dx, robot[1] + dy
    scan_x, scan_y = x, y
    while _tile(grid, scan_x, scan_y) == "O":
        scan_x, scan_y = scan_x + dx, scan_y + dy
    if _tile(grid, scan_x, scan_y) == "#":
        return robot
    if (scan_x, scan_y) != (x, y):
        grid[scan_y][scan_x] = "O"
        grid[y][x] = "."
    return x, y


def _move_wide(grid: Grid, robot: Position, direction: Direction) -> Position:
    dx, dy = direction.offset
    moving: set[Position] = set()
    queue = deque([robot])
    while queue:
        x, y = queue.popleft()
        nx, ny = x + dx, y + dy
        tile = _tile(grid, nx, ny)
        if tile == "#":
            return robot
        if tile == ".":
            continue
        cells = [(nx, ny)]
        if direction.vertical:
            cells.append((nx + 1, ny) if tile == "[" else (nx - 1, ny))
        for cell in cells:
            if cell not in moving:
                moving.add(cell)
                queue.append(cell)

    # Shift the furthest cells first so nothing is overwritten.
    for x, y in sorted(moving, key=lambda cell: cell[0] * dx + cell[1] * dy, reverse=True):
        grid[y + dy][x + dx] = grid[y][x]
        grid[y][x] = "."
    return robot[0] + dx, robot[1] + dy


def _gps_sum(grid: Grid, box: str) -> int:
    return sum(
        100 * y + x for y, row in enumerate(grid) for x, tile in enumerate(row) if tile == box
    )


def part_one(text: str) -> int:
    """Sum of box GPS coordinates after all moves."""
    grid, robot, moves = _parse(text, widen=False)
    for direction in moves:
        robot = _move_narrow(grid, robot, direction)
    return _gps_sum(grid, "O")


def part_two(text: str) -> int:
    """Sum of box GPS coordinates after all moves in the doubled-width warehouse."""
    grid, robot, moves = _parse(text, widen=True)
    for direction in moves:
        robot = _move_wide(grid, robot, direction)
    return _gps_sum(grid, "[")