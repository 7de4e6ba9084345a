"""Day 9: compact the amphipod's disk and compute its checksum."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Block:
    """A file on the disk map with the free space that follows it."""

    id: int
    used: int
    free: int


def _parse_blocks(text: str) -> list[Block]:
    digits = text.strip()
    if not digits.isdigit():
        raise ValueError("disk map must contain only digits")
    return [
        Block(id=file_id, used=int(digits[start]), free=int(digits[start + 1:start + 2] or 0))
        for file_id, start in enumerate(range(0, len(digits), 2))
    ]


def part_one(text: str) -> int:
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    disk: list[int | None] = []
    for block in _parse_blocks(text):
        disk.extend([block.id] * block.used)
        disk.extend([None] * block.free)

    left, right = 0, len(disk) - 1
    while True:
        while left < len(disk) and disk[left] is not None:
            left += 1
        while right >= 0 and disk[right] is None:
            right -= 1
        if left > right:
            break
        disk[left], disk[right] = disk[right], disk[left]
        left += 1
        right -= 1

    files = (file_id for file_id in disk if file_id is not None)
    return sum(position * file_id for position, file_id in enumerate(files))


def part_two(text: str) -> int:
    """Checksum after moving whole files into the leftmost gap that fits them."""
    disk = _parse_blocks(text)
    r_pos = len(disk) - 1
    while True:
        moving = disk[r_pos]
        l_pos = next(
            (index for index, block in enumerate(disk) if block.free >= moving.used),
            len(disk) - 1,
        )
        if l_pos >= r_pos:
            if r_pos == 0:
                break
            r_pos -= 1
            continue

        disk[r_pos - 1].free += moving.used + moving.free
        del disk[r_pos]
        disk.insert(
            l_pos + 1,
            Block(id=moving.id, used=moving.used, free=disk[l_pos].free - moving.used),
        )
        disk[l_pos].free = 0

    total = 0
    position = 0
    for block in disk:
        total += block.id * sum(range(position, position + block.used))
        position += block.used + block.free
    return total