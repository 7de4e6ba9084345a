"""Solutions to 2024 Advent of Code puzzles, one module per day with part_one and part_two."""

__version__ = "0.1.0"