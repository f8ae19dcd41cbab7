"""Garden plots a gardener can reach in an exact number of steps on a repeating map."""

from __future__ import annotations

from typing import Sequence

from advent2023.days import Day
from advent2023.runner import solution_main

DAY = Day(21)

PART_ONE_STEPS = 64
PART_TWO_STEPS = 26_501_365

Coord = tuple[int, int]


def parse_input(text: str) -> tuple[set[Coord], Coord]:
    """Rocks as a set of ``(x, y)`` and the starting position."""
    walls: set[Coord] = set()
    start: Coord = (0, 0)
    for y, line in enumerate(text.splitlines()):
        for x, char in enumerate(line):
            if char == "#":
                walls.add((x, y))
            elif char == "S":
                start = (x, y)
    return walls, start


def parse_bounds(text: str) -> tuple[int, int]:
    """Number of rows and the width of the first row."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    return len(lines), len(lines[0])


def reachable_count(walls: set[Coord], start: Coord, steps: int, size: int) -> int:
    """Plots reachable in exactly ``steps`` steps on a map repeating every ``size`` tiles."""
    positions = {start}
    for _ in range(steps):
        positions = {
            neighbor
            for x, y in positions
            for neighbor in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
            if (neighbor[0] % size, neighbor[1] % size) not in walls
        }
    return len(positions)


def part_one(text: str) -> int | None:
    walls, start = parse_input(text)
    size = len(text.splitlines())
    return reachable_count(walls, start, PART_ONE_STEPS, size)


def part_two(text: str) -> int | None:
    """Extrapolate quadratically from three runs; relies on the shape of real inputs."""
    walls, start = parse_input(text)
    rows, columns = parse_bounds(text)
    if rows != columns:
        raise ValueError("map must be square")
    size = rows
    if size % 2 != 1:
        raise ValueError("map size must be odd")

    half = size // 2
    a0, a1, a2 = (
        reachable_count(walls, start, steps, size)
        for steps in (half, half + size, half + 2 * size)
    )
    n = PART_TWO_STEPS // size

    b0 = a0
    b1 = a1 - a0
    b2 = a2 - a1
    if b1 < 0 or b2 < 0 or b2 < b1 or n < 1:
        raise ValueError("map does not grow quadratically")

    return b0 + b1 * n + (n * (n - 1) // 2) * (b2 - b1)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()