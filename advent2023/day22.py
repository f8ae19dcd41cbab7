"""Falling sand bricks: which can be removed and how many fall in a chain."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from advent2023.days import Day
from advent2023.runner import solution_main

DAY = Day(22)


@dataclass(frozen=True, order=True)
class Coord:
    x: int
    y: int
    z: int

    @classmethod
    def parse(cls, text: str) -> Coord:
        """Parse ``x,y,z``; z must be at least 1."""
        items = [item.strip() for item in text.split(",")]
        if len(items) != 3:
            raise ValueError(f"expected three coordinates: {text!r}")
        x, y, z = (int(item) for item in items)
        if min(x, y) < 0:
            raise ValueError(f"coordinates must not be negative: {text!r}")
        if z < 1:
            raise ValueError(f"z must be at least 1: {text!r}")
        return cls(x, y, z)

    def shifted(self, dz: int) -> Coord:
        return Coord(self.x, self.y, self.z + dz)


@dataclass(frozen=True)
class Brick:
    id: int
    a: Coord
    b: Coord

    @classmethod
    def parse(cls, text: str, brick_id: int = 0) -> Brick:
        """Parse ``x,y,z~x,y,z``."""
        if "~" not in text:
            raise ValueError(f"expected two ends separated by '~': {text!r}")
        first, second = text.split("~", 1)
        return cls(brick_id, Coord.parse(first), Coord.parse(second))

    @property
    def min_z(self) -> int:
        return min(self.a.z, self.b.z)

    @property
    def max_z(self) -> int:
        return max(self.a.z, self.b.z)

    def area(self) -> int:
        """Number of unit cubes the brick occupies."""
        return (
            (abs(self.a.x - self.b.x) + 1)
            * (abs(self.a.y - self.b.y) + 1)
            * (abs(self.a.z - self.b.z) + 1)
        )

    def moved(self, dz: int) -> Brick:
        return Brick(self.id, self.a.shifted(dz), self.b.shifted(dz))

    def below(self) -> Brick:
        return self.moved(-1)

    def above(self) -> Brick:
        return self.moved(1)

    def overlaps_xy(self, other: Brick) -> bool:
        return not (
            self.a.x > other.b.x
            or self.b.x < other.a.x
            or self.a.y > other.b.y
            or self.b.y < other.a.y
        )

    def overlaps(self, other: Brick) -> bool:
        return self.overlaps_xy(other) and not (
            self.a.z > other.b.z or self.b.z < other.a.z
        )


@dataclass
class Structure:
    """Which bricks a brick holds up, and which bricks hold it up."""

    id: int
    supporting: list[int] = field(default_factory=list)
    supported_by: list[int] = field(default_factory=list)


def parse_bricks(text: str) -> list[Brick]:
    """One brick per line, numbered by line order."""
    lines = [line for line in text.splitlines() if line.strip()]
    return [Brick.parse(line, index) for index, line in enumerate(lines)]


def settle_bricks(bricks: Iterable[Brick]) -> list[Brick]:
    """Let every brick fall until it rests on the ground (z=1) or another brick."""
    settled: list[Brick] = []
    for brick in sorted(bricks, key=lambda item: item.min_z):
        floor = max(
            (resting.max_z for resting in settled if resting.overlaps_xy(brick)),
            default=0,
        )
        settled.append(brick.moved(floor + 1 - brick.min_z))
    return settled


def build_structures(bricks: Sequence[Brick]) -> dict[int, Structure]:
    """Support relations of a settled stack, keyed by brick id."""
    by_bottom: dict[int, list[Brick]] = defaultdict(list)
    by_top: dict[int, list[Brick]] = defaultdict(list)
    for brick in bricks:
        by_bottom[brick.min_z].append(brick)
        by_top[brick.max_z].append(brick)

    structures: dict[int, Structure] = {}
    for brick in bricks:
        above = brick.above()
        below = brick.below()
        supporting = [
            other.id
            for other in by_bottom.get(brick.max_z + 1, [])
            if other.id != brick.id and other.overlaps(above)
        ]
        supported_by = [
            other.id
            for other in by_top.get(brick.min_z - 1, [])
            if other.id != brick.id and other.overlaps(below)
        ]
        structures[brick.id] = Structure(brick.id, supporting, supported_by)
    return structures


def removable_bricks(structures: dict[int, Structure]) -> list[int]:
    """Bricks whose removal leaves every brick above still supported."""
    return [
        brick_id
        for brick_id, structure in structures.items()
        if all(
            above in structures and len(structures[above].supported_by) > 1
            for above in structure.supporting
        )
    ]


def _fallen_count(structures: dict[int, Structure], start: int) -> int:
    disintegrated = {start}
    stack = [iter(structures[start].supporting)]
    while stack:
        above = next(stack[-1], None)
        if above is None:
            stack.pop()
            continue
        if all(below in disintegrated for below in structures[above].supported_by):
            disintegrated.add(above)
            stack.append(iter(structures[above].supporting))
    return len(disintegrated) - 1


def chain_reactions(structures: dict[int, Structure], removable: Iterable[int]) -> list[int]:
    """For every brick that is not removable, how many other bricks would fall."""
    safe = set(removable)
    return [
        _fallen_count(structures, brick_id)
        for brick_id in structures
        if brick_id not in safe
    ]


def _settled_structures(text: str) -> dict[int, Structure]:
    return build_structures(settle_bricks(parse_bricks(text)))


def part_one(text: str) -> int | None:
    return len(removable_bricks(_settled_structures(text)))


def part_two(text: str) -> int | None:
    structures = _settled_structures(text)
    return sum(chain_reactions(structures, removable_bricks(structures)))


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()