"""Hailstones crossing paths and the rock that hits them all."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Sequence

from advent2023.days import Day
from advent2023.runner import solution_main

DAY = Day(24)
TEST_AREA_MIN = 200_000_000_000_000
TEST_AREA_MAX = 400_000_000_000_000
EPSILON = sys.float_info.epsilon


def round_n(value: float, digits: int) -> float:
    """Round to ``digits`` decimals, halves away from zero."""
    factor = 10.0**digits
    scaled = value * factor
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / factor


@dataclass(frozen=True)
class Vector:
    x: float
    y: float
    z: float

    def _components(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def contained_xy(self, low: float, high: float) -> bool:
        """Whether x and y both lie within ``low..=high``, ignoring z."""
        return low <= self.x <= high and low <= self.y <= high


@dataclass(frozen=True)
class Hail:
    p: Vector
    v: Vector

    @classmethod
    def parse(cls, text: str) -> Hail:
        """Parse ``px, py, pz @ vx, vy, vz``."""
        fields = text.replace("@", "").replace(",", "").split()
        if len(fields) != 6:
            raise ValueError(f"expected six numbers in hailstone: {text!r}")
        px, py, pz, vx, vy, vz = (float(item) for item in fields)
        return cls(p=Vector(px, py, pz), v=Vector(vx, vy, vz))

    def position_at(self, t: float) -> Vector:
        return Vector(
            self.p.x + self.v.x * t,
            self.p.y + self.v.y * t,
            self.p.z + self.v.z * t,
        )

    def intersect_xy(self, other: Hail) -> Vector | None:
        """Where the two paths cross in the xy plane, if both reach it in the future."""
        det = self.v.x * other.v.y - self.v.y * other.v.x
        if abs(det) < EPSILON:
            return None

        dx = other.p.x - self.p.x
        dy = other.p.y - self.p.y
        t = (dx * other.v.y - dy * other.v.x) / det

        x = round_n(self.p.x + t * self.v.x, 3)
        y = round_n(self.p.y + t * self.v.y, 3)

        in_future = all(
            ((coord - start) < 0.0) == (speed < 0.0)
            for coord, start, speed in (
                (x, self.p.x, self.v.x),
                (y, self.p.y, self.v.y),
                (x, other.p.x, other.v.x),
                (y, other.p.y, other.v.y),
            )
        )
        if not in_future:
            return None
        return Vector(x, y, 0.0)


def intersections_xy(hail: Sequence[Hail]) -> list[Vector | None]:
    """Crossings for every unordered pair of hailstones."""
    return [
        first.intersect_xy(second)
        for index, first in enumerate(hail)
        for second in hail[index + 1 :]
    ]


def solve_system(a: Sequence[Sequence[float]], c: Sequence[float]) -> list[float] | None:
    """Solve ``a @ x = c`` by Gaussian elimination with partial pivoting."""
    rows = [list(row) for row in a]
    rhs = list(c)
    size = len(rhs)

    for col in range(size):
        pivot = max(range(col, size), key=lambda r: abs(rows[r][col]))
        if abs(rows[pivot][col]) == 0.0:
            return None
        rows[col], rows[pivot] = rows[pivot], rows[col]
        rhs[col], rhs[pivot] = rhs[pivot], rhs[col]

        for below in range(col + 1, size):
            ratio = rows[below][col] / rows[col][col]
            for k in range(col, size):
                rows[below][k] -= ratio * rows[col][k]
            rhs[below] -= ratio * rhs[col]

    solution = [0.0] * size
    for row in reversed(range(size)):
        total = rhs[row] - sum(rows[row][j] * solution[j] for j in range(row + 1, size))
        solution[row] = total / rows[row][row]
    return solution


def _equation(first: Hail, other: Hail, u: int, w: int) -> tuple[list[float], float]:
    p0, v0 = first.p._components(), first.v._components()
    pk, vk = other.p._components(), other.v._components()
    row = [0.0] * 6
    row[u] = v0[w] - vk[w]
    row[w] = vk[u] - v0[u]
    row[3 + u] = pk[w] - p0[w]
    row[3 + w] = p0[u] - pk[u]
    constant = pk[w] * vk[u] - pk[u] * vk[w] - p0[w] * v0[u] + p0[u] * v0[w]
    return row, constant


def _parse_hail(text: str) -> list[Hail]:
    return [Hail.parse(line) for line in text.splitlines() if line.strip()]


def part_one(text: str) -> int | None:
    hail = _parse_hail(text)
    return sum(
        1
        for point in intersections_xy(hail)
        if point is not None and point.contained_xy(TEST_AREA_MIN, TEST_AREA_MAX)
    )


def part_two(text: str) -> int | None:
    hailstones = _parse_hail(text)
    if len(hailstones) < 3:
        return None

    a: list[list[float]] = []
    c: list[float] = []
    for u, w in ((0, 1), (0, 2), (1, 2)):
        for other in hailstones[1:3]:
            row, constant = _equation(hailstones[0], other, u, w)
            a.append(row)
            c.append(constant)

    solution = solve_system(a, c)
    if solution is None:
        return None
    total = round_n(solution[0] + solution[1] + solution[2], 0)
    return max(int(total), 0)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()