"""Longest hike through a forest map, with and without slippery slopes."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Mapping, Sequence

from advent2023.days import Day
from advent2023.runner import solution_main

DAY = Day(23)

Coord = tuple[int, int]
Graph = dict[Coord, dict[Coord, int]]

FOREST = "#"
PATH = "."


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)


SLOPES = {
    "^": Direction.NORTH,
    ">": Direction.EAST,
    "v": Direction.SOUTH,
    "<": Direction.WEST,
}


@dataclass(frozen=True)
class Grid:
    """A rectangular map of paths, forest and slopes."""

    rows: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> Grid:
        rows = tuple(line for line in text.splitlines() if line.strip())
        if not rows:
            raise ValueError("empty map")
        width = len(rows[0])
        allowed = set(SLOPES) | {FOREST, PATH}
        for row in rows:
            if len(row) != width:
                raise ValueError("map rows differ in length")
            unknown = set(row) - allowed
            if unknown:
                raise ValueError(f"unknown map tiles: {''.join(sorted(unknown))!r}")
        return cls(rows)

    @property
    def max_x(self) -> int:
        return len(self.rows[0])

    @property
    def max_y(self) -> int:
        return len(self.rows)

    @property
    def start(self) -> Coord:
        return (1, 0)

    @property
    def end(self) -> Coord:
        return (self.max_x - 2, self.max_y - 1)

    def tile(self, coord: Coord) -> str:
        x, y = coord
        return self.rows[y][x]

    def slope(self, coord: Coord) -> Direction | None:
        return SLOPES.get(self.tile(coord))

    def neighbors(self, coord: Coord) -> dict[Direction, Coord]:
        """Adjacent tiles inside the map that are not forest."""
        x, y = coord
        result: dict[Direction, Coord] = {}
        for direction in Direction:
            dx, dy = direction.value
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.max_x and 0 <= ny < self.max_y and self.rows[ny][nx] != FOREST:
                result[direction] = (nx, ny)
        return result

    def junctions(self) -> set[Coord]:
        """Walkable tiles with more than two walkable neighbours."""
        return {
            (x, y)
            for y, row in enumerate(self.rows)
            for x, tile in enumerate(row)
            if tile != FOREST and len(self.neighbors((x, y))) > 2
        }


StepFilter = Callable[[Direction, Coord], bool]


def _edges(origin: Coord, points: set[Coord], grid: Grid, allowed: StepFilter) -> dict[Coord, int]:
    edges: dict[Coord, int] = {}
    queue: deque[tuple[Coord, int]] = deque([(origin, 0)])
    seen = {origin}
    while queue:
        pos, cost = queue.popleft()
        if cost and pos in points:
            edges[pos] = cost
            continue
        for direction, neighbor in grid.neighbors(pos).items():
            if neighbor in seen or not allowed(direction, neighbor):
                continue
            seen.add(neighbor)
            queue.append((neighbor, cost + 1))
    return edges


def _build_graph(points: Iterable[Coord], grid: Grid, allowed: StepFilter) -> Graph:
    point_set = set(points)
    return {point: _edges(point, point_set, grid, allowed) for point in point_set}


def cost_map(points: Iterable[Coord], grid: Grid) -> Graph:
    """Distances between points that are joined by a corridor free of other points."""
    return _build_graph(points, grid, lambda _direction, _coord: True)


def _slope_cost_map(points: Iterable[Coord], grid: Grid) -> Graph:
    def downhill(direction: Direction, coord: Coord) -> bool:
        slope = grid.slope(coord)
        return slope is None or slope == direction

    return _build_graph(points, grid, downhill)


def longest_path(start: Coord, end: Coord, graph: Mapping[Coord, Mapping[Coord, int]]) -> int:
    """Length of the longest path from start to end visiting no node twice; 0 if none."""
    best = 0
    visited = {start}

    def walk(node: Coord, cost: int) -> None:
        nonlocal best
        if node == end:
            best = max(best, cost)
            return
        for nxt, add in graph.get(node, {}).items():
            if nxt in visited:
                continue
            visited.add(nxt)
            walk(nxt, cost + add)
            visited.remove(nxt)

    walk(start, 0)
    return best


def _points(grid: Grid) -> set[Coord]:
    return grid.junctions() | {grid.start, grid.end}


def part_one(text: str) -> int | None:
    grid = Grid.parse(text)
    return longest_path(grid.start, grid.end, _slope_cost_map(_points(grid), grid))


def part_two(text: str) -> int | None:
    grid = Grid.parse(text)
    return longest_path(grid.start, grid.end, cost_map(_points(grid), grid))


def main(argv: Sequence[str] | None = None) -> None:
    sys.setrecursionlimit(max(sys.getrecursionlimit(), 10_000))
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()