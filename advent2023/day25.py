"""Cutting a component graph into two halves by removing three wires."""

from __future__ import annotations

from collections import deque
from itertools import combinations
from typing import Mapping, Sequence

from advent2023.days import Day
from advent2023.runner import solution_main

DAY = Day(25)

ROUTES_TO_DELETE = 3

Graph = dict[str, set[str]]


def parse_graph(text: str) -> Graph:
    """Parse ``name: other other ...`` lines into an undirected adjacency map."""
    graph: Graph = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        name, sep, rest = line.partition(": ")
        if not sep:
            raise ValueError(f"expected 'name: connections': {line!r}")
        for other in rest.split():
            graph.setdefault(name, set()).add(other)
            graph.setdefault(other, set()).add(name)
    return graph


def delete_route(graph: Graph, start: str, end: str) -> None:
    """Remove every edge on a shortest path from start to end.

    Raises ValueError if end cannot be reached.
    """
    queue = deque([start])
    seen = {start}
    previous: dict[str, str] = {}
    found = start == end

    while queue and not found:
        node = queue.popleft()
        for neighbor in graph[node]:
            if neighbor in seen:
                continue
            seen.add(neighbor)
            queue.append(neighbor)
            previous[neighbor] = node
            if neighbor == end:
                found = True
                break

    if not found:
        raise ValueError(f"no route from {start!r} to {end!r}")

    current = end
    while current != start:
        prev = previous[current]
        graph.setdefault(current, set()).discard(prev)
        graph.setdefault(prev, set()).discard(current)
        current = prev


def reachable_nodes(graph: Mapping[str, set[str]], start: str, end: str) -> int | None:
    """How many nodes are reachable from start, or None if end is among them."""
    queue = deque([start])
    seen = {start}
    while queue:
        node = queue.popleft()
        for neighbor in graph[node]:
            if neighbor == end:
                return None
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return len(seen)


def part_one(text: str) -> int | None:
    graph = parse_graph(text)
    for start, end in combinations(graph, 2):
        trial = {node: set(edges) for node, edges in graph.items()}
        try:
            for _ in range(ROUTES_TO_DELETE):
                delete_route(trial, start, end)
        except ValueError:
            continue
        half = reachable_nodes(trial, start, end)
        if half is None:
            continue
        return half * (len(trial) - half)
    raise ValueError("graph cannot be cut in two by removing three wires")


def part_two(text: str) -> int | None:
    return None


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()