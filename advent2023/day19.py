"""Sorting machine parts through workflows and counting accepted rating combinations."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from advent2023.days import Day
from advent2023.runner import solution_main
from advent2023.workflows import ACCEPT, CATEGORIES, REJECT, START_WORKFLOW, System

DAY = Day(19)

# Ratings run from 1 to 4000; ranges are half-open.
RATING_RANGE = (1, 4001)

Ranges = dict[str, tuple[int, int]]


def range_product(ranges: Iterable[tuple[int, int]]) -> int:
    """Number of rating combinations in half-open ranges; 0 if any range is inverted."""
    sizes = [high - low for low, high in ranges]
    if any(size < 0 for size in sizes):
        return 0
    return math.prod(sizes)


def _split(ranges: Ranges, category: str, op: str, value: int) -> tuple[Ranges, Ranges]:
    low, high = ranges[category]
    matched = dict(ranges)
    rest = dict(ranges)
    if op == "<":
        matched[category] = (low, min(high, value))
        rest[category] = (max(low, value), high)
    else:
        matched[category] = (max(low, value + 1), high)
        rest[category] = (low, min(high, value + 1))
    return matched, rest


def _is_empty(ranges: Ranges) -> bool:
    return any(high <= low for low, high in ranges.values())


def count_accepted_combinations(system: System) -> int:
    """How many distinct rating combinations the workflows accept."""
    total = 0
    pending: list[tuple[str, Ranges]] = [
        (START_WORKFLOW, dict.fromkeys(CATEGORIES, RATING_RANGE))
    ]

    while pending:
        name, ranges = pending.pop()
        if name == REJECT or _is_empty(ranges):
            continue
        if name == ACCEPT:
            total += range_product(ranges.values())
            continue
        try:
            rules = system.workflows[name]
        except KeyError:
            raise ValueError(f"unknown workflow: {name!r}") from None

        for rule in rules:
            if rule.op is None or rule.category is None:
                pending.append((rule.target, ranges))
                break
            matched, ranges = _split(ranges, rule.category, rule.op, rule.value)
            pending.append((rule.target, matched))
            if _is_empty(ranges):
                break

    return total


def part_one(text: str) -> int | None:
    return System.parse(text).process()


def part_two(text: str) -> int | None:
    return count_accepted_combinations(System.parse(text))


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()