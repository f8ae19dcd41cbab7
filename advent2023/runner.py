"""Running and timing solution parts."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Any, Callable, Optional, Sequence

from advent2023.days import Day
from advent2023.inputs import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET, read_file

NANOS_PER_SECOND = 1_000_000_000
MIN_ITERATIONS = 10
MAX_ITERATIONS = 10_000

Solver = Callable[[str], Optional[Any]]


def run_timed(
    func: Solver,
    text: str,
    hook: Callable[[Any], None],
    timed: bool = False,
) -> tuple[Any, int, int]:
    """Run ``func`` once, call ``hook`` with its result and optionally benchmark it.

    Returns the result, the duration in nanoseconds and the number of samples.
    """
    start = time.perf_counter_ns()
    result = func(text)
    base_time = time.perf_counter_ns() - start

    hook(result)

    if timed:
        duration, samples = bench(func, text, base_time)
    else:
        duration, samples = base_time, 1
    return result, duration, samples


def bench(func: Solver, text: str, base_time: int) -> tuple[int, int]:
    """Run ``func`` repeatedly for about a second; return average nanos and samples."""
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)

    iterations = NANOS_PER_SECOND // max(base_time, 10)
    iterations = min(max(iterations, MIN_ITERATIONS), MAX_ITERATIONS)

    timers = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(text)
        timers.append(time.perf_counter_ns() - start)

    return average_duration(timers), iterations


def average_duration(numbers: Sequence[int]) -> int:
    """Integer mean of a sequence of nanosecond durations."""
    return sum(numbers) // len(numbers)


def _format_nanos(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        value, unit = nanos / 1_000_000_000, "s"
    elif nanos >= 1_000_000:
        value, unit = nanos / 1_000_000, "ms"
    elif nanos >= 1_000:
        value, unit = nanos / 1_000, "µs"
    else:
        value, unit = float(nanos), "ns"
    return f"{value:.1f}{unit}"


def format_duration(duration: int, samples: int) -> str:
    """Format a duration in nanoseconds with its sample count."""
    if samples == 1:
        return f" ({_format_nanos(duration)})"
    return f" ({_format_nanos(duration)} @ {samples} samples)"


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print a part's result; an empty ``duration_str`` marks an intermediate line."""
    intermediate = duration_str == ""

    if result is None:
        if intermediate:
            print(f"{part}: ✖", end="", flush=True)
        else:
            print("\r", end="")
            print(f"{part}: ✖             ")
        return

    if "\n" in str(result):
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)
            print(result)
    else:
        line = f"{part}: {ANSI_BOLD}{result}{ANSI_RESET}{duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)


def run_part(func: Solver, text: str, day: Day, part: int, timed: bool = False) -> Any:
    """Run one part of the solution for ``day`` and print its result and timing."""
    part_str = f"Part {part}"
    result, duration, samples = run_timed(
        func, text, lambda value: print_result(value, part_str, ""), timed
    )
    print_result(result, part_str, format_duration(duration, samples))
    return result


def solution_main(
    day: Day,
    part_one: Solver | None,
    part_two: Solver | None,
    argv: Sequence[str] | None = None,
) -> None:
    """Entry point of a solution module: read the day's input and run both parts."""
    parser = argparse.ArgumentParser(prog=f"day{day}")
    parser.add_argument("--time", action="store_true", help="benchmark each part")
    args, _ = parser.parse_known_args(sys.argv[1:] if argv is None else list(argv))

    text = read_file("inputs", day)
    for number, func in ((1, part_one), (2, part_two)):
        if func is not None:
            run_part(func, text, day, number, args.time)