"""Running several solution modules and collecting their timings."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Iterable, Sequence

from advent2023.days import Day, all_days
from advent2023.inputs import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from advent2023.timings import Timing, Timings

PACKAGE_DIR = Path(__file__).resolve().parent
SOLUTION_MODULE_TEMPLATE = "advent2023.day{day}"


def solution_module_exists(day: Day) -> bool:
    """Whether a solution module has been written for ``day``."""
    return (PACKAGE_DIR / f"day{day}.py").is_file()


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run the solution for ``day`` in a child process, echoing and returning its stdout lines."""
    if not solution_module_exists(day):
        return []

    command = [sys.executable]
    if is_release:
        command.append("-O")
    command += ["-m", SOLUTION_MODULE_TEMPLATE.format(day=day)]
    if is_timed:
        command.append("--time")

    output = []
    with subprocess.Popen(
        command, stdout=subprocess.PIPE, text=True, encoding="utf-8"
    ) as process:
        assert process.stdout is not None
        for raw_line in process.stdout:
            line = raw_line.rstrip("\n")
            print(line)
            output.append(line)
    return output


def _parse_float(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the timing text and its value in nanoseconds from a result line."""
    timing = line.split(" samples)")[0].split("(")[-1].split("@")[0].strip()

    if "ns" in timing:
        nanos = _parse_float(timing.split("ns")[0])
    elif "µs" in timing:
        value = _parse_float(timing.split("µs")[0])
        nanos = None if value is None else value * 1_000
    elif "ms" in timing:
        value = _parse_float(timing.split("ms")[0])
        nanos = None if value is None else value * 1_000_000
    else:
        value = _parse_float(timing.split("s")[0])
        nanos = None if value is None else value * 1_000_000_000

    if nanos is None:
        return None
    return timing, nanos


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Collect the benchmark timings printed by a solution run."""
    timing = Timing(day=day, part_1=None, part_2=None, total_nanos=0.0)

    for line in output:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        timing_str, nanos = parsed
        part = line.split(":")[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos

    return timing


def run_multi(days_to_run: Iterable[Day], is_release: bool, is_timed: bool) -> Timings | None:
    """Run the given days in order; return their timings when timed."""
    wanted = set(days_to_run)
    timings: list[Timing] = []
    need_space = False

    for day in all_days():
        if day not in wanted:
            continue
        if need_space:
            print()
        need_space = True

        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            timings.append(parse_exec_time(output, day))

    if not is_timed:
        return None

    result = Timings(data=timings)
    total_millis = result.total_millis()
    print(f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} {ANSI_ITALIC}{total_millis:.2f}ms{ANSI_RESET}")
    return result