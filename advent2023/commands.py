"""Handlers for the command-line subcommands."""

from __future__ import annotations

import subprocess
import sys

from advent2023.days import Day, all_days
from advent2023.readme_benchmarks import ReadmeError, update
from advent2023.run_multi import SOLUTION_MODULE_TEMPLATE, run_multi
from advent2023.timings import Timings


def handle_all(is_release: bool) -> None:
    """Run every day's solution."""
    run_multi(set(all_days()), is_release, False)


def build_solve_args(day: Day, release: bool) -> list[str]:
    """Command line that runs the solution module for ``day``."""
    args = [sys.executable]
    if release:
        args.append("-O")
    args += ["-m", SOLUTION_MODULE_TEMPLATE.format(day=day)]
    return args


def handle_solve(day: Day, release: bool) -> int:
    """Run the solution for ``day`` with inherited output; return its exit code."""
    return subprocess.run(build_solve_args(day, release), check=False).returncode


def select_days(day: Day | None, run_all: bool, stored: Timings) -> set[Day]:
    """Days to benchmark: the given day, all days, or those not fully benched yet."""
    if day is not None:
        return {day}
    if run_all:
        return set(all_days())
    return {candidate for candidate in all_days() if not stored.is_day_complete(candidate)}


def handle_time(day: Day | None, run_all: bool, store: bool) -> None:
    """Benchmark solutions and optionally store the results and update the README."""
    stored = Timings.read_from_file()
    days_to_run = select_days(day, run_all, stored)

    timings = run_multi(days_to_run, True, True)
    if timings is None:
        timings = Timings()

    if store:
        merged = stored.merge(timings)
        merged.store_file()

        print()
        try:
            update(merged)
        except ReadmeError:
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")