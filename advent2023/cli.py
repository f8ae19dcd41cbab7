"""Command-line entry point for running and timing solutions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence, Union

from advent2023.commands import handle_all, handle_solve, handle_time
from advent2023.days import Day, DayError


class CliError(ValueError):
    """Raised when the command line cannot be parsed."""


class CommandError(CliError):
    """Raised when the subcommand is missing or unknown."""


@dataclass(frozen=True)
class AllArgs:
    release: bool = False


@dataclass(frozen=True)
class TimeArgs:
    day: Day | None = None
    all: bool = False
    store: bool = False


@dataclass(frozen=True)
class SolveArgs:
    day: Day
    release: bool = False


AppArguments = Union[AllArgs, TimeArgs, SolveArgs]


def _take_flag(args: list[str], flag: str) -> bool:
    if flag in args:
        args.remove(flag)
        return True
    return False


def _take_free(args: list[str]) -> str | None:
    for item in args:
        if not item.startswith("-"):
            args.remove(item)
            return item
    return None


def _parse_day(text: str) -> Day:
    try:
        return Day.parse(text)
    except DayError as error:
        raise CliError(str(error)) from None


def parse_args(argv: Sequence[str] | None = None) -> AppArguments:
    """Parse the subcommand and its options; warn about leftover arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0].startswith("-"):
        raise CommandError("No command specified.")

    command = args.pop(0)
    result: AppArguments
    if command == "all":
        result = AllArgs(release=_take_flag(args, "--release"))
    elif command == "time":
        run_all = _take_flag(args, "--all")
        store = _take_flag(args, "--store")
        free = _take_free(args)
        day = _parse_day(free) if free is not None else None
        result = TimeArgs(day=day, all=run_all, store=store)
    elif command == "solve":
        release = _take_flag(args, "--release")
        free = _take_free(args)
        if free is None:
            raise CliError("missing day argument")
        result = SolveArgs(day=_parse_day(free), release=release)
    else:
        raise CommandError(f"Unknown command: {command}")

    if args:
        print(f"Warning: unknown argument(s): {args}.", file=sys.stderr)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the requested subcommand; return the process exit code."""
    try:
        args = parse_args(argv)
    except CommandError as error:
        print(error, file=sys.stderr)
        return 1
    except CliError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    if isinstance(args, AllArgs):
        handle_all(args.release)
    elif isinstance(args, TimeArgs):
        handle_time(args.day, args.all, args.store)
    else:
        handle_solve(args.day, args.release)
    return 0


if __name__ == "__main__":
    sys.exit(main())