"""Keep a benchmark table in the README up to date."""

from __future__ import annotations

import re
from pathlib import Path

from advent2023.days import Day
from advent2023.timings import Timings

MARKER = "<!--- benchmarking table --->"
README_PATH = Path("README.md")


class ReadmeError(ValueError):
    """Raised when the README cannot be read, parsed or written."""


def get_path_for_bin(day: Day) -> str:
    """Relative path of the solution module for ``day``."""
    return f"./advent2023/day{day}.py"


def locate_table(readme: str) -> tuple[int, int]:
    """Return the start and end offsets of the benchmark table, markers included."""
    matches = [match.span() for match in re.finditer(re.escape(MARKER), readme)]
    if len(matches) > 2:
        raise ReadmeError("too many occurrences of marker in README.")
    if not matches:
        raise ReadmeError("Could not find table start position.")
    return matches[0][0], matches[-1][1]


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """Render the benchmark table as Markdown, wrapped in markers."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        path = get_path_for_bin(timing.day)
        part_1 = timing.part_1 if timing.part_1 is not None else "-"
        part_2 = timing.part_2 if timing.part_2 is not None else "-"
        lines.append(f"| [Day {int(timing.day)}]({path}) | `{part_1}` | `{part_2}` |")
    lines.append("")
    lines.append(f"**Total: {total_millis:.2f}ms**")
    lines.append(MARKER)
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with its benchmark table replaced by a fresh one."""
    start, end = locate_table(text)
    table = construct_table("##", timings, total_millis)
    return text[:start] + table + text[end:]


def update(timings: Timings, path: str | Path = README_PATH) -> None:
    """Rewrite the benchmark table in the README file at ``path``."""
    readme_path = Path(path)
    try:
        readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as error:
        raise ReadmeError(str(error)) from error
    updated = update_content(readme, timings, timings.total_millis())
    try:
        readme_path.write_text(updated, encoding="utf-8")
    except OSError as error:
        raise ReadmeError(str(error)) from error