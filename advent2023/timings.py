"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from advent2023.days import Day, DayError

TIMINGS_FILE_PATH = Path("data") / "timings.json"


class TimingsError(ValueError):
    """Raised when timings cannot be read from JSON."""


def _optional_part(json_obj: dict[str, Any], key: str) -> str | None:
    if key not in json_obj:
        raise TimingsError(f"Expected timing.{key} to be null or string.")
    value = json_obj[key]
    return value if isinstance(value, str) else None


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: str | None
    part_2: str | None
    total_nanos: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": str(self.day),
            "part_1": self.part_1,
            "part_2": self.part_2,
            "total_nanos": self.total_nanos,
        }

    @classmethod
    def from_dict(cls, value: Any) -> Timing:
        if not isinstance(value, dict):
            raise TimingsError("Expected timing to be a JSON object.")

        day_text = value.get("day")
        try:
            if not isinstance(day_text, str):
                raise DayError()
            day = Day.parse(day_text)
        except DayError:
            raise TimingsError("Expected timing.day to be a Day struct.") from None

        part_1 = _optional_part(value, "part_1")
        part_2 = _optional_part(value, "part_2")

        total_nanos = value.get("total_nanos")
        if isinstance(total_nanos, bool) or not isinstance(total_nanos, (int, float)):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(day=day, part_1=part_1, part_2=part_2, total_nanos=float(total_nanos))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps({"data": [timing.to_dict() for timing in self.data]})

    @classmethod
    def from_json(cls, text: str) -> Timings:
        try:
            document = json.loads(text)
        except ValueError:
            raise TimingsError("not valid JSON file.") from None
        if not isinstance(document, dict):
            raise TimingsError("expected JSON document to be an object.")
        if "data" not in document:
            raise TimingsError("expected JSON document to have key `data`.")
        entries = document["data"]
        if not isinstance(entries, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls(data=[Timing.from_dict(entry) for entry in entries])

    def store_file(self, path: str | Path = TIMINGS_FILE_PATH) -> None:
        """Write the timings to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: str | Path = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from a JSON file; empty timings if missing or invalid."""
        try:
            return cls.from_json(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, TimingsError):
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Merge two sets of timings, preferring entries from ``new``."""
        data = list(new.data)
        seen = {timing.day for timing in data}
        data.extend(timing for timing in self.data if timing.day not in seen)
        data.sort(key=lambda timing: timing.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        return sum(timing.total_nanos for timing in self.data) / 1_000_000

    def is_day_complete(self, day: Day) -> bool:
        return any(
            timing.day == day and timing.part_1 is not None and timing.part_2 is not None
            for timing in self.data
        )