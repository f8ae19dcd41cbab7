"""Day numbers of the advent calendar."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterator

FIRST_DAY = 1
LAST_DAY = 25

# The puzzle server runs on UTC-5.
SERVER_TIMEZONE = timezone(timedelta(hours=-5))

_DAY_PATTERN = re.compile(r"\+?[0-9]+")


class DayError(ValueError):
    """Raised when a value is not a valid day of advent."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Day:
    """A day of advent, 1 to 25. Displays as a two digit number."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DayError()
        if not FIRST_DAY <= self.value <= LAST_DAY:
            raise DayError()

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day number such as ``"8"`` or ``"08"``."""
        if not _DAY_PATTERN.fullmatch(text):
            raise DayError()
        return cls(int(text))

    @classmethod
    def today(cls) -> Day | None:
        """The current day if it is between the 1st and 25th of December."""
        return _advent_day(datetime.now(SERVER_TIMEZONE))

    def __str__(self) -> str:
        return f"{self.value:02}"

    def __int__(self) -> int:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    @staticmethod
    def _other_value(other: object) -> int | None:
        if isinstance(other, Day):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self.value == value

    def __lt__(self, other: object) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self.value < value


def _advent_day(moment: datetime) -> Day | None:
    moment = moment.astimezone(SERVER_TIMEZONE)
    if moment.month == 12 and moment.day <= LAST_DAY:
        return Day(moment.day)
    return None


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(FIRST_DAY, LAST_DAY + 1):
        yield Day(number)