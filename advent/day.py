"""The day of advent: an integer from 1 to 25."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Optional

_SERVER_TZ = timezone(timedelta(hours=-5))
_DIGITS = re.compile(r"\+?[0-9]+")


class DayError(ValueError):
    """Raised for a value that is not a valid day of advent."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@total_ordering
@dataclass(frozen=True, eq=False)
class Day:
    """A valid day number of advent; displays as two digits."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DayError()
        if not 1 <= self.value <= 25:
            raise DayError()

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day from its decimal text, e.g. ``"8"`` or ``"08"``."""
        if not _DIGITS.fullmatch(text):
            raise DayError()
        return cls(int(text))

    @classmethod
    def today(cls) -> Optional[Day]:
        """The current day if it is the 1st to the 25th of December, else ``None``."""
        now = datetime.now(_SERVER_TZ)
        if now.month == 12 and now.day <= 25:
            return cls(now.day)
        return None

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:02}"

    @staticmethod
    def _other_value(other: object) -> Optional[int]:
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

    def __hash__(self) -> int:
        return hash(self.value)


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for value in range(1, 26):
        yield Day(value)