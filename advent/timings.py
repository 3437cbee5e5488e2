"""Benchmark times per day, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from advent.day import Day, DayError

TIMINGS_FILE_PATH = Path("data/timings.json")

PathLike = Union[str, Path]


class TimingsError(ValueError):
    """Raised when timings cannot be read from JSON."""


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: Optional[str] = None
    part_2: Optional[str] = None
    total_nanos: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": str(self.day),
            "total_nanos": self.total_nanos,
            "part_1": self.part_1,
            "part_2": self.part_2,
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

        parts = []
        for key in ("part_1", "part_2"):
            if key not in value:
                raise TimingsError(f"Expected timing.{key} to be null or string.")
            part = value[key]
            parts.append(part if isinstance(part, str) else None)

        total = value.get("total_nanos")
        if isinstance(total, bool) or not isinstance(total, (int, float)):
            raise TimingsError("Expected timing.total_nanos to be a number.")

        return cls(day=day, part_1=parts[0], part_2=parts[1], total_nanos=float(total))


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps({"data": [t.to_dict() for t in self.data]}, indent=2)

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
        data = document["data"]
        if not isinstance(data, list):
            raise TimingsError("expected `json.data` to be an array.")
        return cls(data=[Timing.from_dict(item) for item in data])

    def store_file(self, path: PathLike = TIMINGS_FILE_PATH) -> None:
        """Write the timings as JSON to ``path``."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: PathLike = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from ``path``; empty timings if absent or unreadable."""
        try:
            return cls.from_json(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, TimingsError):
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Combine with ``new``, preferring its entry for any shared day."""
        data = list(new.data)
        seen = {t.day for t in data}
        data.extend(t for t in self.data if t.day not in seen)
        data.sort(key=lambda t: t.day)
        return Timings(data=data)

    def total_millis(self) -> float:
        return sum(t.total_nanos for t in self.data) / 1_000_000

    def is_day_complete(self, day: Day) -> bool:
        return any(
            t.day == day and t.part_1 is not None and t.part_2 is not None
            for t in self.data
        )