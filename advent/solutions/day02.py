"""Day 2: summing product IDs made of a repeated digit sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(2)


def parse(input: str) -> list[tuple[int, int]]:
    """Parse comma-separated ``min-max`` ranges."""
    ranges = []
    for item in input.split(","):
        low, sep, high = item.partition("-")
        if not sep:
            raise ValueError(f"invalid range: {item!r}")
        ranges.append((int(low), int(high)))
    return ranges


def _ids(input: str):
    for low, high in parse(input):
        yield from range(low, high + 1)


def _is_doubled(text: str) -> bool:
    half, rest = divmod(len(text), 2)
    return rest == 0 and text[:half] == text[half:]


def _is_repeated(text: str) -> bool:
    return any(
        len({text[i : i + size] for i in range(0, len(text), size)}) == 1
        for size in range(1, len(text) // 2 + 1)
    )


def part_one(input: str) -> Optional[int]:
    """Sum the IDs that are some digit sequence written twice."""
    return sum(n for n in _ids(input) if _is_doubled(str(n)))


def part_two(input: str) -> Optional[int]:
    """Sum the IDs that are some digit sequence written at least twice."""
    return sum(n for n in _ids(input) if _is_repeated(str(n)))


def main(argv: Optional[Sequence[str]] = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)


if __name__ == "__main__":
    main()