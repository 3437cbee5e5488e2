"""Day 3: choosing the largest joltage from each bank of batteries."""

from __future__ import annotations

import string
from collections.abc import Sequence
from typing import Optional

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(3)


def parse(input: str) -> list[list[int]]:
    """Parse each line into a list of its digits."""
    rows = []
    for line in input.split("\n"):
        if any(ch not in string.digits for ch in line):
            raise ValueError(f"invalid bank: {line!r}")
        rows.append([int(ch) for ch in line])
    return rows


def find_next_highest(row: Sequence[int], size: int) -> int:
    """The largest number formed by ``size`` digits of ``row`` kept in order."""
    if len(row) < size:
        raise ValueError(f"bank has fewer than {size} batteries")

    digits: list[int] = []
    last_index = 0
    for _ in range(size):
        start = last_index + 1 if digits else 0
        stop = len(row) - size + len(digits)
        best = 0
        for index in range(start, stop + 1):
            if row[index] > best:
                best = row[index]
                last_index = index
        digits.append(best)
    return int("".join(map(str, digits)))


def part_one(input: str) -> Optional[int]:
    return sum(find_next_highest(row, 2) for row in parse(input))


def part_two(input: str) -> Optional[int]:
    return sum(find_next_highest(row, 12) for row in parse(input))


def main(argv: Optional[Sequence[str]] = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)


if __name__ == "__main__":
    main()