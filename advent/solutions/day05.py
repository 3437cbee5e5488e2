"""Day 5: checking ingredient IDs against fresh ranges."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(5)


def _lines(text: str) -> Iterator[str]:
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        return
    for line in text.split("\n"):
        yield line.removesuffix("\r")


def _parse_range(line: str) -> tuple[int, int]:
    low, sep, high = line.partition("-")
    if not sep:
        raise ValueError(f"invalid range: {line!r}")
    return int(low), int(high)


def part_one(input: str) -> Optional[int]:
    """Count the available IDs that fall within any fresh range."""
    ranges: list[tuple[int, int]] = []
    ranges_ended = False
    result = 0
    for line in _lines(input):
        if line == "":
            ranges_ended = True
        elif not ranges_ended:
            ranges.append(_parse_range(line))
        else:
            num = int(line)
            if any(low <= num <= high for low, high in ranges):
                result += 1
    return result


def part_two(input: str) -> Optional[int]:
    """Count the distinct IDs covered by the fresh ranges."""
    ranges = []
    for line in _lines(input):
        if line == "":
            break
        ranges.append(_parse_range(line))
    ranges.sort()

    result = 0
    current: Optional[tuple[int, int]] = None
    for low, high in ranges:
        if current is not None and low <= current[1]:
            current = (current[0], max(current[1], high))
            continue
        if current is not None:
            result += current[1] - current[0] + 1
        current = (low, high)
    if current is not None:
        result += current[1] - current[0] + 1
    return result


def main(argv: Optional[Sequence[str]] = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)


if __name__ == "__main__":
    main()