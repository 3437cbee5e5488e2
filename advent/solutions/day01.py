"""Day 1: counting how often a dial lands on or passes zero."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(1)

_START = 50
_DIAL_SIZE = 100


def _rotations(input: str) -> Iterator[int]:
    """Yield each rotation as a signed step: left is negative, right positive."""
    for item in input.split("\n"):
        direction, amount = item[:1], item[1:]
        if direction == "L":
            yield -int(amount)
        elif direction == "R":
            yield int(amount)
        else:
            raise ValueError(f"invalid rotation: {item!r}")


def part_one(input: str) -> Optional[int]:
    """Count the rotations after which the dial points at zero."""
    current = _START
    zero_counter = 0
    for step in _rotations(input):
        current = (current + step) % _DIAL_SIZE
        if current == 0:
            zero_counter += 1
    return zero_counter


def calc_zero_passes(prev: int, next: int) -> int:
    """Number of multiples of the dial size touched moving from ``prev`` to ``next``."""
    if next == prev:
        return 0
    if next > prev:
        return next // _DIAL_SIZE - prev // _DIAL_SIZE
    return (prev - 1) // _DIAL_SIZE - (next - 1) // _DIAL_SIZE


def part_two(input: str) -> Optional[int]:
    """Count every time the dial points at zero, including during rotations."""
    prev = _START
    zero_counter = 0
    for step in _rotations(input):
        nxt = prev + step
        zero_counter += calc_zero_passes(prev, nxt)
        prev = nxt
    return zero_counter


def main(argv: Optional[Sequence[str]] = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)


if __name__ == "__main__":
    main()