"""Day 6: solving a worksheet of column-wise arithmetic problems."""

from __future__ import annotations

import math
import operator
import string
from collections.abc import Sequence
from functools import reduce
from typing import Optional

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(6)

_OPERATORS = {"*": operator.mul, "+": operator.add}


def _lines(text: str) -> list[str]:
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        return []
    return [line.removesuffix("\r") for line in text.split("\n")]


def parse(input: str) -> tuple[list[list[str]], int, int]:
    """Split rows into fields, bottom row first; return them with row and column counts."""
    lines = [row.split() for row in input.split("\n")]
    lines.reverse()
    row_size = len(input.split("\n")[0].split())
    return lines, row_size, len(lines)


def part_one(input: str) -> Optional[int]:
    """Sum the problems read as whitespace-separated numbers in each column."""
    data, row_size, _ = parse(input)
    ops_row, *value_rows = data
    total = 0
    for x in range(row_size):
        try:
            op = _OPERATORS[ops_row[x]]
        except KeyError:
            raise ValueError(f"invalid operator: {ops_row[x]!r}") from None
        values = [int(row[x]) for row in value_rows]
        if values:
            total += reduce(op, values)
    return total


def part_two(input: str) -> Optional[int]:
    """Sum the problems read right to left, one number per character column."""
    *digit_rows, op_row = _lines(input)
    total = 0
    stack: list[int] = []
    for x in reversed(range(len(digit_rows[0]) if digit_rows else len(op_row))):
        digits = "".join(row[x] for row in digit_rows if row[x] in string.digits)
        if digits:
            stack.append(int(digits))

        symbol = op_row[x]
        if symbol == "*":
            total += math.prod(stack)
            stack.clear()
        elif symbol == "+":
            total += sum(stack)
            stack.clear()
    return total


def main(argv: Optional[Sequence[str]] = None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)


if __name__ == "__main__":
    main()