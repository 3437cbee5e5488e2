import pytest

from advent.solutions.day05 import part_one, part_two

EXAMPLE = "\n".join(
    ["3-5", "10-14", "16-20", "12-18", "", "1", "5", "8", "11", "17", "32"]
)


def test_part_one():
    assert part_one(EXAMPLE) == 3


def test_part_two():
    assert part_two(EXAMPLE) == 14


def test_trailing_newline_is_ignored():
    assert part_one(EXAMPLE + "\n") == 3
    assert part_two(EXAMPLE + "\n") == 14


def test_part_two_disjoint_ranges():
    assert part_two("1-2\n5-5") == 3


def test_part_two_nested_range():
    assert part_two("1-10\n2-3\n\n4") == 10


def test_invalid_range_raises():
    with pytest.raises(ValueError):
        part_one("35\n\n1")