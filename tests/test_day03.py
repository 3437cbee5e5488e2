import pytest

from advent.solutions.day03 import find_next_highest, parse, part_one, part_two

EXAMPLE = "\n".join(
    [
        "987654321111111",
        "811111111111119",
        "234234234234278",
        "818181911112111",
    ]
)


def test_part_one():
    assert part_one(EXAMPLE) == 357


def test_part_two():
    assert part_two(EXAMPLE) == 3121910778619


def test_parse():
    assert parse("12\n90") == [[1, 2], [9, 0]]


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse("12a")


@pytest.mark.parametrize(
    ("line", "two", "twelve"),
    [
        ("987654321111111", 98, 987654321111),
        ("811111111111119", 89, 811111111119),
        ("234234234234278", 78, 434234234278),
        ("818181911112111", 92, 888911112111),
    ],
)
def test_find_next_highest(line, two, twelve):
    row = parse(line)[0]
    assert find_next_highest(row, 2) == two
    assert find_next_highest(row, 12) == twelve


def test_find_next_highest_too_short():
    with pytest.raises(ValueError):
        find_next_highest([1], 2)