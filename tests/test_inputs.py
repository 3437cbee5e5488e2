import pytest

from advent.day import Day
from advent.inputs import read_file, read_file_part


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    examples = tmp_path / "data" / "examples"
    examples.mkdir(parents=True)
    return examples


def test_read_file_returns_contents(data_dir):
    (data_dir / f"{Day(1)}.txt").write_text("L68\nL30", encoding="utf-8")
    assert read_file("examples", Day(1)) == "L68\nL30"


def test_read_file_uses_padded_day_name(data_dir):
    (data_dir / "09.txt").write_text("nine", encoding="utf-8")
    assert read_file("examples", Day(9)) == "nine"


def test_read_file_missing_raises(data_dir):
    with pytest.raises(FileNotFoundError):
        read_file("examples", Day(2))


def test_read_file_part_uses_part_suffix(data_dir):
    (data_dir / f"{Day(3)}-2.txt").write_text("second", encoding="utf-8")
    (data_dir / f"{Day(3)}.txt").write_text("plain", encoding="utf-8")
    assert read_file_part("examples", Day(3), 2) == "second"
    assert read_file("examples", Day(3)) == "plain"


def test_read_file_part_missing_raises(data_dir):
    with pytest.raises(FileNotFoundError):
        read_file_part("examples", Day(4), 1)