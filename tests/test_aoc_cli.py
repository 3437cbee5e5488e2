import subprocess

import pytest

from advent import aoc_cli
from advent.aoc_cli import (
    AocCommandError,
    BadExitStatus,
    CommandNotCallable,
    CommandNotFound,
    build_args,
    check,
    download,
    input_path,
    puzzle_path,
    read,
    submit,
)
from advent.day import Day


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake_run(cmd, **kwargs):
        recorded.append(list(cmd))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(aoc_cli.subprocess, "run", fake_run)
    monkeypatch.delenv("AOC_YEAR", raising=False)
    return recorded


def _failing_run(exc):
    def run(cmd, **kwargs):
        raise exc

    return run


def test_paths():
    assert input_path(Day(7)) == "data/inputs/07.txt"
    assert puzzle_path(Day(7)) == "data/puzzles/07.md"


def test_build_args_without_year(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)
    assert build_args("read", ["--x"], Day(3)) == ["--x", "--day", str(Day(3)), "read"]


def test_build_args_with_year(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "2025")
    assert build_args("read", [], Day(3)) == [
        "--year",
        "2025",
        "--day",
        str(Day(3)),
        "read",
    ]


@pytest.mark.parametrize("year", ["abc", "70000", "", "-1"])
def test_build_args_ignores_invalid_year(monkeypatch, year):
    monkeypatch.setenv("AOC_YEAR", year)
    assert "--year" not in build_args("read", [], Day(1))


def test_check_raises_when_missing(monkeypatch):
    monkeypatch.setattr(aoc_cli.subprocess, "run", _failing_run(FileNotFoundError()))
    with pytest.raises(CommandNotFound):
        check()


def test_check_calls_version(calls):
    result = check()
    assert result is None
    assert calls == [["aoc", "-V"]]


def test_submit_puts_part_and_result_last(calls):
    output = submit(Day(5), 1, "42")
    assert output.returncode == 0
    assert calls == [["aoc", "--day", str(Day(5)), "submit", "1", "42"]]


def test_read_passes_description_only(calls):
    output = read(Day(2))
    assert output.returncode == 0
    assert calls[0][:4] == ["aoc", "--description-only", "--puzzle-file", puzzle_path(Day(2))]
    assert calls[0][-1] == "read"


def test_download_reports_paths(calls, capsys):
    output = download(Day(4))
    assert output.returncode == 0
    out = capsys.readouterr().out
    assert f'Successfully wrote input to "{input_path(Day(4))}"' in out
    assert f'Successfully wrote puzzle to "{puzzle_path(Day(4))}"' in out
    assert "--overwrite" in calls[0]


def test_bad_exit_status(monkeypatch):
    monkeypatch.setattr(
        aoc_cli.subprocess,
        "run",
        lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1),
    )
    with pytest.raises(BadExitStatus) as info:
        submit(Day(1), 2, "7")
    assert info.value.output.returncode == 1
    assert str(info.value) == "aoc-cli exited with a non-zero status."


def test_not_callable(monkeypatch):
    monkeypatch.setattr(aoc_cli.subprocess, "run", _failing_run(PermissionError()))
    with pytest.raises(CommandNotCallable) as info:
        read(Day(1))
    assert isinstance(info.value, AocCommandError)
    assert str(info.value) == "aoc-cli could not be called."


def test_not_found_message():
    assert str(CommandNotFound()) == "aoc-cli is not present in environment."