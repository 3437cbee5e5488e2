import subprocess
import sys
from unittest import mock

import pytest

from advent.cli import main, parse_args
from advent.day import Day, all_days


def _ok(*args, **kwargs):
    return subprocess.CompletedProcess(args=[], returncode=0)


def test_parse_solve():
    args = parse_args(["solve", "3", "--release", "--submit", "1"])
    assert args.command == "solve"
    assert args.day == Day(3)
    assert args.release is True
    assert args.dhat is False
    assert args.submit == 1


def test_parse_time_defaults():
    args = parse_args(["time"])
    assert args.day is None
    assert args.all is False
    assert args.store is False


def test_parse_time_flags():
    args = parse_args(["time", "--all", "--store", "12"])
    assert args.all is True
    assert args.store is True
    assert args.day == Day(12)


def test_parse_scaffold_flags():
    args = parse_args(["scaffold", "5", "--download"])
    assert args.day == Day(5)
    assert args.download is True
    assert args.overwrite is False


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args([])
    assert excinfo.value.code == 1
    assert "No command specified." in capsys.readouterr().err


def test_unknown_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["bogus"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("day", ["0", "26", "x"])
def test_invalid_day_exits(day):
    with pytest.raises(SystemExit):
        parse_args(["download", day])


def test_invalid_submit_part_exits():
    with pytest.raises(SystemExit):
        parse_args(["solve", "1", "--submit", "300"])


def test_unknown_arguments_warn(capsys):
    args = parse_args(["all", "--foo"])
    assert args.release is False
    assert "Warning: unknown argument(s)" in capsys.readouterr().err


def test_main_all(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["all"])
    assert capsys.readouterr().out.count("Not solved.") == len(list(all_days()))


def test_main_scaffold_then_download(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AOC_YEAR", raising=False)
    (tmp_path / "advent" / "solutions").mkdir(parents=True)
    (tmp_path / "data" / "inputs").mkdir(parents=True)
    (tmp_path / "data" / "examples").mkdir(parents=True)

    with mock.patch("subprocess.run", side_effect=_ok) as run:
        main(["scaffold", "9", "--download"])

    out = capsys.readouterr().out
    assert "Created module file" in out
    assert 'Successfully wrote input to "data/inputs/09.txt"' in out
    assert (tmp_path / "advent" / "solutions" / "day09.py").exists()
    assert (tmp_path / "data" / "inputs" / "09.txt").exists()
    cmd = run.call_args.args[0]
    assert cmd[-1] == "download"
    assert "09" in cmd


def test_main_solve():
    with mock.patch("subprocess.run", side_effect=_ok) as run:
        result = main(["solve", "4", "--release"])
    assert result in (None, 0)
    cmd = run.call_args.args[0]
    assert cmd[0] == sys.executable
    assert "-O" in cmd
    assert "advent.solutions.day04" in cmd