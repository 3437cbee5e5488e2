"""Wrapper around the ``aoc`` command-line client."""

from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Sequence
from typing import Optional

from advent.day import Day

_YEAR = re.compile(r"\+?[0-9]+")


class AocCommandError(Exception):
    """Base class for failures calling the ``aoc`` client."""


class CommandNotFound(AocCommandError):
    def __init__(self) -> None:
        super().__init__("aoc-cli is not present in environment.")


class CommandNotCallable(AocCommandError):
    def __init__(self) -> None:
        super().__init__("aoc-cli could not be called.")


class BadExitStatus(AocCommandError):
    def __init__(self, output: subprocess.CompletedProcess) -> None:
        super().__init__("aoc-cli exited with a non-zero status.")
        self.output = output


def check() -> None:
    """Raise :class:`CommandNotFound` unless the ``aoc`` client can be started."""
    try:
        subprocess.run(["aoc", "-V"], capture_output=True)
    except OSError:
        raise CommandNotFound() from None


def input_path(day: Day) -> str:
    return f"data/inputs/{day}.txt"


def puzzle_path(day: Day) -> str:
    return f"data/puzzles/{day}.md"


def _year() -> Optional[int]:
    text = os.environ.get("AOC_YEAR")
    if text is None or not _YEAR.fullmatch(text):
        return None
    year = int(text)
    return year if year <= 0xFFFF else None


def build_args(command: str, args: Sequence[str], day: Day) -> list[str]:
    """Arguments for ``aoc``: extra args, optional year, then day and command."""
    cmd_args = list(args)
    year = _year()
    if year is not None:
        cmd_args += ["--year", str(year)]
    cmd_args += ["--day", str(day), command]
    return cmd_args


def _call(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        completed = subprocess.run(["aoc", *args])
    except OSError:
        raise CommandNotCallable() from None
    if completed.returncode != 0:
        raise BadExitStatus(completed)
    return completed


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description for ``day``."""
    args = build_args(
        "read", ["--description-only", "--puzzle-file", puzzle_path(day)], day
    )
    return _call(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download the input and puzzle description for ``day``."""
    inputs = input_path(day)
    puzzle = puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", inputs, "--puzzle-file", puzzle],
        day,
    )
    output = _call(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{inputs}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle}".')
    return output


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    # The client expects part and answer after the subcommand.
    args = build_args("submit", [], day) + [str(part), result]
    return _call(args)