"""Handlers for the command-line subcommands."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import NoReturn, Optional

from advent import aoc_cli, readme_benchmarks
from advent.day import Day, all_days
from advent.run_multi import run_multi
from advent.timings import Timings

_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)

_MODULE_TEMPLATE = '''"""Solution for day %DAY_NUMBER%."""

from __future__ import annotations

from typing import Optional

from advent.day import Day
from advent.inputs import read_file
from advent.runner import run_part

DAY = Day(%DAY_NUMBER%)


def part_one(input: str) -> Optional[int]:
    return None


def part_two(input: str) -> Optional[int]:
    return None


def main(argv=None) -> None:
    text = read_file("inputs", DAY)
    run_part(part_one, text, DAY, 1, argv)
    run_part(part_two, text, DAY, 2, argv)


if __name__ == "__main__":
    main()
'''


def _fail(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    sys.exit(1)


def _require_aoc() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        _fail(_AOC_MISSING)


def handle_all(is_release: bool) -> None:
    """Run every day's solution."""
    run_multi(set(all_days()), is_release, False)


def handle_download(day: Day) -> None:
    """Download the input and puzzle for ``day``; exits on failure."""
    _require_aoc()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as exc:
        _fail(f"failed to call aoc-cli: {exc}")


def handle_read(day: Day) -> None:
    """Show the puzzle description for ``day``; exits on failure."""
    _require_aoc()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as exc:
        _fail(f"failed to call aoc-cli: {exc}")


def _create_empty(path: str, label: str) -> None:
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError as exc:
        _fail(f"Failed to create {label} file: {exc}")
    print(f'Created empty {label} file "{path}"')


def handle_scaffold(day: Day, overwrite: bool) -> None:
    """Create the solution module and empty input and example files for ``day``."""
    input_path = f"data/inputs/{day}.txt"
    example_path = f"data/examples/{day}.txt"
    module_path = f"advent/solutions/day{day}.py"

    try:
        handle = open(module_path, "w" if overwrite else "x", encoding="utf-8")
    except OSError as exc:
        _fail(f"Failed to create module file: {exc}")

    with handle:
        try:
            handle.write(_MODULE_TEMPLATE.replace("%DAY_NUMBER%", str(int(day))))
        except OSError as exc:
            _fail(f"Failed to write module contents: {exc}")
    print(f'Created module file "{module_path}"')

    _create_empty(input_path, "input")
    _create_empty(example_path, "example")

    print("---")
    print(f"🎄 Type `advent solve {day}` to run your solution.")


def handle_solve(
    day: Day, release: bool, dhat: bool, submit_part: Optional[int]
) -> None:
    """Run the solution for ``day`` in a child process and wait for it."""
    cmd = [sys.executable]
    if dhat:
        cmd += ["-X", "tracemalloc"]
    elif release:
        cmd.append("-O")
    cmd += ["-m", f"advent.solutions.day{day}"]
    if submit_part is not None:
        cmd += ["--submit", str(submit_part)]
    subprocess.run(cmd, check=False)


def handle_time(day: Optional[Day], run_all: bool, store: bool) -> None:
    """Bench the chosen days, optionally storing timings and the README table."""
    stored = Timings.read_from_file()

    if day is not None:
        days_to_run = {day}
    elif run_all:
        days_to_run = set(all_days())
    else:
        days_to_run = {d for d in all_days() if not stored.is_day_complete(d)}

    timings = run_multi(days_to_run, True, True)
    if timings is None:
        timings = Timings()

    if store:
        merged = stored.merge(timings)
        merged.store_file()

        print()
        try:
            readme_benchmarks.update(merged)
        except (readme_benchmarks.ReadmeError, OSError):
            print("Failed to store updated benchmarks.", file=sys.stderr)
        else:
            print("Stored updated benchmarks.")