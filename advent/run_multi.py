"""Running several days' solutions as separate processes and collecting timings."""

from __future__ import annotations

import subprocess
import sys
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import IO, Optional

from advent.day import Day, all_days
from advent.runner import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from advent.timings import Timing, Timings

_UNIT_SCALES = (("ns", 1.0), ("µs", 1_000.0), ("ms", 1_000_000.0))


def path_for_solution(day: Day) -> str:
    """Path of the solution module for ``day``, relative to the project root."""
    return f"./advent/solutions/day{day}.py"


def _module_for_solution(day: Day) -> str:
    return f"advent.solutions.day{day}"


def run_multi(
    days_to_run: Iterable[Day], is_release: bool, is_timed: bool
) -> Optional[Timings]:
    """Run the given days in order; return their timings when ``is_timed``."""
    wanted = set(days_to_run)
    collected: list[Timing] = []
    need_space = False

    for day in all_days():
        if day not in wanted:
            continue
        if need_space:
            print()
        need_space = True

        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if not output:
            print("Not solved.")
        else:
            collected.append(parse_exec_time(output, day))

    if not is_timed:
        return None

    timings = Timings(data=collected)
    print(
        f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} "
        f"{ANSI_ITALIC}{timings.total_millis():.2f}ms{ANSI_RESET}"
    )
    return timings


def _strip_newline(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def _forward_stderr(stream: IO[str]) -> None:
    for line in stream:
        print(_strip_newline(line), file=sys.stderr)


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run the solution for ``day`` in a child process.

    Its output is echoed as it arrives; the stdout lines are returned.
    Days without a solution module yield an empty list.
    """
    if not Path(path_for_solution(day)).exists():
        return []

    cmd = [sys.executable]
    if is_release:
        cmd.append("-O")
    cmd += ["-m", _module_for_solution(day)]
    if is_timed:
        cmd.append("--time")

    proc = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
    )
    if proc.stdout is None or proc.stderr is None:
        raise BrokenPipeError("child process has no output pipes")

    forwarder = threading.Thread(target=_forward_stderr, args=(proc.stderr,))
    forwarder.start()

    output = []
    for raw in proc.stdout:
        line = _strip_newline(raw)
        print(line)
        output.append(line)

    forwarder.join()
    proc.wait()
    return output


def _to_float(text: str) -> Optional[float]:
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_time(line: str) -> Optional[tuple[str, float]]:
    """Extract the timing text and its value in nanoseconds from a result line."""
    timing = line.split(" samples)")[0].rsplit("(", 1)[-1].split("@")[0].strip()

    for suffix, scale in _UNIT_SCALES:
        if suffix in timing:
            break
    else:
        suffix, scale = "s", 1_000_000_000.0

    value = _to_float(timing.split(suffix)[0])
    if value is None:
        return None
    return timing, value * scale


def parse_exec_time(output: Sequence[str], day: Day) -> Timing:
    """Build a day's timing from the benched result lines of its output."""
    timing = Timing(day=day)

    for line in output:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue

        timing_str, nanos = parsed
        part = line.split(":")[0]
        if "Part 1" in part:
            timing.part_1 = timing_str
        elif "Part 2" in part:
            timing.part_2 = timing_str
        timing.total_nanos += nanos

    return timing