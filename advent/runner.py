"""Running, timing and reporting solution parts."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Sequence
from typing import Any, Optional, TypeVar

from advent import aoc_cli
from advent.day import Day

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_USAGE = "Unexpected command-line input. Format: cargo solve 1 --submit 1"
_PART = re.compile(r"\+?[0-9]+")

I = TypeVar("I")
T = TypeVar("T")


def run_part(
    func: Callable[[I], Any],
    input: I,
    day: Day,
    part: int,
    argv: Optional[Sequence[str]] = None,
) -> None:
    """Run one part, print its result and timing, and submit it if asked."""
    args = list(sys.argv[1:] if argv is None else argv)
    part_str = f"Part {part}"

    result, duration, samples = run_timed(
        func,
        input,
        lambda r: print_result(r, part_str, ""),
        "--time" in args,
    )
    print_result(result, part_str, format_duration(duration, samples))

    if result is not None:
        try:
            submit_result(result, day, part, args)
        except aoc_cli.AocCommandError as exc:
            print(f"failed to call aoc-cli: {exc}", file=sys.stderr)


def run_timed(
    func: Callable[[I], T],
    input: I,
    hook: Callable[[T], Any],
    timed: bool,
) -> tuple[T, int, int]:
    """Run ``func`` once, then bench it if ``timed``; durations are in ns."""
    start = time.perf_counter_ns()
    result = func(input)
    base_time = time.perf_counter_ns() - start

    hook(result)

    if timed:
        duration, samples = bench(func, input, base_time)
    else:
        duration, samples = base_time, 1
    return result, duration, samples


def bench(func: Callable[[I], Any], input: I, base_time: int) -> tuple[int, int]:
    """Repeat ``func`` for about a second (10 to 10000 runs); return mean ns and runs."""
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)

    iterations = min(max(1_000_000_000 // max(base_time, 10), 10), 10_000)
    samples = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(input)
        samples.append(time.perf_counter_ns() - start)
    return average_duration(samples), iterations


def average_duration(samples: Sequence[int]) -> int:
    """Integer mean of durations in nanoseconds."""
    return sum(samples) // len(samples)


def _format_nanos(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        unit, suffix = 1_000_000_000, "s"
    elif nanos >= 1_000_000:
        unit, suffix = 1_000_000, "ms"
    elif nanos >= 1_000:
        unit, suffix = 1_000, "µs"
    else:
        return f"{nanos}.0ns"
    step = unit // 10
    tenths, rest = divmod(nanos, step)
    if rest * 2 >= step:
        tenths += 1
    whole, tenth = divmod(tenths, 10)
    return f"{whole}.{tenth}{suffix}"


def format_duration(duration_ns: int, samples: int) -> str:
    """Format a duration with one decimal, plus the sample count when benched."""
    text = _format_nanos(duration_ns)
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def print_result(result: Any, part: str, duration_str: str) -> None:
    """Print a result; an empty ``duration_str`` marks a provisional line."""
    intermediate = not duration_str

    if result is None:
        if intermediate:
            print(f"{part}: ✖", end="", flush=True)
        else:
            print(f"\r{part}: ✖             ")
        return

    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print(f"\r{line}")
            print(text)
    else:
        line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print(f"\r{line}")


def submit_result(
    result: Any, day: Day, part: int, argv: Optional[Sequence[str]] = None
) -> Optional[Any]:
    """Submit ``result`` when ``--submit <part>`` names this part.

    Returns the client's completed process, or ``None`` if nothing was submitted.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if "--submit" not in args:
        return None

    if len(args) < 2:
        print(_USAGE, file=sys.stderr)
        sys.exit(1)

    index = args.index("--submit") + 1
    if index >= len(args) or not _PART.fullmatch(args[index]) or int(args[index]) > 255:
        print(_USAGE, file=sys.stderr)
        sys.exit(1)

    if int(args[index]) != part:
        return None

    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(
            'command "aoc" not found or not callable. '
            'Try running "cargo install aoc-cli" to install it.',
            file=sys.stderr,
        )
        sys.exit(1)

    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))