"""Writing the benchmark table into the README."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from advent.day import Day
from advent.timings import Timings

MARKER = "<!--- benchmarking table --->"


class ReadmeError(ValueError):
    """Raised when the README's benchmark table cannot be located."""


def path_for_bin(day: Day) -> str:
    return f"./advent/solutions/day{day}.py"


def locate_table(readme: str) -> tuple[int, int]:
    """Start and end offsets of the marked table, markers included."""
    positions = []
    index = readme.find(MARKER)
    while index != -1:
        positions.append(index)
        index = readme.find(MARKER, index + len(MARKER))

    if len(positions) > 2:
        raise ReadmeError("too many occurences of marker in README.")
    if not positions:
        raise ReadmeError("Could not find table start position.")
    return positions[0], positions[-1] + len(MARKER)


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    for timing in timings.data:
        lines.append(
            f"| [Day {int(timing.day)}]({path_for_bin(timing.day)}) "
            f"| `{timing.part_1 or '-'}` | `{timing.part_2 or '-'}` |"
        )
    lines += ["", f"**Total: {total_millis:.2f}ms**", MARKER]
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with the marked table replaced by a fresh one."""
    start, end = locate_table(text)
    return text[:start] + construct_table("##", timings, total_millis) + text[end:]


def update(timings: Timings, path: Union[str, Path] = "README.md") -> None:
    """Rewrite the benchmark table in the README at ``path``."""
    readme_path = Path(path)
    readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    readme = update_content(readme, timings, timings.total_millis())
    readme_path.write_text(readme, encoding="utf-8")