"""Command-line entry point."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from typing import Optional

from advent.commands import (
    handle_all,
    handle_download,
    handle_read,
    handle_scaffold,
    handle_solve,
    handle_time,
)
from advent.day import Day, DayError

_PART = re.compile(r"\+?[0-9]+")


def _day(text: str) -> Day:
    try:
        return Day.parse(text)
    except DayError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _part(text: str) -> int:
    if not _PART.fullmatch(text) or int(text) > 255:
        raise argparse.ArgumentTypeError("expecting a part number between 0 and 255")
    return int(text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="advent", description="Run and manage puzzle solutions.")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    run_all = commands.add_parser("all", help="run every day's solution")
    run_all.add_argument("--release", action="store_true")

    time = commands.add_parser("time", help="bench solutions")
    time.add_argument("day", nargs="?", type=_day, default=None)
    time.add_argument("--all", action="store_true")
    time.add_argument("--store", action="store_true")

    download = commands.add_parser("download", help="download input and puzzle")
    download.add_argument("day", type=_day)

    read = commands.add_parser("read", help="show the puzzle description")
    read.add_argument("day", type=_day)

    scaffold = commands.add_parser("scaffold", help="create files for a day")
    scaffold.add_argument("day", type=_day)
    scaffold.add_argument("--download", action="store_true")
    scaffold.add_argument("--overwrite", action="store_true")

    solve = commands.add_parser("solve", help="run one day's solution")
    solve.add_argument("day", type=_day)
    solve.add_argument("--release", action="store_true")
    solve.add_argument("--dhat", action="store_true")
    solve.add_argument("--submit", type=_part, default=None)

    commands.add_parser("today", help="scaffold, download and read today's puzzle")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line; exits when no command is given."""
    args, remaining = _build_parser().parse_known_args(argv)
    if args.command is None:
        print("No command specified.", file=sys.stderr)
        sys.exit(1)
    if remaining:
        print(f"Warning: unknown argument(s): {remaining}.", file=sys.stderr)
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    command = args.command

    if command == "all":
        handle_all(args.release)
    elif command == "time":
        handle_time(args.day, args.all, args.store)
    elif command == "download":
        handle_download(args.day)
    elif command == "read":
        handle_read(args.day)
    elif command == "scaffold":
        handle_scaffold(args.day, args.overwrite)
        if args.download:
            handle_download(args.day)
    elif command == "solve":
        handle_solve(args.day, args.release, args.dhat, args.submit)
    elif command == "today":
        day = Day.today()
        if day is None:
            print(
                "`today` command can only be run between the 1st and the 25th "
                "of december. Please use `scaffold` with a specific day.",
                file=sys.stderr,
            )
            sys.exit(1)
        handle_scaffold(day, False)
        handle_download(day)
        handle_read(day)


if __name__ == "__main__":
    main()