"""Command line entry point: search characters by keyword."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from .picker import DEFINITIVE_LIMIT, Picker
from .tables import build_universe

_TAG = re.compile(r"<[^>]+>")


def _plain(markup: str) -> str:
    return _TAG.sub("", markup.replace("<br>", "\n"))


def _report(picker: Picker, text: str, capacity: int | None, out: TextIO) -> int:
    if capacity is None:
        tiles = picker.use_input(text, DEFINITIVE_LIMIT, True)
    else:
        tiles = picker.use_input(text, capacity)
    for c in tiles.options:
        line = f"{chr(c)}\tU+{c:04X}\t{picker.universe.describe(c)}"
        groups = picker.universe.getgroups(c)
        if groups:
            line += f" ({groups})"
        print(line, file=out)
    if tiles.ellipsis:
        print("(\u2026)", file=out)
    if not tiles.options and picker.comment:
        print(_plain(picker.comment), file=out)
    return len(tiles.options)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uniword",
        description="Find Unicode characters by keywords from their names.",
    )
    parser.add_argument("words", nargs="*", help="keywords; prefix with ! to exclude")
    parser.add_argument(
        "--tables",
        default="tables",
        help="directory holding chars.txt, alias.txt, blocks.txt and groups.txt",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="room for this many tiles; without it up to 500 results are shown",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Search the tables for the given words, or for each line of input."""
    args = _parser().parse_args(argv)
    try:
        universe = build_universe(args.tables)
    except (OSError, ValueError) as exc:
        print(f"uniword: cannot load tables: {exc}", file=sys.stderr)
        return 1
    picker = Picker(universe)

    if args.words:
        found = _report(picker, " ".join(args.words), args.capacity, sys.stdout)
        if not found:
            print("uniword: no matching characters", file=sys.stderr)
            return 1
        return 0

    for line in sys.stdin:
        _report(picker, line.rstrip("\n"), args.capacity, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())