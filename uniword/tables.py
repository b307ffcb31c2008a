"""Loading of character and block tables into a Universe."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import NamedTuple

from .universe import Universe


class CharEntry(NamedTuple):
    code: int
    description: str


class RangeEntry(NamedTuple):
    start: int
    end: int
    description: str


def _hex(field: str, line: str) -> int:
    try:
        return int(field, 16)
    except ValueError:
        raise ValueError(f"bad code point in table line: {line!r}") from None


def parse_char_line(line: str) -> CharEntry:
    """Parse ``HHHHHH description``: six hex digits, a separator, a name."""
    line = line.rstrip("\r\n")
    return CharEntry(_hex(line[:6], line), line[7:])


def parse_range_line(line: str) -> RangeEntry:
    """Parse ``HHHHHH HHHHHH description``: a code point range and its name."""
    line = line.rstrip("\r\n")
    return RangeEntry(_hex(line[:6], line), _hex(line[7:13], line), line[14:])


def _content_lines(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        line = line.rstrip("\r\n")
        if line:
            yield line


def load_chars(universe: Universe, lines: Iterable[str]) -> None:
    """Add every character line to ``universe``."""
    for line in _content_lines(lines):
        code, desc = parse_char_line(line)
        universe.add(code, desc)


def _is_control(c: int) -> bool:
    return c < 32 or 127 <= c < 160


def load_ranges(universe: Universe, lines: Iterable[str]) -> None:
    """Attach each range's description as a group to its code points.

    Control characters are skipped.
    """
    for line in _content_lines(lines):
        start, end, desc = parse_range_line(line)
        for c in range(start, end + 1):
            if not _is_control(c):
                universe.addgroup(c, desc)


def build_universe(directory: str | PathLike[str]) -> Universe:
    """Build a Universe from the table files found in ``directory``.

    Reads ``chars.txt`` and ``alias.txt`` for names, then ``blocks.txt``
    and ``groups.txt`` for groups.
    """
    root = Path(directory)
    universe = Universe()
    for name in ("chars.txt", "alias.txt"):
        with open(root / name, encoding="utf-8") as fh:
            load_chars(universe, fh)
    for name in ("blocks.txt", "groups.txt"):
        with open(root / name, encoding="utf-8") as fh:
            load_ranges(universe, fh)
    return universe