"""Turning typed keywords into a list of candidate characters."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .universe import Universe

EMPTY_COMMENT = "<i>Type some words to select characters.</i>"
MULTI_COMMENT = ""
DEFINITIVE_LIMIT = 500

_BLANK = re.compile(r"[\s.]*")
_WHITESPACE = re.compile(r"\s+")


@dataclass
class Tiles:
    """Characters to show, and whether more matched than are shown."""

    options: list[int] = field(default_factory=list)
    ellipsis: bool = False


class Picker:
    """Keeps the current search, its candidates, comment and clipboard."""

    def __init__(
        self,
        universe: Universe,
        has_glyph: Callable[[int], bool] | None = None,
    ) -> None:
        self.universe = universe
        self._has_glyph = has_glyph if has_glyph is not None else (lambda c: True)
        self.include_missing = False
        self.options: list[int] = []
        self.ellipsis = False
        self.comment = EMPTY_COMMENT
        self.clipboard = ""
        self._text = ""
        self._capacity = 0
        self._definitive = False

    def use_input(self, text: str, capacity: int, definitive: bool = False) -> Tiles:
        """Search for ``text``; show at most ``capacity - 2`` characters, or
        up to the definitive limit when ``definitive`` is set."""
        self._text = text
        self._capacity = capacity
        self._definitive = definitive
        self.options = []
        self.ellipsis = False
        if _BLANK.fullmatch(text):
            self.comment = EMPTY_COMMENT
            return Tiles()
        self.comment = MULTI_COMMENT

        found = self.universe.find(_WHITESPACE.split(text))
        if not found:
            return Tiles()

        limit = DEFINITIVE_LIMIT if definitive else max(capacity - 2, 0)
        for c in sorted(found):
            if len(self.options) > limit:
                break
            if self.include_missing or self._has_glyph(c):
                self.options.append(c)

        self.ellipsis = len(self.options) > limit
        del self.options[limit:]
        if len(self.options) == 1:
            self.select([0])
        return Tiles(list(self.options), self.ellipsis)

    def select(self, indices: Iterable[int]) -> str | None:
        """Copy the chosen characters and return them.

        Choosing the ellipsis tile instead repeats the search without the
        size limit and returns None.
        """
        indices = list(indices)
        if not indices:
            return None
        one = len(indices) == 1
        if one and self.ellipsis and indices[0] == len(self.options):
            self.use_input(self._text, self._capacity, True)
            return None
        chars = []
        for index in indices:
            if 0 <= index < len(self.options):
                c = self.options[index]
                if one:
                    self.comment = self.comment_for(c)
                chars.append(chr(c))
        self.clipboard = "".join(chars)
        return self.clipboard

    def hover(self, index: int) -> str:
        """Update the comment for the tile under the pointer and return it."""
        if 0 <= index < len(self.options):
            self.comment = self.comment_for(self.options[index])
        else:
            self.comment = MULTI_COMMENT
        return self.comment

    def comment_for(self, c: int) -> str:
        """HTML description of code point ``c`` with its groups."""
        if c < 0:
            return MULTI_COMMENT
        desc = self.universe.describe(c)
        groups = self.universe.getgroups(c)
        text = f"{desc} " if desc else ""
        text += f"(0x{c:x})"
        if groups:
            text += f"<br><i>({groups})</i>"
        return text

    def set_include_missing(self, flag: bool) -> list[int]:
        """Choose whether characters without a glyph are offered."""
        if flag != self.include_missing:
            self.include_missing = flag
            self.use_input(self._text, self._capacity, self._definitive)
        return list(self.options)