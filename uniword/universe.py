"""Keyword index over Unicode code points."""

from __future__ import annotations

import re
from collections.abc import Iterable

_WORD_SPLIT = re.compile(r"[ ,;]+")
_EMPTY: frozenset[str] = frozenset()


class Universe:
    """A searchable collection of characters, their names and groups."""

    def __init__(self) -> None:
        self._words: dict[int, set[str]] = {}
        self._descs: dict[int, str] = {}
        self._groups: dict[int, list[str]] = {}
        self._combiners: set[int] = set()
        self._modifiers: set[int] = set()
        self._spaces: set[int] = set()

    def add(self, c: int, desc: str) -> None:
        """Register code point ``c`` under the words of ``desc``."""
        words = self._words.setdefault(c, set())
        for bit in _WORD_SPLIT.split(desc):
            words.add(bit.lower())
            if bit == "COMBINING":
                self._combiners.add(c)
            elif bit == "MODIFIER":
                self._modifiers.add(c)
            elif bit == "SPACE":
                self._spaces.add(c)
        self._add_description(c, desc)

    def addgroup(self, c: int, desc: str) -> None:
        """Attach group ``desc`` to a known code point; unknown ones are ignored."""
        if c not in self._words:
            return
        words = self._words[c]
        for bit in _WORD_SPLIT.split(desc):
            words.add("." + bit.lower())
        groups = self._groups.setdefault(c, [])
        if desc not in groups:
            groups.append(desc)

    def _add_description(self, c: int, desc: str) -> None:
        if c in self._descs:
            return
        parts: list[str] = []
        for word in (b for b in desc.split(" ") if b):
            if len(word) == 1:
                parts.append(word.upper())
            elif not parts:
                parts.append(word[:1].upper() + word[1:].lower())
            else:
                parts.append(word.lower())
        self._descs[c] = " ".join(parts)

    def describe(self, c: int) -> str:
        """Human-readable name of ``c``, or an empty string."""
        return self._descs.get(c, "")

    def getgroups(self, c: int) -> str:
        """Groups of ``c`` joined by semicolons, or an empty string."""
        return "; ".join(self._groups.get(c, []))

    def all(self) -> set[int]:
        """Every registered code point."""
        return set(self._words)

    def find(self, selectors: str | Iterable[str]) -> set[int]:
        """Code points matching every selector in turn."""
        if isinstance(selectors, str):
            selectors = [selectors]
        result = self.all()
        for selector in selectors:
            result = self.refine(result, selector)
        return result

    def refine(self, pool: Iterable[int], selector: str) -> set[int]:
        """Narrow ``pool`` to code points matching ``selector``.

        Exact word matches are preferred; if there are none, prefix matches
        are used. A leading ``!`` turns the selector into an exclusion.
        """
        pool = set(pool)
        if not selector:
            return pool
        if selector.startswith("!"):
            return self.exclude(pool, selector[1:])
        selector = selector.lower()
        result = {c for c in pool if selector in self._words.get(c, _EMPTY)}
        if not result:
            result = {
                c
                for c in pool
                if any(w.startswith(selector) for w in self._words.get(c, _EMPTY))
            }
        return result

    def exclude(self, pool: Iterable[int], selector: str) -> set[int]:
        """Remove from ``pool`` the code points matching ``selector``.

        Prefix matches are removed; if that leaves nothing, only exact
        matches are removed instead.
        """
        pool = set(pool)
        if not selector:
            return pool
        selector = selector.lower()
        result = {
            c
            for c in pool
            if not any(w.startswith(selector) for w in self._words.get(c, _EMPTY))
        }
        if not result:
            result = {c for c in pool if selector not in self._words.get(c, _EMPTY)}
        return result

    def is_combiner(self, c: int) -> bool:
        return c in self._combiners

    def is_modifier(self, c: int) -> bool:
        return c in self._modifiers

    def is_space(self, c: int) -> bool:
        return c in self._spaces