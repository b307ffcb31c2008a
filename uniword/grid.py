"""Layout of the character tiles: columns, rows, hit testing and markup."""

from __future__ import annotations

import html

from .universe import Universe

_MIN_COLUMNS = 4
_SPACE_BACKGROUND = "#eeeeee"
_COMBINER_COLOR = "#aaaaaa"
_COMBINER_BASE = "\u25fd"


class TileGrid:
    """Arranges a number of equally sized tiles in rows of a fixed width."""

    def __init__(self, tile_width: float, tile_height: float) -> None:
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError("tile size must be positive")
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.columns = 8
        self.minrows = 3
        self.count = 0

    def resize(self, viewport_width: float) -> int:
        """Fit the column count to a new viewport width and return it."""
        columns = int(viewport_width / (self.tile_width + 0.01) + 0.3)
        self.columns = max(columns, _MIN_COLUMNS)
        return self.columns

    def set_tiles(self, count: int) -> None:
        """Show ``count`` tiles; once tiles are set, one row is the minimum."""
        if count < 0:
            raise ValueError("tile count cannot be negative")
        self.minrows = 1
        self.count = count

    def rows(self) -> int:
        """Rows needed for the current tiles, never fewer than the minimum."""
        rows = -(-self.count // self.columns)
        return max(rows, self.minrows)

    def fittable_glyphs(self, viewport_height: float) -> int:
        """How many tiles fit in a viewport of the given height."""
        rows = int(viewport_height / (self.tile_height + 0.01) - 0.2)
        rows = max(rows, self.minrows)
        return rows * self.columns

    def position(self, index: int) -> tuple[float, float]:
        """Top-left corner of the cell holding tile ``index``."""
        if not 0 <= index < self.count:
            raise IndexError(f"no tile at index {index}")
        row, col = divmod(index, self.columns)
        return col * self.tile_width, row * self.tile_height

    def index_at(self, x: float, y: float) -> int:
        """Index of the tile under point (x, y), or -1 if there is none."""
        if x < 0 or y < 0:
            return -1
        col = int(x // self.tile_width)
        row = int(y // self.tile_height)
        if col >= self.columns:
            return -1
        index = row * self.columns + col
        return index if index < self.count else -1

    def scene_size(self) -> tuple[float, float]:
        """Width and height of the whole scene, with a small margin."""
        return (
            (self.columns + 0.2) * self.tile_width,
            (self.rows() + 0.2) * self.tile_height,
        )


def selection_range(press: int, release: int) -> list[int]:
    """Indices covered by a drag from ``press`` to ``release``, inclusive."""
    if press < 0 or release < 0:
        return []
    low, high = sorted((press, release))
    return list(range(low, high + 1))


def tile_markup(universe: Universe, c: int) -> str:
    """HTML shown in the tile for code point ``c``."""
    char = html.escape(chr(c))
    if universe.is_space(c):
        return f'<span style="background-color:{_SPACE_BACKGROUND};">{char}</span>'
    prefix = ""
    if universe.is_combiner(c) or universe.is_modifier(c):
        prefix = f'<span style="color:{_COMBINER_COLOR};">{_COMBINER_BASE}</span>'
    return prefix + char