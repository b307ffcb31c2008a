# uniword

Find Unicode characters by typing words from their names.

Type a few words, such as `greek small alpha` or `arrow left double`, and
uniword lists every character whose name matches all of them.

## Search rules

- Words are separated by whitespace. Each word narrows the result further.
- A word matches exactly if any character has it. Only when none does is it
  matched as a prefix, so `arr` finds arrows.
- A word starting with `.` matches the words of a block or group name, for
  example `.arrows` or `.greek`.
- A word starting with `!` excludes characters. `!small` drops every
  character with a word beginning "small". If that would leave nothing,
  only characters with the exact word "small" are dropped.
- Matching ignores case.
- Input made only of whitespace and dots finds nothing.

## Character tables

The package reads four plain text files from one directory. They are not
included in the package; you supply the directory.

- `chars.txt` and `alias.txt`: one character per line, as six hexadecimal
  digits, one separator character, then the name
  (`0003B1 GREEK SMALL LETTER ALPHA`).
- `blocks.txt` and `groups.txt`: one range per line, as two six-digit
  hexadecimal code points and the group name, each separated by one
  character (`000370 0003FF Greek and Coptic`). Control characters
  (below 32, and 127 to 159) are left out of every range, and a range only
  touches characters already named.

Files are read as UTF-8; empty lines are skipped. A line whose code point is
not hexadecimal raises `ValueError`.

## Command line

```
uniword --tables path/to/tables greek small alpha
```

Each matching character is printed on its own line as the character, its
code point (`U+03B1`), its name and, in parentheses, its groups. Without
`--capacity` up to 500 results are shown; with `--capacity N` at most
`N - 2` are shown. When more matched than are shown, a final `(…)` line
says so. If nothing matches, the command prints a message to standard error
and exits with status 1.

Without search words, `uniword` reads standard input and searches for each
line in turn:

```
printf 'arrow left\n.greek omega\n' | uniword --tables path/to/tables
```

`--tables` defaults to `tables` in the current directory. If the tables
cannot be read, the command reports it and exits with status 1.

## Library use

```python
from uniword.tables import build_universe

universe = build_universe("path/to/tables")
for code in sorted(universe.find(["greek", "small", "alpha"])):
    print(chr(code), universe.describe(code), universe.getgroups(code))
```

- `uniword.universe.Universe` is the keyword index: `add`, `addgroup`,
  `find`, `refine`, `exclude`, `all`, `describe`, `getgroups`,
  `is_combiner`, `is_modifier` and `is_space`.
- `uniword.tables` parses table lines (`parse_char_line`,
  `parse_range_line`), loads them into a universe (`load_chars`,
  `load_ranges`) and builds one from a directory (`build_universe`).
- `uniword.picker.Picker` keeps the state of a search session.
  `use_input(text, capacity, definitive=False)` returns a `Tiles` with the
  sorted options and an `ellipsis` flag; `select(indices)` returns the
  chosen characters and stores them in `clipboard`, and selecting the
  ellipsis tile repeats the search with the 500 limit; `hover(index)` and
  `comment_for(c)` give an HTML description with the code point and
  groups. A `has_glyph` callable can hide characters the display font
  lacks, unless `set_include_missing(True)` is called.
- `uniword.grid.TileGrid` works out the layout of result tiles: column
  count for a viewport width (at least four), rows, how many tiles fit,
  tile positions, hit testing and scene size. `selection_range` gives the
  indices covered by a drag, and `tile_markup` the HTML for one tile.

## What it does not do

There is no graphical window: no font chooser, no glyph rendering, no menus
and no saved settings. `Picker.clipboard` is a plain attribute; nothing is
copied to the system clipboard. The character tables must be supplied.

## Development

```
pip install -e .[test]
pytest
```