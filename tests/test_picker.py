import pytest

from uniword.picker import EMPTY_COMMENT, MULTI_COMMENT, Picker, Tiles
from uniword.universe import Universe


@pytest.fixture
def universe():
    u = Universe()
    u.add(0xE9, "LATIN SMALL LETTER E WITH ACUTE")
    u.add(0xE1, "LATIN SMALL LETTER A WITH ACUTE")
    u.add(0xE8, "LATIN SMALL LETTER E WITH GRAVE")
    u.add(0x3B1, "GREEK SMALL LETTER ALPHA")
    u.add(0x1F600, "GRINNING FACE")
    for c in range(0x61, 0x61 + 10):
        u.add(c, f"LATIN SMALL LETTER {chr(c).upper()}")
    u.addgroup(0xE9, "Latin-1 Supplement")
    return u


def test_blank_input_gives_nothing(universe):
    picker = Picker(universe)
    assert picker.use_input("  . ", 50) == Tiles([], False)
    assert picker.comment == EMPTY_COMMENT


def test_matches_are_sorted(universe):
    picker = Picker(universe)
    tiles = picker.use_input("acute", 50)
    assert tiles.options == sorted([0xE9, 0xE1])
    assert tiles.ellipsis is False
    assert picker.comment == MULTI_COMMENT


def test_no_match(universe):
    picker = Picker(universe)
    assert picker.use_input("zebra", 50).options == []


def test_capacity_limits_and_sets_ellipsis(universe):
    picker = Picker(universe)
    tiles = picker.use_input("letter", 5)
    assert len(tiles.options) == 3
    assert tiles.ellipsis is True


def test_definitive_ignores_capacity(universe):
    picker = Picker(universe)
    tiles = picker.use_input("letter", 5, True)
    assert len(tiles.options) == len(universe.find(["letter"]))
    assert tiles.ellipsis is False


def test_selecting_ellipsis_expands(universe):
    picker = Picker(universe)
    tiles = picker.use_input("letter", 5)
    assert picker.select([len(tiles.options)]) is None
    assert len(picker.options) == len(universe.find(["letter"]))
    assert picker.ellipsis is False


def test_single_match_is_copied(universe):
    picker = Picker(universe)
    picker.use_input("grinning", 50)
    assert picker.clipboard == chr(0x1F600)
    assert picker.comment.startswith(universe.describe(0x1F600))


def test_select_range_concatenates(universe):
    picker = Picker(universe)
    picker.use_input("acute", 50)
    text = picker.select([0, 1])
    assert text == chr(0xE1) + chr(0xE9)
    assert picker.clipboard == text


def test_select_nothing(universe):
    picker = Picker(universe)
    picker.use_input("acute", 50)
    assert picker.select([]) is None
    assert picker.clipboard == ""


def test_comment_for_includes_code_and_groups(universe):
    picker = Picker(universe)
    comment = picker.comment_for(0xE9)
    assert comment.startswith(universe.describe(0xE9) + " ")
    assert "(0xe9)" in comment
    assert "<i>(Latin-1 Supplement)</i>" in comment


def test_comment_for_unknown_has_only_code(universe):
    picker = Picker(universe)
    assert picker.comment_for(0x2603) == "(0x2603)"
    assert picker.comment_for(-1) == MULTI_COMMENT


def test_hover(universe):
    picker = Picker(universe)
    picker.use_input("acute", 50)
    assert picker.hover(1) == picker.comment_for(0xE9)
    assert picker.hover(7) == MULTI_COMMENT


def test_missing_glyphs_filtered_and_restored(universe):
    picker = Picker(universe, has_glyph=lambda c: c < 0x100)
    assert 0x3B1 not in picker.use_input("small", 50, True).options
    assert 0x3B1 in picker.set_include_missing(True)
    assert 0x3B1 not in picker.set_include_missing(False)