import io

import pytest

from uniword.cli import main


@pytest.fixture
def tables(tmp_path):
    (tmp_path / "chars.txt").write_text(
        "0000E9 LATIN SMALL LETTER E WITH ACUTE\n"
        "0000E1 LATIN SMALL LETTER A WITH ACUTE\n"
        "0003B1 GREEK SMALL LETTER ALPHA\n",
        encoding="utf-8",
    )
    (tmp_path / "alias.txt").write_text("0000E9 E ACUTE\n", encoding="utf-8")
    (tmp_path / "blocks.txt").write_text(
        "000080 0000FF Latin-1 Supplement\n", encoding="utf-8"
    )
    (tmp_path / "groups.txt").write_text("", encoding="utf-8")
    return tmp_path


def test_search_prints_matches(tables, capsys):
    assert main(["--tables", str(tables), "acute"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith(chr(0xE1) + "\tU+00E1\t")
    assert "Latin-1 Supplement" in lines[1]


def test_exclusion(tables, capsys):
    assert main(["--tables", str(tables), "acute", "!e"]) == 0
    out = capsys.readouterr().out
    assert chr(0xE1) in out
    assert chr(0xE9) not in out


def test_capacity_shows_ellipsis(tables, capsys):
    assert main(["--tables", str(tables), "--capacity", "3", "small"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "(\u2026)"
    assert len(lines) == 2


def test_no_match_returns_error(tables, capsys):
    assert main(["--tables", str(tables), "zebra"]) == 1
    assert "no matching" in capsys.readouterr().err


def test_missing_tables(tmp_path, capsys):
    assert main(["--tables", str(tmp_path / "absent"), "acute"]) == 1
    assert "cannot load tables" in capsys.readouterr().err


def test_reads_queries_from_stdin(tables, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("alpha\n\n"))
    assert main(["--tables", str(tables)]) == 0
    out = capsys.readouterr().out
    assert chr(0x3B1) in out
    assert "Type some words to select characters." in out