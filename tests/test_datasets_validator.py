import logging
from pathlib import Path

import pytest
from wordlehint.datasets import (DEFAULT_WORDLIST, load_words, parse_words, pretty_summary,
                                 validate_wordlist, write_lines)
from wordlehint.engine import WordLengthMismatch


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["duplicates"] == 0
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    words = tmp_path / "words.txt"
    # 'cranes' too long, '???' invalid chars, blank line invalid
    words.write_text("raise\ncranes\n???\n\nStare\n", encoding="utf-8")

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert rep["count"] == 2
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_duplicates_are_reported_not_fatal(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "crane", "stare"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["duplicates"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_default_wordlist_is_valid():
    rep = validate_wordlist(str(DEFAULT_WORDLIST))
    assert rep["passed"] is True and rep["duplicates"] == 0


def test_load_words_default():
    wl = load_words()
    assert wl.source == str(DEFAULT_WORDLIST)
    assert wl.words and all(len(w) == 5 and w.isalpha() and w.islower() for w in wl.words)
    assert wl.rejected == 0
    assert "crane" in wl.words


def test_load_words_missing_file_falls_back(tmp_path: Path, caplog):
    with caplog.at_level(logging.WARNING):
        wl = load_words(tmp_path / "missing.txt")
    assert wl.source == str(DEFAULT_WORDLIST)
    assert "not found" in caplog.text


def test_load_words_normalizes_and_counts_rejects(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("CRANE\n  stare \ncranes\n\ncrane\n", encoding="utf-8")
    wl = load_words(p)
    # case-folded, duplicates kept, bad line skipped, blank ignored
    assert wl.words == ["crane", "stare", "crane"]
    assert wl.rejected == 1
    assert wl.text.startswith("CRANE")


def test_load_words_strict(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\ncranes\n", encoding="utf-8")
    with pytest.raises(WordLengthMismatch):
        load_words(p, strict=True)


def test_parse_and_write_lines(tmp_path: Path):
    words, rejected = parse_words(["Crane", "", "x"])
    assert words == ["crane"] and rejected == 1
    out = write_lines(words, tmp_path / "sub" / "w.txt")
    assert Path(out).read_text(encoding="utf-8") == "crane\n"
