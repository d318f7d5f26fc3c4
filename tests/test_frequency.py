import string

import pytest
from wordlehint.datasets import load_words
from wordlehint.engine import LetterRanking, frequency_key, compare_words, rank_by_frequency


def test_ranking_orders_by_count_then_first_seen():
    r = LetterRanking.from_text("aab\nb\nC\n")
    # a and b both appear twice; a was seen first
    assert r.order.startswith("abc")
    assert r.rank("a") == 0 and r.rank("b") == 1 and r.rank("c") == 2
    assert r.rank("C") == 2


def test_ranking_covers_all_letters():
    r = LetterRanking.from_text("zzz\n")
    assert sorted(r.order) == list(string.ascii_lowercase)
    assert r.rank("z") == 0
    # unseen letters follow alphabetically
    assert r.order[1:4] == "abc"


def test_ranking_ignores_newlines_and_non_letters():
    assert LetterRanking.from_text("ab\r\n\nab\n").order == LetterRanking.from_text("abab").order


def test_ranking_is_deterministic():
    wl = load_words()
    a = LetterRanking.from_text(wl.text)
    b = LetterRanking.from_text(wl.text)
    assert a.order == b.order
    assert LetterRanking.from_words(wl.words).order == a.order


def test_ranking_rejects_bad_order():
    with pytest.raises(ValueError):
        LetterRanking("abc")


def test_frequency_key_prefers_distinct_then_common():
    r = LetterRanking("etaoinshrdlcumwfgypbvkjxqz")
    # more distinct letters wins even with rarer letters
    assert compare_words("jumpy", "eerie", r) == -1
    # same distinct count: lower rank sum wins
    assert frequency_key("stone", r) < frequency_key("jumpy", r)
    assert compare_words("jumpy", "stone", r) == 1
    assert compare_words("stone", "notes", r) == 0


def test_rank_by_frequency_is_stable():
    r = LetterRanking("etaoinshrdlcumwfgypbvkjxqz")
    words = ["notes", "jumpy", "stone", "eerie", "onset"]
    assert rank_by_frequency(words, r) == ["notes", "stone", "onset", "jumpy", "eerie"]
