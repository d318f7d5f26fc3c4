"""
Corpus letter ranking and the frequency ordering of guesses.

LetterRanking orders the 26 letters by how often they occur in the whole word
list (case-folded, newlines ignored). Ties keep first-seen order; letters that
never occur go last, alphabetically. rank('e') == 0 means 'e' is the most
common letter in the corpus.

Words are ordered by a two-key total order:
  1) more DISTINCT letters first (probes more of the alphabet)
  2) lower sum of letter ranks first (favors common letters)
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from .validation import ALPHABET


class LetterRanking:
    """Immutable letter -> rank lookup, 0 = most frequent."""

    def __init__(self, order: str):
        if sorted(order) != list(ALPHABET):
            raise ValueError(f"ranking must be a permutation of a-z, got {order!r}")
        self._order = order
        self._rank: Dict[str, int] = {ch: i for i, ch in enumerate(order)}

    @classmethod
    def from_text(cls, text: str) -> "LetterRanking":
        counts = Counter(ch for ch in text.lower().replace("\n", "") if ch in ALPHABET)
        # most_common sorts stably, so equal counts keep first-seen order
        seen = [ch for ch, _ in counts.most_common()]
        missing = [ch for ch in ALPHABET if ch not in counts]
        return cls("".join(seen + missing))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "LetterRanking":
        return cls.from_text("\n".join(words))

    @property
    def order(self) -> str:
        return self._order

    def rank(self, letter: str) -> int:
        return self._rank[letter.lower()]

    def __repr__(self) -> str:
        return f"LetterRanking({self._order!r})"


def frequency_key(word: str, ranking: LetterRanking) -> Tuple[int, int]:
    """Sort key for the frequency order; smaller sorts first."""
    return -len(set(word)), sum(ranking.rank(ch) for ch in word)


def compare_words(a: str, b: str, ranking: LetterRanking) -> int:
    """
    Three-way comparison under the frequency order.

    Returns -1 if `a` is the better guess, 1 if `b` is, 0 if they tie.
    """
    ka, kb = frequency_key(a, ranking), frequency_key(b, ranking)
    return (ka > kb) - (ka < kb)


def rank_by_frequency(words: Iterable[str], ranking: LetterRanking) -> List[str]:
    """Best guess first; ties keep their input order."""
    return sorted(words, key=lambda w: frequency_key(w, ranking))
