"""
Letter-Frequency Solver (distinct letters, then common letters).

Idea:
  - Rank the letters once per word list by corpus frequency.
  - Among the CURRENT candidates, prefer the word with the most distinct
    letters; break ties on the smallest sum of letter ranks.

Notes:
  - Only ever guesses a candidate, so every guess could be the answer.
  - Cheap: O(|candidates| * 5) per round.
"""

from __future__ import annotations
from typing import List
from .base import BaseSolver, register
from wordlehint.engine import frequency_key, require_candidates


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct, corpus rank)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = require_candidates(state["candidates"])
        # min() keeps the first of equal keys, i.e. list order on ties
        return min(candidates, key=lambda w: frequency_key(w, self.ranking))
