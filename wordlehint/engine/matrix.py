"""
Vectorised candidate counting.

The expected-remaining ranker asks "how many candidates survive this state?"
up to 32 times per guess, for every word in the list. Running the pure
Python filter for each of those is O(N^2 * 32) string work. CandidateMatrix
stores the candidates once as an (n, 5) array of letter codes and evaluates
the same predicate as `filter_candidates` with numpy boolean masks.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .feedback import WORD_LENGTH
from .state import ConstraintState


def _code(letter: str) -> int:
    return ord(letter) - ord("a")


class CandidateMatrix:
    """
    Immutable letter-code matrix over a list of words.

    Attributes:
      words   : the words, in input order
      codes   : (n, 5) uint8 array, 0 = 'a' ... 25 = 'z'
      letters : (n, 26) bool array, letters[r, c] = word r contains letter c
    """

    def __init__(self, words: List[str]):
        self.words = list(words)
        n = len(self.words)
        if n:
            buf = "".join(self.words).encode("ascii")
            self.codes = (np.frombuffer(buf, dtype=np.uint8).reshape(n, WORD_LENGTH) - ord("a")).astype(np.uint8)
        else:
            self.codes = np.zeros((0, WORD_LENGTH), dtype=np.uint8)
        self.letters = np.zeros((n, 26), dtype=bool)
        rows = np.repeat(np.arange(n), WORD_LENGTH)
        self.letters[rows, self.codes.reshape(-1)] = True

    def __len__(self) -> int:
        return len(self.words)

    def mask(self, state: ConstraintState) -> np.ndarray:
        """Boolean mask of rows consistent with `state`."""
        keep = np.ones(len(self.words), dtype=bool)

        if state.excluded:
            excluded = [_code(ch) for ch in state.excluded]
            keep &= ~self.letters[:, excluded].any(axis=1)

        for i in range(WORD_LENGTH):
            col = self.codes[:, i]
            k = state.known[i]
            if k is not None:
                keep &= col == _code(k)
            if state.excluded_at[i]:
                keep &= ~np.isin(col, [_code(ch) for ch in state.excluded_at[i]])

        if state.present:
            present = [_code(ch) for ch in state.present]
            keep &= self.letters[:, present].all(axis=1)

        return keep

    def count(self, state: ConstraintState) -> int:
        """Number of words that `filter_candidates` would keep."""
        return int(self.mask(state).sum())

    def filter(self, state: ConstraintState) -> List[str]:
        keep = self.mask(state)
        return [w for w, k in zip(self.words, keep) if k]
