"""
Candidate filtering given the accumulated constraint state.

Given:
  - a pool of words (usually the previous round's candidates)
  - a ConstraintState built up by fold_feedback

Return:
  - the words still consistent with everything learned so far.

A word W survives iff, at every position i:
  known[i] is None or W[i] == known[i],
  W[i] not in excluded,
  W[i] not in excluded_at[i];
and every letter in `present` occurs somewhere in W.
"""

from __future__ import annotations

from typing import Iterable, List

from .errors import EmptyCandidateSet
from .state import ConstraintState


def is_consistent(word: str, state: ConstraintState) -> bool:
    """True if `word` satisfies every constraint in `state`."""
    for i, ch in enumerate(word):
        k = state.known[i]
        if k is not None and k != ch:
            return False
        if ch in state.excluded or ch in state.excluded_at[i]:
            return False
    for letter in state.present:
        if letter not in word:
            return False
    return True


def filter_candidates(words: Iterable[str], state: ConstraintState) -> List[str]:
    """
    Keep only words consistent with `state`, preserving input order.

    Pure: returns a new list and never touches `state`. Duplicate words in
    the input stay duplicated in the output.
    """
    return [w for w in words if is_consistent(w, state)]


def require_candidates(words: List[str]) -> List[str]:
    """Return `words`, or raise EmptyCandidateSet if nothing is left."""
    if not words:
        raise EmptyCandidateSet(
            "no candidates left; feedback is contradictory or the target is not in the word list")
    return words
