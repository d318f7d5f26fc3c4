"""
Enumerate the feedback patterns a guess could still receive.

Used by the expected-remaining ranker to simulate a guess without asking the
real game. Each position is resolved on its own:

  known[i] set, guess[i] == known[i]  -> Z
  known[i] set, guess[i] excluded     -> X
  known[i] set, otherwise             -> X or Y
  guess[i] excluded                   -> X
  guess[i] already known present      -> Y
  anything else                       -> X or Y

and the patterns are the cartesian product over the five positions (1 to 32
patterns).

This is an approximation. Positions are treated as independent, so a guess
with a repeated letter can get patterns that no target produces (e.g. "eerie"
with the first 'e' grey and the second yellow). 'Z' is never produced at an
unknown position; a hit there shows up as 'Y', i.e. "present".
"""

from __future__ import annotations

from itertools import product
from typing import List, Tuple

from .feedback import ABSENT, CORRECT, MISPLACED, WORD_LENGTH
from .state import ConstraintState

_EITHER = (ABSENT, MISPLACED)


def reachable_marks(state: ConstraintState, guess: str, i: int) -> Tuple[str, ...]:
    """Marks position `i` of `guess` can still receive under `state`."""
    letter = guess[i]
    k = state.known[i]
    if k is not None:
        if letter == k:
            return (CORRECT,)
        if letter in state.excluded:
            return (ABSENT,)
        return _EITHER
    if letter in state.excluded:
        return (ABSENT,)
    if letter in state.present:
        return (MISPLACED,)
    return _EITHER


def enumerate_patterns(state: ConstraintState, guess: str) -> List[str]:
    """All patterns reachable for `guess`, in a stable order."""
    options = [reachable_marks(state, guess, i) for i in range(WORD_LENGTH)]
    return ["".join(p) for p in product(*options)]
