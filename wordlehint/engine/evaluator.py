"""
Fold one round of feedback into a ConstraintState.

Per position i with letter L = guess[i]:
  - 'Y' (misplaced): L is present, but not at i
  - 'Z' (correct)  : L is known at i (and present)
  - 'X' (absent)   : L is excluded globally, unless the same guess shows L as
                     'Y' or 'Z' somewhere else, or L is already known present.

The absent rule looks at the whole pattern at once. A guess such as "speed"
against "abide" scores one 'e' as Y and the other as X; the X must not
exclude 'e'.
"""

from __future__ import annotations

from typing import Set

from .feedback import ABSENT, CORRECT, MISPLACED, validate_pattern
from .state import ConstraintState
from .validation import normalize_word


def fold_feedback(state: ConstraintState, guess: str, pattern: str) -> None:
    """
    Update `state` in place with the feedback `pattern` received for `guess`.

    Raises:
      MalformedFeedback  : pattern is not 5 symbols from X/Y/Z
      WordLengthMismatch : guess is not a 5-letter word

    Both checks happen before anything is written, so a failed call leaves
    `state` exactly as it was. Folding the same pair twice is a no-op the
    second time.
    """
    guess = normalize_word(guess)
    validate_pattern(pattern)

    # Letters this guess proves present (any Y or Z), across all positions.
    shown_present: Set[str] = {
        letter for letter, mark in zip(guess, pattern) if mark != ABSENT
    }

    for i, (letter, mark) in enumerate(zip(guess, pattern)):
        if mark == MISPLACED:
            state.present.add(letter)
            state.excluded_at[i].add(letter)
            state.excluded.discard(letter)
        elif mark == CORRECT:
            state.known[i] = letter
            state.present.add(letter)
            state.excluded.discard(letter)
        elif (
            letter not in shown_present
            and letter not in state.present
            and letter not in state.known
        ):
            state.excluded.add(letter)
