"""
Accumulated knowledge from all feedback folded so far in one game.

Fields:
  - known       : letter confirmed correct at each position (None = unknown)
  - excluded    : letters confirmed absent from the target entirely
  - excluded_at : per position, letters present in the target but not there
  - present     : letters confirmed to occur at least once

Invariant: a letter in `excluded` never appears in `present`, `known` or any
`excluded_at[i]`. `fold_feedback` keeps it that way.

One ConstraintState belongs to one game. It only grows between `clear()`
calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set

from .feedback import WORD_LENGTH


def _empty_known() -> List[Optional[str]]:
    return [None] * WORD_LENGTH


def _empty_excluded_at() -> List[Set[str]]:
    return [set() for _ in range(WORD_LENGTH)]


@dataclass
class ConstraintState:
    known: List[Optional[str]] = field(default_factory=_empty_known)
    excluded: Set[str] = field(default_factory=set)
    excluded_at: List[Set[str]] = field(default_factory=_empty_excluded_at)
    present: Set[str] = field(default_factory=set)

    def clear(self) -> None:
        """Forget everything (start of a new game)."""
        self.known = _empty_known()
        self.excluded = set()
        self.excluded_at = _empty_excluded_at()
        self.present = set()

    def copy(self) -> "ConstraintState":
        """Independent copy; folding into it never touches `self`."""
        return ConstraintState(
            known=list(self.known),
            excluded=set(self.excluded),
            excluded_at=[set(s) for s in self.excluded_at],
            present=set(self.present),
        )

    def is_empty(self) -> bool:
        return (
            not self.excluded
            and not self.present
            and all(k is None for k in self.known)
            and not any(self.excluded_at)
        )

    def fold(self, guess: str, pattern: str) -> None:
        """Shorthand for evaluator.fold_feedback(self, guess, pattern)."""
        from .evaluator import fold_feedback
        fold_feedback(self, guess, pattern)

    def describe(self) -> str:
        """One-line human summary, e.g. for debug logging."""
        known = "".join(k if k else "." for k in self.known)
        return (
            f"known={known} present={''.join(sorted(self.present)) or '-'} "
            f"excluded={''.join(sorted(self.excluded)) or '-'}"
        )
