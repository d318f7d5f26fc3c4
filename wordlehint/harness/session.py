"""
One game's round-control loop.

A Session owns the game's ConstraintState, its current candidate list and the
words already tried. Per round:

    guess = session.suggest()
    ...play `guess`, get a canonical pattern back...
    session.record(guess, pattern)

`record` folds the feedback, re-filters the candidates and drops every word
already guessed (a non-winning guess can never be the answer). `reset`
starts a new game on the same word list.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set, Tuple

from wordlehint.engine import (SOLVED, ConstraintState, filter_candidates, fold_feedback,
                               normalize_word, require_candidates, validate_pattern)

log = logging.getLogger(__name__)


class Session:
    def __init__(self, words: List[str], solver, text: Optional[str] = None):
        self.words: List[str] = list(words)
        self.solver = solver
        self.solver.reset(words=self.words, text=text)
        self.state = ConstraintState()
        self.candidates: List[str] = list(self.words)
        self.tried: Set[str] = set()
        self.history: List[Tuple[str, str]] = []

    @property
    def turn(self) -> int:
        return len(self.history) + 1

    @property
    def solved(self) -> bool:
        return bool(self.history) and self.history[-1][1] == SOLVED

    def reset(self) -> None:
        """Forget this game's feedback and start over on the full list."""
        self.state.clear()
        self.candidates = list(self.words)
        self.tried = set()
        self.history = []
        log.debug("session reset: %d candidates", len(self.candidates))

    def suggest(self) -> str:
        """Ask the solver for the next guess."""
        guess = self.solver.next_guess({
            "turn": self.turn,
            "words": self.words,
            "candidates": self.candidates,
            "constraints": self.state,
            "tried": self.tried,
        })
        log.debug("turn %d: %s suggests %s", self.turn, self.solver.id, guess)
        return guess

    def record(self, guess: str, pattern: str) -> List[str]:
        """
        Fold `pattern` for `guess` and return the new candidate list.

        Raises MalformedFeedback / WordLengthMismatch on bad input and
        EmptyCandidateSet if nothing survives. On any error the session is
        left exactly as it was before the call.
        """
        guess = normalize_word(guess)
        validate_pattern(pattern)

        if pattern == SOLVED:
            fold_feedback(self.state, guess, pattern)
            self.history.append((guess, pattern))
            self.tried.add(guess)
            self.candidates = [guess]
            return self.candidates

        state = self.state.copy()
        fold_feedback(state, guess, pattern)
        tried = self.tried | {guess}
        candidates = require_candidates(
            [w for w in filter_candidates(self.candidates, state) if w not in tried])

        # Trial fold succeeded; apply it to the game's own state.
        fold_feedback(self.state, guess, pattern)
        self.tried = tried
        self.candidates = candidates
        self.history.append((guess, pattern))
        log.debug("turn %d: %s -> %s, %d candidates left (%s)",
                  len(self.history), guess, pattern, len(candidates), state.describe())
        return candidates
