"""
Expected Remaining Candidates over enumerated patterns.

Idea:
  For each guess g in the FULL word list (probes outside the candidate set
  can still split it well):
    - enumerate the patterns g could still receive (engine.patterns)
    - fold each one into a COPY of the constraint state
    - count how many current candidates would survive
  Score g by the plain average of those counts and pick the minimum.

The average is uniform over enumerated patterns; it is not weighted by how
many candidates would actually produce each pattern. See `expected_left` for
the weighted version; the two are separate solvers on purpose.

Tie-break: prefer a guess that is itself a candidate, then the letter
frequency order, then word-list order.

Cost: O(|words| * 32) vectorised counts per round. The first round is
computed like any other unless an `opening` word is configured.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

import numpy as np

from .base import BaseSolver, register
from wordlehint.engine import (CandidateMatrix, ConstraintState, enumerate_patterns,
                               fold_feedback, frequency_key, require_candidates)

log = logging.getLogger(__name__)


def expected_remaining(guess: str, constraints: ConstraintState, matrix: CandidateMatrix) -> float:
    """Average survivor count over the patterns `guess` could receive."""
    counts: List[int] = []
    for patt in enumerate_patterns(constraints, guess):
        sim = constraints.copy()
        fold_feedback(sim, guess, patt)
        counts.append(matrix.count(sim))
    return float(np.mean(counts))


@register
class ExpectedRemainingSolver(BaseSolver):
    id = "expected_remaining"
    name = "Expected Remaining Candidates (enumerated patterns)"
    version = "1.0.0"

    def __init__(self, opening: Optional[str] = None):
        super().__init__()
        # Fixed first guess; None means compute round one like the others.
        self.opening = opening.lower() if opening else None

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = require_candidates(state["candidates"])
        constraints: ConstraintState = state["constraints"]
        tried: Set[str] = state.get("tried", set())

        if len(candidates) == 1:
            return candidates[0]

        if self.opening and constraints.is_empty() and len(candidates) == len(self.words) \
                and self.opening in self.words and self.opening not in tried:
            return self.opening

        matrix = CandidateMatrix(candidates)
        cand_set = set(candidates)

        best = None
        best_key = None
        seen: Set[str] = set()
        for g in self.words:
            if g in seen or g in tried:
                continue
            seen.add(g)
            avg = expected_remaining(g, constraints, matrix)
            key = (avg, g not in cand_set, frequency_key(g, self.ranking))
            if best_key is None or key < best_key:
                best, best_key = g, key

        if best is None:
            # every word already tried; fall back to the first candidate
            return candidates[0]

        log.debug("expected_remaining: %s (avg %.2f of %d candidates)", best, best_key[0], len(candidates))
        return best
