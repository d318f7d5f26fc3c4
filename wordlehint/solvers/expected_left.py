"""
Expected Remaining Candidates, weighted by real buckets (ERC-weighted).

Idea:
  For guess g, if the CURRENT candidates partition into buckets of sizes
  {c_i} under the true scoring rule, the expected leftover after seeing the
  pattern is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  Minimize sum_i c_i^2 (equivalently E[left]). Tie-break: smaller worst
  bucket, then candidates first, then letter frequency order.

Unlike `expected_remaining`, each pattern counts as often as candidates
actually produce it, so impossible patterns carry no weight.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Set, Tuple
from .base import BaseSolver, register
from wordlehint.engine import frequency_key, require_candidates
from wordlehint.engine import score as score_fn


def _sum_c2_and_worst(guess: str, candidates: List[str]) -> Tuple[int, int]:
    buckets: Dict[str, int] = defaultdict(int)
    _score = score_fn
    for ans in candidates:
        buckets[_score(guess, ans)] += 1
    worst = max(buckets.values()) if buckets else 0
    sum_c2 = sum(c*c for c in buckets.values())
    return sum_c2, worst


@register
class ExpectedLeftSolver(BaseSolver):
    id = "expected_left"
    name = "Expected Remaining Candidates (bucket-weighted)"
    version = "1.0.0"

    # Above this many candidates, only the POOL_CAP best probes by distinct
    # letter coverage are scored.
    CANDIDATE_ONLY_LIMIT = 200
    POOL_CAP = 400

    def _distinct_letter_score(self, w: str, alpha: Dict[str, int]) -> int:
        return sum(alpha.get(ch, 0) for ch in set(w))

    def _select_pool(self, candidates: List[str], tried: Set[str]) -> List[str]:
        pool = [w for w in dict.fromkeys(self.words) if w not in tried]
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return pool
        alpha: Dict[str, int] = {}
        for w in candidates:
            for ch in set(w):
                alpha[ch] = alpha.get(ch, 0) + 1
        ranked = sorted(pool, key=lambda w: self._distinct_letter_score(w, alpha), reverse=True)
        return ranked[: self.POOL_CAP]

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = require_candidates(state["candidates"])
        tried: Set[str] = state.get("tried", set())

        if len(candidates) == 1:
            return candidates[0]

        cand_set = set(candidates)
        best = None
        best_key = None
        for g in self._select_pool(candidates, tried):
            sum_c2, worst = _sum_c2_and_worst(g, candidates)
            key = (sum_c2, worst, g not in cand_set, frequency_key(g, self.ranking))
            if best_key is None or key < best_key:
                best, best_key = g, key

        return best if best is not None else candidates[0]
