from __future__ import annotations
from typing import Dict, List, Optional, Type

from wordlehint.engine import LetterRanking

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver picks the next guess from a round's state.

    `next_guess(state)` receives a dict with keys:
      - "turn"        : 1-based round number
      - "words"       : the full word list (List[str])
      - "candidates"  : words still consistent with all feedback (List[str])
      - "constraints" : the game's ConstraintState (read-only for solvers)
      - "tried"       : words already guessed this game (Set[str])
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.words: List[str] = []
        self.ranking = LetterRanking.from_words([])

    def reset(self, *, words: List[str], text: Optional[str] = None) -> None:
        """
        Called once per word list, before the first game on it.

        `text` is the raw file the words were read from; when given, the
        letter ranking counts it as-is (rejected lines included).
        """
        self.words = list(words)
        if text is None:
            self.ranking = LetterRanking.from_words(self.words)
        else:
            self.ranking = LetterRanking.from_text(text)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
