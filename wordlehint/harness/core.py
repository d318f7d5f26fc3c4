"""
Simulation harness.

- run_case:  play one game (one hidden answer) with a given solver, using the
             reference scorer in place of the real game.
- run_batch: play many games in sequence (optionally a sample prefix).

Both go through a Session, so simulated games exercise exactly the same
fold/filter path as the interactive CLI.
"""

from __future__ import annotations
import time
from typing import Dict, List, Optional
from wordlehint.engine import SOLVED, EmptyCandidateSet, score
from .session import Session

# Wordle's turn budget; simulations may ask for more.
WORDLE_MAX_TURNS = 6


def _assert_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        words: List[str],
        max_turns: int = WORDLE_MAX_TURNS,
        session: Optional[Session] = None,
        text: Optional[str] = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    a BaseSolver
        answer:    the hidden word for this case
        words:     the word list the solver guesses from
        max_turns: turn budget (6 for Wordle)
        session:   reuse an existing Session (reset first) instead of
                   building one; saves re-ranking the word list per game
        text:      raw word-list file text for the letter ranking (optional)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str), error (str|None)
    """
    _assert_turns(max_turns)

    if session is None:
        session = Session(words, solver, text)
    else:
        session.reset()

    error = None
    t0 = time.perf_counter()
    for _ in range(max_turns):
        guess = session.suggest()
        patt = score(guess, answer)
        try:
            session.record(guess, patt)
        except EmptyCandidateSet as e:
            # Only happens when the answer is not in `words`.
            session.history.append((guess, patt))
            error = str(e)
            break
        if patt == SOLVED:
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": session.solved,
        "guesses": len(session.history),
        "time_ms": dt,
        "history": list(session.history),
        "answer": answer,
        "error": error,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        words: List[str],
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
        progress=None,
        text: Optional[str] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back over one shared Session. If 'sample' is
    provided, only the first K answers are used.

    `progress` wraps the answer iterable (e.g. tqdm) when given.
    `text` is passed to the shared Session (see run_case).
    """
    _assert_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    session = Session(words, solver, text)
    iterator = progress(pool) if progress else pool

    out: List[Dict] = []
    for ans in iterator:
        r = run_case(solver, ans, words=words, max_turns=max_turns, session=session)
        r["solver_id"] = solver.id
        out.append(r)
    return out
