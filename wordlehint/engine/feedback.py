"""
Feedback symbols, input adapters and the reference scorer.

Conventions (canonical pattern alphabet):
  - 'X' : absent    = letter not in the word (or present fewer times than guessed)
  - 'Y' : misplaced = letter in the word, wrong position
  - 'Z' : correct   = letter in the correct position

A pattern is a 5-character string over X/Y/Z, e.g. "XYZZX". Everything in
the engine consumes this canonical form; other alphabets are converted at the
edge by `normalize_feedback`.

Supported input alphabets:
  - "human": X / Y / Z typed at a prompt (case-insensitive)
  - "api"  : x / y / g as returned by remote game APIs
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Literal

from .errors import MalformedFeedback

WORD_LENGTH = 5

ABSENT = "X"
MISPLACED = "Y"
CORRECT = "Z"
SYMBOLS = (ABSENT, MISPLACED, CORRECT)

# Round termination signal
SOLVED = CORRECT * WORD_LENGTH

PatternChar = Literal["X", "Y", "Z"]

ALPHABETS: Dict[str, Dict[str, str]] = {
    "human": {"X": ABSENT, "Y": MISPLACED, "Z": CORRECT},
    "api": {"x": ABSENT, "y": MISPLACED, "g": CORRECT},
}


def validate_pattern(pattern: str) -> str:
    """
    Return `pattern` unchanged if it is a canonical 5-symbol pattern.

    Raises MalformedFeedback otherwise. Nothing is partially accepted: the
    whole string is checked before the caller gets to act on any symbol.
    """
    if not isinstance(pattern, str) or len(pattern) != WORD_LENGTH:
        raise MalformedFeedback(
            f"feedback must be {WORD_LENGTH} symbols, got {pattern!r}")
    bad = [ch for ch in pattern if ch not in SYMBOLS]
    if bad:
        raise MalformedFeedback(
            f"invalid feedback symbol(s) {bad} in {pattern!r}; expected one of {SYMBOLS}")
    return pattern


def normalize_feedback(raw: str, alphabet: str = "human") -> str:
    """
    Convert a feedback string from an input alphabet into canonical X/Y/Z.

    Examples:
      normalize_feedback("xyzzx")            -> "XYZZX"
      normalize_feedback("xygxx", "api")     -> "XYZXX"
    """
    try:
        table = ALPHABETS[alphabet]
    except KeyError as e:
        raise ValueError(
            f"Unknown feedback alphabet: {alphabet}. Available: {sorted(ALPHABETS)}") from e

    text = raw.strip()
    if alphabet == "human":
        text = text.upper()
    try:
        pattern = "".join(table[ch] for ch in text)
    except KeyError as e:
        raise MalformedFeedback(
            f"invalid feedback symbol {e.args[0]!r} in {raw!r} for alphabet {alphabet!r}") from None
    return validate_pattern(pattern)


def score(guess: str, answer: str) -> str:
    """
    Compute the canonical feedback pattern for `guess` against `answer`.

    Two passes: greens first, then yellows capped by the answer's remaining
    letter counts, so duplicates are scored the way the real game does.

    Examples:
      score("belle", "level") -> "XZYYY"
      score("lemon", "level") -> "ZZXXX"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError("Guess and answer must be the same length")

    pattern = [ABSENT] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = CORRECT
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = MISPLACED
            remaining[g] -= 1

    return "".join(pattern)
