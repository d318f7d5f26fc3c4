"""
Word checks.

A word is well-formed iff it is a string of exactly five a-z letters once
stripped and lowercased.
"""

from __future__ import annotations

import string

from .errors import WordLengthMismatch
from .feedback import WORD_LENGTH

ALPHABET = string.ascii_lowercase


def is_word(word: str) -> bool:
    """True if `word` (already normalized) is five lowercase a-z letters."""
    return len(word) == WORD_LENGTH and all(ch in ALPHABET for ch in word)


def normalize_word(word: str) -> str:
    """
    Strip and lowercase `word`, raising WordLengthMismatch if the result is
    not five a-z letters.
    """
    if not isinstance(word, str):
        raise WordLengthMismatch(f"expected a string, got {type(word).__name__}")
    w = word.strip().lower()
    if not is_word(w):
        raise WordLengthMismatch(f"{word!r} is not a {WORD_LENGTH}-letter word")
    return w
