from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from wordlehint.engine import WordLengthMismatch, normalize_word

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDLIST = DATA_DIR / "default_5.txt"


@dataclass
class WordList:
    """A loaded word list plus where it came from."""
    words: List[str]     # lowercase 5-letter words, file order, duplicates kept
    text: str            # raw file text (the letter ranking is built from it)
    source: str          # path read, or the default list's path
    rejected: int = 0    # non-blank lines dropped for not being 5 letters


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def parse_words(lines: Iterable[str], *, strict: bool = False) -> tuple[List[str], int]:
    """
    Normalize lines into words, skipping blanks.

    Lines that are not 5 letters are dropped and counted, or raise
    WordLengthMismatch when `strict`.
    """
    words: List[str] = []
    rejected = 0
    for ln in lines:
        if not ln.strip():
            continue
        try:
            words.append(normalize_word(ln))
        except WordLengthMismatch:
            if strict:
                raise
            rejected += 1
    return words, rejected


def load_words(path: Path | str | None = None, *, strict: bool = False) -> WordList:
    """
    Load a word list, falling back to the packaged default.

    A missing `path` (None, or a file that does not exist) loads
    DEFAULT_WORDLIST instead and logs where the words came from.
    """
    p = Path(path) if path else None
    if p is None or not p.exists():
        if p is not None:
            log.warning("word list %s not found; using the default list", p)
        else:
            log.info("no word list given; using the default list")
        p = DEFAULT_WORDLIST

    text = p.read_text(encoding="utf-8")
    words, rejected = parse_words(text.splitlines(), strict=strict)
    if rejected:
        log.warning("skipped %d line(s) in %s that are not 5-letter words", rejected, p)
    log.debug("loaded %d words from %s", len(words), p)
    return WordList(words=words, text=text, source=str(p), rejected=rejected)
