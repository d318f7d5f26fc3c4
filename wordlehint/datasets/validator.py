"""
Word list validator.

What this module does:
- Validate a word list file (one word per line).
- Enforce formatting rules (a–z only, exactly 5 letters, no blank lines).
- Count duplicates (allowed: they are kept, but reported) and invalid lines.
- Compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordlehint.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordlehint.engine import WORD_LENGTH
from wordlehint.engine.validation import is_word


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words
    duplicates: int      # count - unique_count
    invalid_lines: int   # lines that are blank or not 5 a–z letters
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line, case-insensitive
      - must be a–z and exactly WORD_LENGTH letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().lower()
            if is_word(w):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def validate_wordlist(path: str) -> Dict:
    """
    Validate a word list file.

    Returns a JSON-serializable dict (see WordListReport). `passed` is strict:
    the file must exist, hold at least one word and have no invalid lines.
    Duplicates are reported but do not fail the check.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, 0, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s) (not {WORD_LENGTH} letters a–z)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        duplicates=len(words) - unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console output.

    Example:
        words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
