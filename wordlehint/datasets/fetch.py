"""
Download past Wordle answers to use as a word list.

- Downloads the page listing historical answers.
- Extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Lowercases and de-duplicates while keeping calendar order.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup

log = logging.getLogger(__name__)

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> List[str]:
    """Answers found in the page's visible text, in page order, no repeats."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL, timeout: float = 30) -> List[str]:
    """
    GET `url` and parse it. HTTP errors propagate as requests exceptions.
    """
    log.info("fetching answers from %s", url)
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    answers = parse_answers(r.text)
    log.info("found %d answers", len(answers))
    return answers
