"""
Download past Wordle answers and write them as a word list.

Usage:
    python -m script.fetch_answers --out words/answers_5.txt
    # or alphabetically sorted:
    python -m script.fetch_answers --sort --out words/answers_5.txt

The written file can be passed straight to `python -m apps.cli.play`.
"""

import argparse
import logging

from wordlehint.datasets import parse_words, write_lines
from wordlehint.datasets.fetch import URL, fetch_answers


def main():
    ap = argparse.ArgumentParser(description="Fetch past Wordle answers into a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="words/answers_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    answers, rejected = parse_words(fetch_answers(args.url))
    if args.sort:
        answers = sorted(set(answers))

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} answers -> {args.out}" + (f" ({rejected} skipped)" if rejected else ""))


if __name__ == "__main__":
    main()
