"""
CLI entry point for simulated solver runs.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the list and instantiates the requested solver.
  3) Plays one simulated game per answer with a live progress indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word list report, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordlehint.datasets import DEFAULT_WORDLIST, load_words, pretty_summary, validate_wordlist
from wordlehint.harness import WORDLE_MAX_TURNS, run_batch, summarize
from wordlehint.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlehint.solvers import create_solver, get_solver_ids


def _plain_progress(total: int, every: float = 1.0):
    """Text progress for non-terminals: one rewritten stderr line, throttled to `every` seconds."""
    def wrap(cases):
        t0 = time.monotonic()
        shown = None
        for done, ans in enumerate(cases, 1):
            yield ans
            t = time.monotonic()
            if shown is not None and t - shown < every and done != total:
                continue
            shown = t
            spent = t - t0
            eta = spent / done * (total - done)
            sys.stderr.write(f"\r{_progress_label(done, total)} | {spent:6.1f}s spent | ~{eta:5.1f}s left")
            sys.stderr.flush()
        sys.stderr.write("\n")
    return wrap


def _progress_label(done: int, total: int) -> str:
    return f"game {done}/{total} ({100.0 * done / max(1, total):5.1f}%)"


def main():
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordlehint: run simulated solver games")
    ap.add_argument("--solver", default="letter_freq",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--words", default=str(DEFAULT_WORDLIST),
                    help="word list; every word is played as a hidden answer")
    ap.add_argument("--sample", type=int, help="play only this many answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS)
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        raise SystemExit(f"word list not found: {args.words}")

    # 2) Load (lowercased, non-words skipped)
    wl = load_words(args.words)
    words = wl.words

    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(str(e))

    # 3) Choose cases (deterministic sample by seed)
    cases = list(words)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    progress = None
    if mode == "bar":
        progress = lambda it: tqdm(it, ncols=80, desc=solver.id, unit="game")  # noqa: E731
    elif mode == "plain":
        progress = _plain_progress(len(cases))

    # 5) Run
    results = run_batch(solver, cases, words=words, max_turns=args.max_turns, progress=progress,
                        text=wl.text)
    summary = summarize(results)
    print(f"{solver.id}: solved {summary['solved']}/{summary['games']}"
          f" | mean guesses {summary['mean_guesses'] or 0:.3f}")

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
