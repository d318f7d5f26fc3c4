"""
Interactive solver: suggests a guess, you type the game's feedback.

Usage:
    python -m apps.cli.play [--words words.txt] [--solver letter_freq]

At each prompt type the five feedback symbols:
    Gray  : X
    Yellow: Y
    Green : Z
(or x/y/g with --alphabet api). ZZZZZ ends the game. `new` starts a new
game on the full word list; `quit` exits.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordlehint.datasets import load_words
from wordlehint.engine import SOLVED, EmptyCandidateSet, MalformedFeedback, normalize_feedback
from wordlehint.harness import Session
from wordlehint.solvers import create_solver, get_solver_ids

BANNER = """Wordle Solver
Type word into wordle when prompted
Type result into program in this format:
    Gray  : X
    Yellow: Y
    Green : Z"""

API_BANNER = """Wordle Solver
Type result into program in this format:
    Gray  : x
    Yellow: y
    Green : g"""

NEW_GAME = {"new", "reset"}
QUIT = {"quit", "exit", "q"}


def _make_solver(args):
    if args.solver == "expected_remaining":
        return create_solver(args.solver, opening=args.opening)
    if args.opening:
        raise SystemExit("--opening is only supported by the expected_remaining solver")
    return create_solver(args.solver)


def play(session: Session, alphabet: str = "human", inp=input, out=print) -> int:
    """
    Run the prompt loop until a game is solved or the user quits.

    Returns a process exit code: 0 solved/quit, 1 no candidates left.
    """
    while True:
        out(f"There are {len(session.candidates)} possible solutions")
        guess = session.suggest()
        out(f"Try: {guess}")

        while True:
            try:
                raw = inp("Result: ")
            except EOFError:
                out("")
                return 0
            cmd = raw.strip().lower()
            if cmd in QUIT:
                return 0
            if cmd in NEW_GAME:
                session.reset()
                out("New game.")
                break
            try:
                pattern = normalize_feedback(raw, alphabet)
                session.record(guess, pattern)
            except MalformedFeedback as e:
                out(f"Invalid result: {e}")
                continue
            except EmptyCandidateSet as e:
                out(f"No possible solutions: {e}")
                return 1
            if pattern == SOLVED:
                out("Yay!")
                return 0
            break


def main():
    ap = argparse.ArgumentParser(description="wordlehint: interactive Wordle assistant")
    ap.add_argument("--words", help="word list, one per line (default: packaged list)")
    ap.add_argument("--solver", default="letter_freq",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--alphabet", choices=["human", "api"], default="human",
                    help="feedback symbols: human=X/Y/Z, api=x/y/g")
    ap.add_argument("--opening", help="fixed first guess (expected_remaining only)")
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.solver not in get_solver_ids():
        raise SystemExit(f"Unknown solver id: {args.solver}. Available: {get_solver_ids()}")

    if args.words is None:
        print("Using default wordlist as none was specified")
    wl = load_words(args.words)
    print(f"Loaded {len(wl.words)} words")
    if not wl.words:
        raise SystemExit("word list is empty")

    session = Session(wl.words, _make_solver(args), wl.text)
    print(API_BANNER if args.alphabet == "api" else BANNER)
    sys.exit(play(session, args.alphabet))


if __name__ == "__main__":
    main()
