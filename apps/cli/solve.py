# apps/cli/solve.py
"""
CLI entry point for the interactive minimax solver.

This script:
  1) Validates the word list (prints count + SHA) and loads it.
  2) Starts a session with the fixed opening guess.
  3) Each round shows the guess to play, reads the observed feedback
     ('+' exact, '-' elsewhere, '.' absent) and narrows the candidates
     until one word is left or none are.

Usage:
    python -m apps.cli.solve --words dictionaries/wordle.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordle_minimax.datasets import load_vocabulary, validate_vocabulary, pretty_summary
from wordle_minimax.errors import VocabularyLoadFailure
from wordle_minimax.session import OPENING_GUESS, SolvingSession, play
from wordle_minimax.solvers import REGISTRY, create_solver, get_solver_ids

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, load the vocabulary and run one interactive session.
    Returns a process exit status.
    """
    solver_choices = ", ".join(
        f"{sid} ({REGISTRY[sid].name} v{REGISTRY[sid].version})" for sid in get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle-minimax: interactive guess recommender")
    ap.add_argument("--words", default="dictionaries/wordle.txt",
                    help="path to the word list (answers and allowed guesses)")
    ap.add_argument("--opening", default=OPENING_GUESS,
                    help="first guess to play (skips the first, most expensive search)")
    ap.add_argument("--solver", default="minimax",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--workers", type=int, default=1,
                    help="worker processes for the guess search (1 = serial)")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="progress bar while searching (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # 1) Load; any problem with the list is fatal. Summary only once it loads.
    try:
        vocabulary = load_vocabulary(args.words)
    except VocabularyLoadFailure as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(pretty_summary(validate_vocabulary(args.words)))

    # 2) Solver by id
    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    try:
        solver = create_solver(args.solver, progress=progress, workers=args.workers)
        log.debug("solver %s (%s v%s), workers=%d", solver.id, solver.name, solver.version, solver.workers)
        session = SolvingSession(vocabulary, opening=args.opening, solver=solver)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Interactive rounds
    try:
        play(session)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
