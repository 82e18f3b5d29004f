"""
Solving session state machine.

States:
  Active(candidates, guess) : waiting for feedback on `guess`
  Solved(word)              : exactly one candidate left
  Exhausted()               : no candidate left; earlier feedback contradicts
                              the vocabulary (or the answer is not in it)

Round transition from Active, given an observed feedback code:
  1) new = candidates that would produce that code against the current guess
  2) empty     -> Exhausted
  3) one word  -> Solved(word)
  4) otherwise -> Active(new, solver's next guess)

The candidate list is replaced wholesale each round and never grows.
Terminal states take no more feedback (SessionFinished).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union
import logging

from wordle_minimax.engine import (
    NUM_CODES, Word, decode, encode, format_feedback, groups,
)
from wordle_minimax.errors import MalformedFeedback, SessionFinished
from wordle_minimax.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)

# Minimax result against the full vocabulary; fixed, so it is not recomputed
OPENING_GUESS = "raise"


@dataclass(frozen=True)
class Active:
    candidates: Tuple[Word, ...]
    guess: Word


@dataclass(frozen=True)
class Solved:
    word: Word


@dataclass(frozen=True)
class Exhausted:
    pass


State = Union[Active, Solved, Exhausted]


def is_terminal(state: State) -> bool:
    return isinstance(state, (Solved, Exhausted))


class SolvingSession:
    """
    Holds the candidate set for one interactive game and advances it one
    round per `submit(code)`.

    Args:
      vocabulary : guess vocabulary, also the initial answer set
      opening    : first guess (text or Word); defaults to OPENING_GUESS
      solver     : guess optimizer; defaults to the registered "minimax"
    """

    def __init__(self, vocabulary: Sequence[Word], *,
                 opening: Union[str, Word] = OPENING_GUESS,
                 solver: Optional[BaseSolver] = None):
        if not vocabulary:
            raise ValueError("vocabulary must not be empty")
        # dedupe, keeping first-seen order
        self.vocabulary: Tuple[Word, ...] = tuple(dict.fromkeys(tuple(w) for w in vocabulary))
        self.solver = solver or create_solver("minimax")
        self.solver.reset(vocabulary=list(self.vocabulary))

        first = decode(opening) if isinstance(opening, str) else tuple(opening)
        self.state: State = Active(self.vocabulary, first)
        self.round = 1
        self.history: List[Tuple[Word, int]] = []

    @property
    def finished(self) -> bool:
        return is_terminal(self.state)

    def submit(self, code: int) -> State:
        """
        Apply the feedback observed for the current guess and return the new
        state.
        """
        state = self.state
        if not isinstance(state, Active):
            raise SessionFinished(f"session already finished: {state}")
        if not isinstance(code, int) or not 0 <= code < NUM_CODES:
            raise MalformedFeedback(f"feedback code out of range: {code!r}")

        self.history.append((state.guess, code))
        self.round += 1
        remaining = tuple(groups(state.candidates, state.guess)[code])
        log.debug("round %d: %s %s -> %d of %d candidates remain",
                  self.round - 1, encode(state.guess), format_feedback(code),
                  len(remaining), len(state.candidates))

        if not remaining:
            self.state = Exhausted()
        elif len(remaining) == 1:
            self.state = Solved(remaining[0])
        else:
            guess = self.solver.next_guess({
                "round": self.round,
                "candidates": list(remaining),
                "vocabulary": list(self.vocabulary),
            })
            self.state = Active(remaining, guess)

        if self.finished:
            log.debug("session finished in round %d: %s", self.round, self.state)
        return self.state
