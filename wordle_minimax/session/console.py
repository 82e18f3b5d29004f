"""
Console transcript for a SolvingSession.

Per round:
    <n> possible words
    Enter pattern: <guess>
    Enter result (+/-/.): <user types feedback>

Malformed feedback is reported and the same round is prompted again.
At the end prints "Found word: <w>" or "No words found".
"""

from __future__ import annotations
from typing import Callable

from wordle_minimax.engine import encode, parse_feedback
from wordle_minimax.errors import MalformedFeedback
from .machine import Active, Exhausted, Solved, SolvingSession, State

PROMPT = "Enter result (+/-/.): "


def play(session: SolvingSession, *,
         read_line: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> State:
    """
    Drive `session` until it finishes or input runs out (EOF).
    Returns the last state reached.
    """
    while isinstance(session.state, Active):
        state = session.state
        write(f"{len(state.candidates)} possible words")
        write(f"Enter pattern: {encode(state.guess)}")

        while True:
            try:
                line = read_line(PROMPT)
            except EOFError:
                return session.state
            try:
                code = parse_feedback(line)
            except MalformedFeedback as e:
                write(f"Invalid result: {e}")
                continue
            break

        session.submit(code)

    if isinstance(session.state, Solved):
        write(f"Found word: {encode(session.state.word)}")
    elif isinstance(session.state, Exhausted):
        write("No words found")
    return session.state
