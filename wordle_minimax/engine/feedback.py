"""
Feedback codes at the user boundary.

Users type one character per position:
  '+' : exact match      (digit 2)
  '-' : present elsewhere (digit 1)
  '.' : absent           (digit 0)

  parse_feedback("...++") -> 8
  format_feedback(8)      -> "...++"
"""

from __future__ import annotations
from typing import Tuple

from wordle_minimax.errors import MalformedFeedback
from .codec import WORD_LEN
from .scoring import NUM_CODES

SYMBOLS = {"+": 2, "-": 1, ".": 0}
_CHARS = {v: k for k, v in SYMBOLS.items()}


def parse_feedback(line: str) -> int:
    """
    Parse a feedback line into a code. Never coerces: wrong length or any
    character outside '+-.' raises MalformedFeedback.
    """
    s = line.strip()
    if len(s) != WORD_LEN:
        raise MalformedFeedback(
            f"feedback must be {WORD_LEN} characters of '+', '-', '.'; got {line!r}")

    code = 0
    for ch in s:
        try:
            digit = SYMBOLS[ch]
        except KeyError:
            raise MalformedFeedback(f"invalid feedback character {ch!r} in {line!r}") from None
        code = code * 3 + digit
    return code


def digits(code: int) -> Tuple[int, ...]:
    """Base-3 digits of `code`, first position first."""
    if not 0 <= code < NUM_CODES:
        raise ValueError(f"feedback code out of range: {code}")
    out = []
    for _ in range(WORD_LEN):
        code, d = divmod(code, 3)
        out.append(d)
    return tuple(reversed(out))


def format_feedback(code: int) -> str:
    return "".join(_CHARS[d] for d in digits(code))
