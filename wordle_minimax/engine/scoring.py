"""
Feedback classification for a single (guess, answer) pair.

Digits per position:
  - 2 : exact match (right letter, right place)
  - 1 : present elsewhere
  - 0 : absent (or present fewer times than guessed)

The code is the base-3 number of those digits, first position most
significant, so it lies in [0, NUM_CODES).

Duplicate letters (canonical game rule, two passes):
  1) Exact matches are resolved first; each consumes one copy of its letter
     from a 26-slot count of the answer's letters.
  2) Remaining positions, left to right, get a 1 only while the count for
     that letter is still positive, consuming one copy each time.

  classify("aabcd", "aefgh") -> digits 2,0,0,0,0
  classify("eerie", "there") -> digits 1,0,1,0,2
"""

from __future__ import annotations
from .codec import WORD_LEN, Word

NUM_CODES = 3 ** WORD_LEN
ALL_EXACT = NUM_CODES - 1

EXACT, PRESENT, ABSENT = 2, 1, 0

_A = ord("a")


def classify(guess: Word, answer: Word) -> int:
    """Feedback code the game would show for `guess` when the answer is `answer`."""
    remaining = [0] * 26
    exact = [False] * WORD_LEN

    # Pass 1: exact matches consume first; everything else goes in the bag
    for i in range(WORD_LEN):
        if guess[i] == answer[i]:
            exact[i] = True
        else:
            remaining[ord(answer[i]) - _A] += 1

    # Pass 2: accumulate digits, misplaced only while copies remain
    code = 0
    for i in range(WORD_LEN):
        code *= 3
        if exact[i]:
            code += EXACT
            continue
        slot = ord(guess[i]) - _A
        if remaining[slot] > 0:
            code += PRESENT
            remaining[slot] -= 1

    return code
