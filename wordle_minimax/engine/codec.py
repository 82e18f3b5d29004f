"""
Word codec: text <-> fixed-length letter tuple.

A Word is a tuple of exactly WORD_LEN lowercase letters. Tuples are immutable
and hashable, so words can be copied, compared and put in sets freely.

  decode("crane") -> ('c', 'r', 'a', 'n', 'e')
  encode(('c', 'r', 'a', 'n', 'e')) -> "crane"
"""

from __future__ import annotations
from typing import Tuple

WORD_LEN = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Type alias; always exactly WORD_LEN entries
Word = Tuple[str, ...]


def is_word_text(text: str) -> bool:
    """True if `text` is exactly WORD_LEN lowercase a-z letters."""
    return len(text) == WORD_LEN and all(ch in ALPHABET for ch in text)


def decode(text: str) -> Word:
    """
    Turn a line of text into a Word.

    Trailing newline / surrounding whitespace is ignored. Anything that is not
    exactly WORD_LEN lowercase letters raises ValueError; short input is never
    padded.
    """
    w = text.strip()
    if not is_word_text(w):
        raise ValueError(f"expected {WORD_LEN} lowercase letters, got {text!r}")
    return tuple(w)


def encode(word: Word) -> str:
    return "".join(word)
