"""
Vocabulary loading.

File format: one lowercase WORD_LEN-letter word per line, no header, no blank
lines. The same list serves as both the answer pool and the guess vocabulary.

Any problem is fatal at startup and raised as VocabularyLoadFailure:
  - file missing or unreadable
  - file has no words
  - a line that is blank, the wrong length, or not lowercase a-z

Repeated words are dropped (first occurrence kept, order preserved).
CR/LF line endings are accepted.
"""

from __future__ import annotations
from pathlib import Path
from typing import List
import logging

from wordle_minimax.engine import WORD_LEN, Word, decode
from wordle_minimax.engine.codec import is_word_text
from wordle_minimax.errors import VocabularyLoadFailure

log = logging.getLogger(__name__)


def load_vocabulary(path: Path | str) -> List[Word]:
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        raise VocabularyLoadFailure(path, "file not found") from None
    except (OSError, UnicodeDecodeError) as e:
        raise VocabularyLoadFailure(path, f"cannot read file ({e})") from e

    # A single trailing newline is normal; splitlines() already drops it
    if not lines:
        raise VocabularyLoadFailure(path, "file contains no words")

    words: List[Word] = []
    seen = set()
    dupes = 0
    for line_no, raw in enumerate(lines, start=1):
        if not is_word_text(raw):
            raise VocabularyLoadFailure(
                path, f"expected {WORD_LEN} lowercase letters, got {raw!r}", line_no)
        w = decode(raw)
        # candidates must be distinct; keep first occurrence
        if w in seen:
            dupes += 1
            continue
        seen.add(w)
        words.append(w)

    if dupes:
        log.warning("%s: dropped %d duplicate line(s)", path, dupes)
    log.debug("loaded %d words from %s", len(words), path)
    return words
