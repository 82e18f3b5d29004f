"""
Candidate partitioning: split a candidate set by the feedback code each
member would produce against one guess.

  groups(candidates, guess) -> NUM_CODES lists (empty ones included)
  counts(candidates, guess) -> NUM_CODES bucket sizes (numpy int array)

Both are pure. Every candidate lands in exactly one bucket and relative
order is preserved inside a bucket.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence

import numpy as np

from .codec import Word
from .scoring import NUM_CODES, classify


def groups(candidates: Iterable[Word], guess: Word) -> List[List[Word]]:
    buckets: List[List[Word]] = [[] for _ in range(NUM_CODES)]
    for ans in candidates:
        buckets[classify(guess, ans)].append(ans)
    return buckets


def counts(candidates: Sequence[Word], guess: Word) -> np.ndarray:
    """
    Bucket sizes only; cheaper than `groups` because no lists are built.
    Always length NUM_CODES, so `counts(...).max()` is the worst case.
    """
    # localize for speed
    _classify = classify
    codes = np.fromiter((_classify(guess, ans) for ans in candidates),
                        dtype=np.int64, count=len(candidates))
    return np.bincount(codes, minlength=NUM_CODES)


def filter_candidates(candidates: Iterable[Word], guess: Word, code: int) -> List[Word]:
    """Candidates consistent with seeing `code` after playing `guess`."""
    return [ans for ans in candidates if classify(guess, ans) == code]
