"""
Minimax guess selection.

Idea:
  For every guess g in the vocabulary, bucket the CURRENT candidates by the
  feedback code g would produce. The score of g is its largest bucket, i.e.
  how many candidates could be left in the worst case. Lower is better.

Tie-break:
  A guess that is itself a candidate scores one less, since it might just be
  the answer. This is a heuristic: it can prefer a candidate over a
  non-candidate whose true worst case is smaller by exactly one.

Selection:
  Full scan in vocabulary order; only a strictly smaller score replaces the
  current best, so the first word seen wins exact ties. No pruning and no
  caching between rounds: cost is O(|vocabulary| * |candidates| * WORD_LEN).

Parallel mode:
  The vocabulary is cut into contiguous chunks; each worker returns its local
  (score, index). Reducing on (score, index) gives the same word as the
  serial scan no matter which worker finishes first.
"""

from __future__ import annotations
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import AbstractSet, List, Optional, Sequence, Tuple
import logging
import time

from tqdm import tqdm

from wordle_minimax.engine import Word, counts, encode
from .base import BaseSolver, register

log = logging.getLogger(__name__)


def guess_score(candidates: Sequence[Word], guess: Word,
                candidate_set: Optional[AbstractSet[Word]] = None) -> int:
    """Worst-case bucket size for `guess`, minus one if `guess` is a candidate."""
    if candidate_set is None:
        candidate_set = set(candidates)
    score = int(counts(candidates, guess).max())
    # Slightly prefer guesses that could also be the answer
    if guess in candidate_set:
        score -= 1
    return score


def _scan(candidates: Sequence[Word], guesses, offset: int = 0) -> Tuple[int, Optional[int]]:
    """
    Serial scan; returns (best_score, index_into_vocabulary).
    Module level so ProcessPoolExecutor can pickle it.
    """
    candidate_set = frozenset(candidates)
    best_score = len(candidates) + 1
    best_idx: Optional[int] = None
    for i, g in enumerate(guesses):
        score = guess_score(candidates, g, candidate_set)
        if score < best_score:
            best_score, best_idx = score, offset + i
    return best_score, best_idx


def _chunks(n: int, parts: int) -> List[Tuple[int, int]]:
    """Split range(n) into `parts` contiguous (start, stop) slices, in order."""
    parts = max(1, min(parts, n))
    size, extra = divmod(n, parts)
    out, start = [], 0
    for k in range(parts):
        stop = start + size + (1 if k < extra else 0)
        out.append((start, stop))
        start = stop
    return out


def _parallel_scan(candidates: Sequence[Word], vocabulary: Sequence[Word], *,
                   workers: int, progress: bool) -> Tuple[int, Optional[int]]:
    cands = list(candidates)
    results: List[Tuple[int, Optional[int]]] = []
    # More chunks than workers keeps the bar moving and balances load
    spans = _chunks(len(vocabulary), workers * 4)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_scan, cands, list(vocabulary[start:stop]), start)
            for start, stop in spans
        ]
        for fut in tqdm(as_completed(futures), total=len(futures), desc="Finding guess",
                        unit="chunk", ncols=80, leave=False, disable=not progress):
            results.append(fut.result())

    found = [r for r in results if r[1] is not None]
    if not found:
        return len(cands) + 1, None
    return min(found)


def best_guess(candidates: Sequence[Word], vocabulary: Sequence[Word], *,
               progress: bool = False, workers: int = 1) -> Word:
    """
    Return the vocabulary word whose worst-case remaining candidate count is
    smallest (with the candidate tie-break above).

    Raises ValueError on an empty vocabulary.
    """
    if not vocabulary:
        raise ValueError("vocabulary must not be empty")

    t0 = time.perf_counter()
    if workers > 1 and len(vocabulary) > 1:
        score, idx = _parallel_scan(candidates, vocabulary, workers=workers, progress=progress)
    else:
        iterator = tqdm(vocabulary, desc="Finding guess", unit="word", ncols=80,
                        leave=False, disable=not progress)
        score, idx = _scan(candidates, iterator)

    # A guess can never leave more than len(candidates), so idx is always set
    if idx is None:
        raise RuntimeError("no guess scored below len(candidates) + 1")
    guess = vocabulary[idx]
    log.debug("best guess %s (score=%d) over %d words x %d candidates in %.2fs",
              encode(guess), score, len(vocabulary), len(candidates),
              time.perf_counter() - t0)
    return guess


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax (smallest worst-case bucket)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Word:
        candidates: List[Word] = state["candidates"]
        vocabulary: List[Word] = state.get("vocabulary") or self.vocabulary
        return best_guess(candidates, vocabulary, progress=self.progress, workers=self.workers)
