from __future__ import annotations
from typing import Dict, List, Type

from wordle_minimax.engine import Word

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, *, progress: bool = False, workers: int = 1):
        self.vocabulary: List[Word] = []
        self.progress = bool(progress)
        self.workers = max(1, int(workers))

    def reset(self, *, vocabulary: List[Word]) -> None:
        self.vocabulary = list(vocabulary)

    def next_guess(self, state: dict) -> Word:
        """
        `state` carries at least:
          round      : 1-based round number
          candidates : answers still consistent with all feedback
          vocabulary : words allowed as guesses
        """
        raise NotImplementedError("Override in subclass")
