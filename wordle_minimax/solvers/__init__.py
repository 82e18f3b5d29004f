from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

from . import minimax  # noqa: F401
from .minimax import best_guess, guess_score


def create_solver(solver_id: str, **options) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    `options` (progress, workers) are passed to the constructor.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids",
           "best_guess", "guess_score"]
