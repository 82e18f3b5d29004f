from .machine import (
    OPENING_GUESS, Active, Solved, Exhausted, SolvingSession, is_terminal,
)
from .console import play

__all__ = ["OPENING_GUESS", "Active", "Solved", "Exhausted", "SolvingSession",
           "is_terminal", "play"]
