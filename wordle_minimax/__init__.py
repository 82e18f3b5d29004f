"""
wordle-minimax: interactive minimax guess recommender.

Subpackages:
  - engine   : word codec, feedback classification, candidate partitioning
  - solvers  : guess optimizers (registry + minimax)
  - session  : solving state machine and console transcript
  - datasets : vocabulary loading and validation
"""

__version__ = "1.0.0"
