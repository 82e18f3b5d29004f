"""
Error types raised across the package.

  - MalformedFeedback     : user feedback line is not WORD_LEN chars of '+', '-', '.'
  - VocabularyLoadFailure : word list missing, empty, or has a malformed line
  - SessionFinished       : feedback submitted after the session reached a terminal state
"""

from __future__ import annotations


class MalformedFeedback(ValueError):
    """Feedback input could not be turned into a legal feedback code."""


class VocabularyLoadFailure(Exception):
    """The vocabulary file cannot be used; fatal at startup."""

    def __init__(self, path, reason: str, line_no: int | None = None):
        self.path = str(path)
        self.reason = reason
        self.line_no = line_no
        where = self.path if line_no is None else f"{self.path}:{line_no}"
        super().__init__(f"{where}: {reason}")


class SessionFinished(RuntimeError):
    """The session is Solved or Exhausted and takes no more feedback."""
