"""
Vocabulary validator.

What this module does:
- Check a word list against the file format (lowercase, a–z only, exact
  length WORD_LEN, one per line, no blanks).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Unlike load_vocabulary, this never raises on bad content, so the CLI can show
a summary of everything wrong before it refuses to start.

Typical use:
    from wordle_minimax.datasets import validate_vocabulary, pretty_summary
    rep = validate_vocabulary("dictionaries/wordle.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle_minimax.engine import WORD_LEN
from wordle_minimax.engine.codec import is_word_text


@dataclass
class VocabularyReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). A line is valid only if it is
    exactly WORD_LEN lowercase letters once the line ending is removed.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.rstrip("\r\n")
            if is_word_text(w):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def validate_vocabulary(path: str) -> Dict:
    """
    Validate a vocabulary file.

    Returns a JSON-serializable dict (VocabularyReport schema). `passed` is
    strict: the file exists, is non-empty and has no invalid lines.
    Duplicates are reported as an issue but do not fail validation.
    """
    p = Path(path)
    if not p.exists():
        rep = VocabularyReport(str(path), False, 0, 0, 0, "", False,
                               [f"vocabulary file not found: {path}"])
        return asdict(rep)

    try:
        words, invalid = _load_and_check(p)
        sha = _sha256_file(p)
    except (OSError, UnicodeDecodeError) as e:
        rep = VocabularyReport(str(p), True, 0, 0, 0, "", False,
                               [f"cannot read vocabulary file: {e}"])
        return asdict(rep)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("vocabulary contains 0 valid words")
    if invalid:
        issues.append(f"vocabulary has {invalid} invalid line(s) (need {WORD_LEN} lowercase letters)")
    if unique != len(words):
        issues.append("vocabulary contains duplicate lines")

    rep = VocabularyReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=sha,
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
