from .codec import WORD_LEN, Word, decode, encode
from .scoring import NUM_CODES, ALL_EXACT, classify
from .feedback import parse_feedback, format_feedback
from .partition import groups, counts, filter_candidates

__all__ = [
    "WORD_LEN", "Word", "decode", "encode",
    "NUM_CODES", "ALL_EXACT", "classify",
    "parse_feedback", "format_feedback",
    "groups", "counts", "filter_candidates",
]
