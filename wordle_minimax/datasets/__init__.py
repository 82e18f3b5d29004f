from .validator import validate_vocabulary, pretty_summary
from .vocabulary import load_vocabulary

__all__ = ["validate_vocabulary", "pretty_summary", "load_vocabulary"]
