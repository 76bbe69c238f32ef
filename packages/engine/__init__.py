from .constraints import WILDCARD, Constraints, SetKind, filter_candidates, word_mask
from .validation import InvalidPosition, check_position, letters_from_text, normalize_letter, parse_pattern
from .session import ConstraintEngine

__all__ = [
    "WILDCARD", "Constraints", "SetKind", "filter_candidates", "word_mask",
    "InvalidPosition", "check_position", "letters_from_text", "normalize_letter",
    "parse_pattern", "ConstraintEngine",
]
