from .word import Word, fold, fold_char
from .scoring import score
from .validation import check_length, check_repeat, check_membership

__all__ = [
    "Word",
    "fold",
    "fold_char",
    "score",
    "check_length",
    "check_repeat",
    "check_membership",
]
