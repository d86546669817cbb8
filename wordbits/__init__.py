from .errors import ParseError, LoadError
from .model import WORD_LEN, Letter, Word, parse_word
from .engine import (Outcome, FeedbackMask, compare, is_consistent, information_bits,
                     narrow, guess_information)
from .search import find_best_guess, find_best_guess_set

__all__ = [
    "ParseError", "LoadError", "WORD_LEN", "Letter", "Word", "parse_word",
    "Outcome", "FeedbackMask", "compare", "is_consistent", "information_bits",
    "narrow", "guess_information", "find_best_guess", "find_best_guess_set",
]
