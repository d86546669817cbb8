from .mask import Outcome, FeedbackMask, compare, is_consistent
from .scoring import (information_bits, information_bits_with_solutions, count_mask_hits,
                      narrow, guess_information)
from .constraints import filter_candidates
from .validation import validate_guess

__all__ = [
    "Outcome", "FeedbackMask", "compare", "is_consistent",
    "information_bits", "information_bits_with_solutions", "count_mask_hits",
    "narrow", "guess_information", "filter_candidates", "validate_guess",
]
