"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the solutions list)
  - a history of FeedbackMasks observed so far

Return:
  - words that are consistent with ALL masks, order preserved.

This is the step that turns feedback into a shrinking candidate set.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Sequence

from wordbits.model import Word
from .mask import FeedbackMask
from .scoring import narrow

log = logging.getLogger(__name__)


def filter_candidates(pool: Sequence[Word], history: Iterable[FeedbackMask]) -> List[Word]:
    """
    Apply every mask in `history` in turn.

    Raises ValueError (from information_bits) if a mask wipes out the pool,
    which means the history contradicts itself.
    """
    out: List[Word] = list(pool)
    for mask in history:
        out, bits = narrow(out, mask)
        log.debug("%s %s -> %d left (%.3f bits)", mask.guess, mask.pattern, len(out), bits)
    return out
