"""
Information scoring and pool narrowing.

Bits of information for a single mask observation:
    bits = log2(old_count) - log2(new_count)
i.e. how many halvings it takes to go from the old pool to the survivors.
A survivor count of zero means a mask eliminated every word, including the
one that produced it; that is an upstream bug, so it raises instead of
returning inf.
"""

from __future__ import annotations
from math import log2
from typing import Iterable, List, Sequence, Tuple

from wordbits.model import Word
from .mask import FeedbackMask, is_consistent


def information_bits(old_count: int, new_count: int) -> float:
    """
    Examples:
      information_bits(16, 4) -> 2.0
      information_bits(32, 1) -> 5.0
    """
    if new_count < 1 or old_count < 1:
        raise ValueError(
            f"information_bits needs positive counts; got old={old_count}, new={new_count}")
    return log2(old_count) - log2(new_count)


def information_bits_with_solutions(old_count: int, new_count: int, solutions: int) -> float:
    """information_bits() additionally discounted by log2(solutions)."""
    if solutions < 1:
        raise ValueError(f"solutions must be positive; got {solutions}")
    return information_bits(old_count, new_count) - log2(solutions)


def count_mask_hits(pool: Iterable[Word], mask: FeedbackMask) -> int:
    """Number of words in `pool` consistent with `mask`."""
    _ok = is_consistent
    return sum(1 for w in pool if _ok(mask, w))


def narrow(pool: Sequence[Word], mask: FeedbackMask) -> Tuple[List[Word], float]:
    """
    Keep only the words consistent with `mask`, in their original order.

    Returns (survivors, bits_gained). The input is left untouched; callers
    rebind their pool to the survivors, so a removed word never comes back.
    """
    _ok = is_consistent
    survivors = [w for w in pool if _ok(mask, w)]
    return survivors, information_bits(len(pool), len(survivors))


def guess_information(pool: Sequence[Word], mask: FeedbackMask) -> float:
    """Bits `mask` would yield on `pool`, without building the survivor list."""
    return information_bits(len(pool), count_mask_hits(pool, mask))
