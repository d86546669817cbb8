"""
Lightweight guess validation.

A typed guess is acceptable iff:
  - it parses as a Word (exact length, ASCII letters only)
  - it exists in the provided `allowed` collection

Case and surrounding whitespace are ignored.
"""

from __future__ import annotations
from typing import Collection, Optional

from wordbits.errors import ParseError
from wordbits.model import Word, parse_word


def validate_guess(text: str, allowed: Collection[Word]) -> Optional[Word]:
    """
    Return the parsed Word if `text` is a valid guess, else None.

    Notes:
      - Membership is checked with `in`; pass a set when calling this in a
        loop over a large list.
    """
    if not isinstance(text, str):
        return None
    try:
        word = parse_word(text.strip())
    except ParseError:
        return None
    return word if word in allowed else None
