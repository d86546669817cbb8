"""
Feedback masks for a single (guess, answer) pair, and the reverse check.

Conventions:
  - MATCH   : 'G' / 🟩 = letter in the correct position
  - PARTIAL : 'Y' / 🟨 = letter present, not confirmed at this position
  - MISS    : '-' / ⬜ = letter absent (or present fewer times than guessed)

compare() is the canonical two-pass algorithm:
  1) Match pass marks every exact-position hit and consumes that answer slot.
  2) Partial pass, for each non-matched guess position, consumes the FIRST
     unconsumed answer slot holding the same letter.
Each answer slot is consumed at most once, so a second duplicate in the
guess becomes a Miss once the answer's copies are used up.

is_consistent() runs the same consumption discipline in reverse, with the
candidate playing the hidden answer, without building a full mask. It is the
hot inner loop of narrowing and search.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple

from wordbits.errors import ParseError
from wordbits.model import WORD_LEN, Letter, Word


class Outcome(IntEnum):
    MISS = 0
    PARTIAL = 1
    MATCH = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def code(self) -> str:
        return _CODES[self]


_SYMBOLS = {Outcome.MISS: "⬜", Outcome.PARTIAL: "\U0001F7E8", Outcome.MATCH: "\U0001F7E9"}
_CODES = {Outcome.MISS: "-", Outcome.PARTIAL: "Y", Outcome.MATCH: "G"}
_FROM_CODE = {"-": Outcome.MISS, ".": Outcome.MISS, "X": Outcome.MISS,
              "Y": Outcome.PARTIAL, "G": Outcome.MATCH}


@dataclass(frozen=True)
class FeedbackMask:
    """A guess paired with one Outcome per position."""
    guess: Word
    outcomes: Tuple[Outcome, ...]

    def __post_init__(self):
        outcomes = tuple(Outcome(o) for o in self.outcomes)
        if len(outcomes) != WORD_LEN:
            raise ValueError(f"expected {WORD_LEN} outcomes, got {len(outcomes)}")
        object.__setattr__(self, "outcomes", outcomes)

    def __iter__(self) -> Iterator[Tuple[Letter, Outcome]]:
        return zip(self.guess, self.outcomes)

    def __str__(self) -> str:
        return "".join(o.symbol for o in self.outcomes)

    @property
    def pattern(self) -> str:
        """ASCII form, e.g. 'Y-Y--'."""
        return "".join(o.code for o in self.outcomes)

    @property
    def is_solved(self) -> bool:
        return all(o is Outcome.MATCH for o in self.outcomes)

    @classmethod
    def from_pattern(cls, guess: Word, pattern: str) -> "FeedbackMask":
        """
        Rebuild a mask from typed feedback ('G', 'Y', and '-'/'.'/'X' for a miss,
        case-insensitive). Raises ParseError on a bad length or symbol.
        """
        if len(pattern) != WORD_LEN:
            raise ParseError(pattern, f"expected {WORD_LEN} feedback symbols")
        try:
            outcomes = tuple(_FROM_CODE[ch.upper()] for ch in pattern)
        except KeyError as e:
            raise ParseError(pattern, f"unknown feedback symbol {e.args[0]!r}") from e
        return cls(guess, outcomes)


def compare(guess: Word, answer: Word) -> FeedbackMask:
    """
    Compute the feedback mask for `guess` against `answer`.

    Examples:
      compare(SPEED, ARISE).pattern -> "Y-Y--"
      compare(SPEED, ERASE).pattern -> "Y-YY-"
      compare(CRANE, CRANE).pattern -> "GGGGG"
    """
    g = guess.letters
    a = answer.letters
    consumed = [False] * WORD_LEN
    mask = [Outcome.MISS] * WORD_LEN

    # Pass 1: exact-position matches consume their answer slot.
    for i in range(WORD_LEN):
        if g[i] == a[i]:
            consumed[i] = True
            mask[i] = Outcome.MATCH

    # Pass 2: partials take the first unconsumed occurrence only.
    for i in range(WORD_LEN):
        if mask[i] is Outcome.MATCH:
            continue
        for j in range(WORD_LEN):
            if not consumed[j] and g[i] == a[j]:
                consumed[j] = True
                mask[i] = Outcome.PARTIAL
                break

    return FeedbackMask(guess, tuple(mask))


def is_consistent(mask: FeedbackMask, candidate: Word) -> bool:
    """
    True iff `candidate`, taken as the hidden answer, could have produced
    `mask` for mask.guess. Pass order (match, partial, miss) matters: each
    pass sees the slots consumed by the passes before it.
    """
    g = mask.guess.letters
    out = mask.outcomes
    w = candidate.letters
    consumed = [False] * WORD_LEN

    for i in range(WORD_LEN):
        if out[i] is Outcome.MATCH:
            if w[i] != g[i]:
                return False
            consumed[i] = True

    for i in range(WORD_LEN):
        if out[i] is Outcome.PARTIAL:
            for j in range(WORD_LEN):
                if j != i and not consumed[j] and w[j] == g[i]:
                    consumed[j] = True
                    break
            else:
                return False

    for i in range(WORD_LEN):
        if out[i] is Outcome.MISS:
            for j in range(WORD_LEN):
                if not consumed[j] and w[j] == g[i]:
                    return False

    return True
