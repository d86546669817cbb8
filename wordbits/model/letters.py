"""
Letter/Word model.

A Word is a fixed-length, immutable sequence of WORD_LEN Letters drawn from
the 26-symbol ASCII alphabet. Parsing is case-insensitive; the canonical
text form is upper case.

Examples:
  parse_word("crane")  -> Word(CRANE)
  parse_word("ab cd")  -> ParseError (space is not a letter)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Tuple

from wordbits.errors import ParseError

# Single source of truth for word length.
WORD_LEN = 5


class Letter(IntEnum):
    """One of the 26 ASCII letters, A=0 .. Z=25."""
    (A, B, C, D, E, F, G, H, I, J, K, L, M,
     N, O, P, Q, R, S, T, U, V, W, X, Y, Z) = range(26)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_char(cls, ch: str) -> "Letter":
        """Case-insensitive decode of a single ASCII alphabetic character."""
        if len(ch) != 1 or not ("a" <= ch <= "z" or "A" <= ch <= "Z"):
            raise ParseError(ch, "not an ASCII letter")
        return cls[ch.upper()]


@dataclass(frozen=True)
class Word:
    """An ordered, immutable tuple of exactly WORD_LEN letters."""
    letters: Tuple[Letter, ...]

    def __post_init__(self):
        try:
            letters = tuple(Letter(l) for l in self.letters)
        except ValueError as e:
            raise ParseError(repr(self.letters), "not a sequence of Letters") from e
        if len(letters) != WORD_LEN:
            raise ParseError("".join(l.name for l in letters),
                             f"expected {WORD_LEN} letters, got {len(letters)}")
        object.__setattr__(self, "letters", letters)

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __getitem__(self, i: int) -> Letter:
        return self.letters[i]

    def __len__(self) -> int:
        return WORD_LEN

    def __str__(self) -> str:
        return "".join(l.name for l in self.letters)

    def __repr__(self) -> str:
        return f"Word({self})"


def parse_word(text: str) -> Word:
    """
    Decode `text` into a Word.

    Raises ParseError if the text is not exactly WORD_LEN characters long or
    contains anything other than ASCII letters. Whitespace is NOT stripped.
    """
    if len(text) != WORD_LEN:
        raise ParseError(text, f"expected {WORD_LEN} letters, got {len(text)}")
    try:
        return Word(tuple(Letter.from_char(ch) for ch in text))
    except ParseError as e:
        raise ParseError(text, f"bad character {e.text!r}") from e


def parse_words(lines: Iterable[str]) -> List[Word]:
    return [parse_word(ln) for ln in lines]
