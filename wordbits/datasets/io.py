from __future__ import annotations
import logging
from enum import Enum
from pathlib import Path
from typing import List, Tuple

from wordbits.errors import LoadError, ParseError
from wordbits.model import Word, parse_word

log = logging.getLogger(__name__)

# Default location of the bundled word lists.
DEFAULT_DATA_DIR = Path("data")


class Lang(Enum):
    """Languages with a default (guess list, solution list) file pair."""
    EN = "en"
    DE = "de"

    @property
    def wordlist(self) -> str:
        return f"{self.value}_words.txt"

    @property
    def sollist(self) -> str:
        return f"{self.value}_sols.txt"

    def paths(self, data_dir: Path | str = DEFAULT_DATA_DIR) -> Tuple[Path, Path]:
        """(guess list path, solution list path) under `data_dir`."""
        d = Path(data_dir)
        return d / self.wordlist, d / self.sollist


def load_wordlist(p: Path | str) -> List[Word]:
    """
    Load one word per line (surrounding whitespace ignored).

    Every line must be UTF-8 and parse; the first bad line (blank lines
    included) raises LoadError(kind="parse") with its 1-based line number.
    An unreadable file raises LoadError(kind="io").
    """
    try:
        lines = Path(p).read_bytes().splitlines()
    except OSError as e:
        raise LoadError(LoadError.IO, str(p), detail=str(e)) from e

    words: List[Word] = []
    for line_no, raw in enumerate(lines, start=1):
        # decode per line so a bad byte sequence still reports its line
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise LoadError(LoadError.PARSE, str(p), line_no, "invalid UTF-8") from e
        try:
            words.append(parse_word(text.strip()))
        except ParseError as e:
            raise LoadError(LoadError.PARSE, str(p), line_no, e.reason) from e

    log.info("loaded %d words from %s", len(words), p)
    return words
