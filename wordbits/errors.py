"""
Error kinds shared by the core and its collaborators.

- ParseError: text could not be decoded into a Letter/Word. Raised by the
  model layer; always recoverable by the caller.
- LoadError:  a word list could not be ingested, either because the file
  could not be read ("io") or because one of its lines failed to parse
  ("parse"). Only the datasets layer raises this; the engine never does.
"""

from __future__ import annotations
from typing import Optional


class ParseError(ValueError):
    """Raised when text cannot be decoded into a Letter or a Word."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"cannot parse {text!r}: {reason}")


class LoadError(Exception):
    """
    Raised while ingesting a word list.

    The underlying OSError, UnicodeDecodeError or ParseError is chained as __cause__.
    """

    IO = "io"
    PARSE = "parse"

    def __init__(self, kind: str, path: str, line_no: Optional[int] = None, detail: str = ""):
        self.kind = kind
        self.path = path
        self.line_no = line_no
        where = path if line_no is None else f"{path}:{line_no}"
        msg = f"{kind} error loading {where}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
