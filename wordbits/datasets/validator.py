"""
Word-list validator.

What this module does:
- Check a (solutions, guesses) pair of word lists before a search run.
- Every line must be UTF-8 and parse as a Word; blank, undecodable or
  malformed lines are counted and the first few line numbers reported.
- Detect duplicates; compute SHA-256 of the raw files.
- Check solutions ⊆ guesses (search scoring counts hits in the guess pool,
  so a solution missing from it would score as an impossible mask).
- Return a plain dict (for manifests) and a one-line summary.

Unlike load_wordlist(), this never raises on bad content: it reports.

Typical use:
    from wordbits.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/en_sols.txt", "data/en_words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordbits.errors import ParseError
from wordbits.model import WORD_LEN, Word, parse_word

# How many offending line numbers to keep per file.
MAX_REPORTED_LINES = 5


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int              # lines that parsed
    sha256: str             # of raw bytes; "" if missing
    unique_count: int
    invalid_lines: int
    first_invalid: List[int] = field(default_factory=list)


@dataclass
class ValidationReport:
    word_len: int
    answers: FileReport
    allowed: FileReport
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _parse_file(path: Path) -> Tuple[List[Word], List[int]]:
    """Return (parsed words, 1-based numbers of lines that failed)."""
    words: List[Word] = []
    bad: List[int] = []
    for line_no, raw in enumerate(path.read_bytes().splitlines(), start=1):
        try:
            words.append(parse_word(raw.decode("utf-8").strip()))
        except (UnicodeDecodeError, ParseError):
            bad.append(line_no)
    return words, bad


def _report(path: Path) -> Tuple[FileReport, List[Word]]:
    if not path.exists():
        return FileReport(str(path), False, 0, "", 0, 0), []
    words, bad = _parse_file(path)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=len(bad),
        first_invalid=bad[:MAX_REPORTED_LINES],
    )
    return rep, words


def validate_wordlists(answers_path: Path | str, allowed_path: Path | str) -> Dict:
    """
    Validate a solutions list against a guess list.

    Returns a JSON-serializable dict (ValidationReport schema); `passed` is
    strict: both files exist and are non-empty, no invalid lines, and
    solutions ⊆ guesses. Duplicates are reported but do not fail the check.
    """
    issues: List[str] = []
    ans_rep, answers = _report(Path(answers_path))
    all_rep, allowed = _report(Path(allowed_path))

    for name, rep in (("answers", ans_rep), ("allowed", all_rep)):
        if not rep.exists:
            issues.append(f"{name} file not found: {rep.path}")
            continue
        if rep.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{name} has {rep.invalid_lines} invalid line(s), "
                          f"e.g. lines {rep.first_invalid}")
        if rep.count != rep.unique_count:
            issues.append(f"{name} contains duplicate lines")

    allowed_set = set(allowed)
    missing = [str(w) for w in answers if w not in allowed_set]
    subset_ok = ans_rep.exists and all_rep.exists and not missing
    if missing:
        issues.append(f"answers not subset of allowed (e.g., {missing[:5]})")

    passed = (
            subset_ok
            and ans_rep.invalid_lines == 0
            and all_rep.invalid_lines == 0
            and ans_rep.count > 0
            and all_rep.count > 0
    )

    rep = ValidationReport(
        word_len=WORD_LEN,
        answers=ans_rep,
        allowed=all_rep,
        answers_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner, e.g.
        answers=2315 (uniq=2315, sha=abc123...) | allowed=12972 (uniq=12972, sha=def456...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
