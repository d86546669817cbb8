# apps/cli/best.py
"""
Rank guesses by summed information.

Loads a guess list and a solution list (explicit paths, or the --lang
defaults under --data-dir), optionally narrows the solutions with observed
feedback, then prints the top-N guesses.

    python -m apps.cli.best --lang en --top 20
    python -m apps.cli.best --history crane=-Y--G --history sloth=..G.Y
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from wordbits import FeedbackMask, LoadError, ParseError, parse_word
from wordbits.datasets import DEFAULT_DATA_DIR, Lang, load_wordlist
from wordbits.engine import filter_candidates, validate_guess
from wordbits.search import TOP_N, find_best_guess_set

log = logging.getLogger(__name__)


def _parse_history(items: List[str]) -> List[FeedbackMask]:
    """GUESS=PATTERN pairs, e.g. 'crane=-Y--G'."""
    masks = []
    for item in items:
        guess, sep, patt = item.partition("=")
        if not sep:
            raise ParseError(item, "expected GUESS=PATTERN")
        masks.append(FeedbackMask.from_pattern(parse_word(guess.strip()), patt.strip()))
    return masks


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordbits: rank guesses by expected information")
    ap.add_argument("--lang", choices=[l.value for l in Lang], default=Lang.EN.value,
                    help="language for default word-list file names")
    ap.add_argument("--data-dir", default=str(DEFAULT_DATA_DIR), help="directory of word lists")
    ap.add_argument("--words", help="guess list path (overrides --lang default)")
    ap.add_argument("--sols", help="solution list path (overrides --lang default)")
    ap.add_argument("--history", action="append", default=[],
                    help="observed feedback GUESS=PATTERN (G/Y/-), repeatable")
    ap.add_argument("--top", type=int, default=TOP_N, help="how many guesses to print")
    ap.add_argument("--workers", type=int, help="worker processes (default: all CPUs)")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    words_path, sols_path = Lang(args.lang).paths(args.data_dir)
    try:
        guesses = load_wordlist(args.words or words_path)
        solutions = load_wordlist(args.sols or sols_path)
        history = _parse_history(args.history)
    except (LoadError, ParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not guesses or not solutions:
        print("error: guess and solution lists must both be non-empty", file=sys.stderr)
        return 2

    allowed = set(guesses)
    outside = [str(w) for w in solutions if w not in allowed]
    if outside:
        print(f"error: solutions missing from the guess list, e.g. {outside[:5]}", file=sys.stderr)
        return 2
    for mask in history:
        if validate_guess(str(mask.guess), allowed) is None:
            print(f"error: {mask.guess} is not in the guess list", file=sys.stderr)
            return 2

    if history:
        try:
            solutions = filter_candidates(solutions, history)
        except ValueError:
            print("error: no solution is consistent with the given history", file=sys.stderr)
            return 2
        log.info("%d solutions left after %d mask(s)", len(solutions), len(history))
        if len(solutions) <= 10:
            print("Remaining: " + " ".join(str(w) for w in solutions))

    ranked = find_best_guess_set(guesses, solutions, top_n=args.top, workers=args.workers)
    for rank, (word, bits) in enumerate(ranked, start=1):
        avg = bits / len(solutions)
        print(f"{rank:>4}. {word}  {bits:12.3f} bits  ({avg:.4f} avg)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
