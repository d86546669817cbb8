# apps/cli/compare.py
"""
Interactive mask demo.

Reads one guess, compares it against a fixed answer, prints the answer and
the emoji mask, and checks that the answer is consistent with its own mask.

    python -m apps.cli.compare --answer gerne
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordbits import ParseError, compare, is_consistent, parse_word

DEFAULT_ANSWER = "GERNE"

log = logging.getLogger(__name__)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordbits: show the mask for one guess")
    ap.add_argument("--answer", default=DEFAULT_ANSWER, help="hidden answer to compare against")
    ap.add_argument("--guess", help="guess to compare (prompted for if omitted)")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    text = args.guess
    if text is None:
        print("Guess:  ", end="", flush=True)
        text = sys.stdin.readline()

    try:
        guess = parse_word(text.strip())
        answer = parse_word(args.answer.strip())
    except ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    mask = compare(guess, answer)
    print(f"Answer: {answer}")
    print(mask)
    log.debug("pattern %s", mask.pattern)

    assert is_consistent(mask, answer), f"{answer} inconsistent with its own mask {mask.pattern}"
    return 0


if __name__ == "__main__":
    sys.exit(main())
