# apps/cli/run.py
"""
CLI entry point for self-play runs.

This script:
  1) Validates the word lists (counts + SHA, solutions ⊆ guesses).
  2) Loads both lists as Words.
  3) Plays one game per (sampled) solution with a tqdm progress bar and writes:
       - CSV:  per-game results + guess/pattern/bits columns
       - JSON: manifest with config and the word-list report
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordbits import LoadError, ParseError, parse_word
from wordbits.datasets import DEFAULT_DATA_DIR, Lang, load_wordlist, pretty_summary, validate_wordlists
from wordbits.harness import MAX_TURNS, run_case, timestamp_id, write_csv, write_manifest

log = logging.getLogger(__name__)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordbits: self-play with the information search")
    ap.add_argument("--lang", choices=[l.value for l in Lang], default=Lang.EN.value)
    ap.add_argument("--data-dir", default=str(DEFAULT_DATA_DIR))
    ap.add_argument("--words", help="guess list path (overrides --lang default)")
    ap.add_argument("--sols", help="solution list path (overrides --lang default)")
    ap.add_argument("--opener", help="fixed first guess (saves the most expensive search)")
    ap.add_argument("--sample", type=int, help="play only this many solutions (sampled by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--workers", type=int, default=1, help="search worker processes per turn")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    words_path, sols_path = Lang(args.lang).paths(args.data_dir)
    words_path = Path(args.words or words_path)
    sols_path = Path(args.sols or sols_path)

    # 1) Validate and summarize; a failing report is fatal since scoring
    #    needs every solution inside the guess pool.
    rep = validate_wordlists(sols_path, words_path)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        return 2

    # 2) Load
    try:
        guesses = load_wordlist(words_path)
        solutions = load_wordlist(sols_path)
        opener = parse_word(args.opener.strip()) if args.opener else None
    except (LoadError, ParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Choose cases (deterministic sample by seed)
    cases = list(solutions)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    log.info("playing %d games (workers=%d)", len(cases), args.workers)
    results = []
    solved = 0
    pbar = tqdm(cases, ncols=80, desc="Playing", unit="game")
    for ans in pbar:
        r = run_case(ans, guess_pool=guesses, answer_pool=solutions,
                     max_turns=MAX_TURNS, workers=args.workers, opener=opener)
        results.append(r)
        solved += r["success"]
        pbar.set_postfix({"solved": f"{solved}/{len(results)}"})

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"), max_turns=MAX_TURNS)
    manifest_path = write_manifest({
        "run_id": run_id,
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solved": solved,
    }, str(outdir / f"run_{run_id}_manifest.json"))

    if results:
        avg = sum(r["guesses"] for r in results if r["success"]) / max(1, solved)
        print(f"Solved {solved}/{len(results)}, avg {avg:.3f} guesses when solved")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
