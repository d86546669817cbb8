"""
Self-play harness.

- run_case:  play one game against a known hidden answer, choosing each guess
             with the information search and narrowing the candidate pool
             with the observed mask.
- run_batch: run many games in sequence (optionally a prefix sample).

The harness is UI-agnostic; the CLI wraps it with progress and file output.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, List, Optional, Sequence, Tuple

from wordbits.engine import compare, narrow
from wordbits.model import Word
from wordbits.search import find_best_guess_set

log = logging.getLogger(__name__)

# Standard game turn budget.
MAX_TURNS = 6


def _next_guess(
        guess_pool: Sequence[Word],
        candidates: List[Word],
        played: List[Word],
        workers: int,
) -> Word:
    if len(candidates) == 1:
        return candidates[0]
    # Take the best guess not played yet; a replay can never add information.
    ranked = find_best_guess_set(guess_pool, candidates, top_n=len(played) + 1, workers=workers)
    for word, _ in ranked:
        if word not in played:
            return word
    return candidates[0]


def run_case(
        answer: Word,
        *,
        guess_pool: Sequence[Word],
        answer_pool: Sequence[Word],
        max_turns: int = MAX_TURNS,
        workers: int = 1,
        opener: Optional[Word] = None,
) -> Dict:
    """
    Play one game until solved or `max_turns` run out.

    Args:
        answer:      the hidden word; must be in `answer_pool`
        guess_pool:  words allowed as guesses; must contain every answer
        answer_pool: initial candidate pool
        workers:     search worker processes per turn
        opener:      fixed first guess (skips the first, most expensive search)

    Returns:
        dict with keys: answer, success, guesses, time_ms,
        history (list of (guess, pattern, bits))
    """
    if answer not in answer_pool:
        raise ValueError(f"answer {answer} is not in the answer pool")
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")

    candidates = list(answer_pool)
    played: List[Word] = []
    history: List[Tuple[str, str, float]] = []
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        if turn == 1 and opener is not None:
            guess = opener
        else:
            guess = _next_guess(guess_pool, candidates, played, workers)
        played.append(guess)

        mask = compare(guess, answer)
        candidates, bits = narrow(candidates, mask)
        history.append((str(guess), mask.pattern, bits))
        log.debug("turn %d: %s %s -> %d candidates (%.3f bits)",
                  turn, guess, mask.pattern, len(candidates), bits)

        if mask.is_solved:
            success = True
            break

    return {
        "answer": str(answer),
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
    }


def run_batch(
        answers: Sequence[Word],
        *,
        guess_pool: Sequence[Word],
        answer_pool: Sequence[Word],
        max_turns: int = MAX_TURNS,
        workers: int = 1,
        opener: Optional[Word] = None,
        sample: Optional[int] = None,
) -> List[Dict]:
    """Run one case per answer; `sample` keeps only the first K answers."""
    cases = list(answers) if sample is None else list(answers)[:sample]
    return [
        run_case(ans, guess_pool=guess_pool, answer_pool=answer_pool,
                 max_turns=max_turns, workers=workers, opener=opener)
        for ans in cases
    ]
