"""
Best-guess search by summed information.

For every guess g in the guess pool:
    score(g) = sum over a in answer_pool of
               information_bits(|guess_pool|, hits(guess_pool, compare(g, a)))
where hits() counts the GUESS pool words consistent with the mask. Using the
guess pool (not the answer pool) as the reference population measures how
well g splits the whole guess space; rankings change if this is swapped.

The outer loop is data-parallel: the guess pool is cut into contiguous
chunks, each chunk is scored in a worker process, and the per-guess scores
are reassembled in pool order before the arg-max / top-N reduction. Workers
share nothing mutable; the pools are handed to each worker once through the
pool initializer.

Scores are float sums; do not rely on bit-exact equality across runs.
"""

from __future__ import annotations
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from wordbits.engine import compare, count_mask_hits, information_bits
from wordbits.model import Word

log = logging.getLogger(__name__)

# How many ranked guesses find_best_guess_set returns by default.
TOP_N = 100

# Aim for this many chunks per worker so slow chunks don't stall the pool.
CHUNKS_PER_WORKER = 4

_WORKER_STATE: Dict[str, Sequence[Word]] = {}


def score_guess(guess: Word, guess_pool: Sequence[Word], answer_pool: Sequence[Word]) -> float:
    """
    Summed information of `guess` over every answer in `answer_pool`.

    Every answer must also be in `guess_pool` (it is always consistent with
    its own mask, so hits >= 1); otherwise information_bits raises.
    """
    n = len(guess_pool)
    total = 0.0
    for answer in answer_pool:
        mask = compare(guess, answer)
        total += information_bits(n, count_mask_hits(guess_pool, mask))
    return total


def _init_worker(guess_pool: Sequence[Word], answer_pool: Sequence[Word]) -> None:
    _WORKER_STATE["guess_pool"] = guess_pool
    _WORKER_STATE["answer_pool"] = answer_pool


def _score_chunk(bounds: Tuple[int, int]) -> List[float]:
    start, stop = bounds
    guess_pool = _WORKER_STATE["guess_pool"]
    answer_pool = _WORKER_STATE["answer_pool"]
    return [score_guess(g, guess_pool, answer_pool) for g in guess_pool[start:stop]]


def _resolve_workers(workers: Optional[int]) -> int:
    if workers is None:
        return os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")
    return workers


def score_all(
        guess_pool: Sequence[Word],
        answer_pool: Sequence[Word],
        *,
        workers: Optional[int] = None,
) -> np.ndarray:
    """
    Score every guess; returns a float array aligned with `guess_pool`.

    Raises ValueError on an empty pool.
    """
    if not guess_pool:
        raise ValueError("guess_pool is empty")
    if not answer_pool:
        raise ValueError("answer_pool is empty")

    guess_pool = list(guess_pool)
    answer_pool = list(answer_pool)
    n = len(guess_pool)
    nproc = min(_resolve_workers(workers), n)

    t0 = time.perf_counter()
    if nproc == 1:
        scores = [score_guess(g, guess_pool, answer_pool) for g in guess_pool]
    else:
        n_chunks = nproc * CHUNKS_PER_WORKER
        chunksize = max(1, -(-n // n_chunks))
        tasks = [(s, min(s + chunksize, n)) for s in range(0, n, chunksize)]
        log.debug("scoring %d guesses in %d chunks of %d over %d workers",
                  n, len(tasks), chunksize, nproc)
        scores = []
        with ProcessPoolExecutor(nproc, initializer=_init_worker,
                                 initargs=(guess_pool, answer_pool)) as executor:
            # map() yields in submission order, so scores stay aligned with the pool
            for part in executor.map(_score_chunk, tasks):
                scores.extend(part)

    log.info("scored %d guesses x %d answers in %.2fs (workers=%d)",
             n, len(answer_pool), time.perf_counter() - t0, nproc)
    return np.asarray(scores, dtype=np.float64)


def find_best_guess(
        guess_pool: Sequence[Word],
        answer_pool: Sequence[Word],
        *,
        workers: Optional[int] = None,
) -> Tuple[Word, float]:
    """
    Return (word, score) with the highest score. Ties go to the word that
    comes first in `guess_pool`.
    """
    scores = score_all(guess_pool, answer_pool, workers=workers)
    best = int(np.argmax(scores))  # first occurrence of the maximum
    return guess_pool[best], float(scores[best])


def find_best_guess_set(
        guess_pool: Sequence[Word],
        answer_pool: Sequence[Word],
        *,
        top_n: int = TOP_N,
        workers: Optional[int] = None,
) -> List[Tuple[Word, float]]:
    """
    Return the `top_n` highest-scoring (word, score) pairs, best first.
    Equal scores keep their pool order (stable sort).
    """
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1; got {top_n}")
    scores = score_all(guess_pool, answer_pool, workers=workers)
    order = np.argsort(-scores, kind="stable")[:top_n]
    return [(guess_pool[i], float(scores[i])) for i in order]
