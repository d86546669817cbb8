from .best import TOP_N, score_guess, score_all, find_best_guess, find_best_guess_set

__all__ = ["TOP_N", "score_guess", "score_all", "find_best_guess", "find_best_guess_set"]
