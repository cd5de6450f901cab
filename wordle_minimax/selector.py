"""
Minimax Guess Selection
=======================

For a candidate set, every guess is scored by the size of the largest
partition it could leave behind, and the guess with the smallest worst case
wins.

The scan is a map followed by a reduction:
- map: worst-case score per guess, split across threads with numba's prange
- reduce: np.argmin over the scores

Ties go to the lowest guess index. The lexicon keeps the guess list sorted,
so among equally good guesses the alphabetically first word is played. The
rule does not depend on thread scheduling, so repeated runs play the same
games.
"""

import numpy as np
from numba import jit, prange
from typing import Sequence

from .feedback import compute_feedback_matrix, words_to_chars
from .partition import worst_case


@jit(nopython=True, parallel=True, cache=True)
def worst_case_scores(feedback_matrix: np.ndarray, candidates: np.ndarray) -> np.ndarray:
    """
    Worst-case partition size for every guess.

    Args:
        feedback_matrix: shape (n_guesses, n_answers) feedback patterns
        candidates: array of candidate answer indices

    Returns:
        shape (n_guesses,) array of largest partition sizes
    """
    n_guesses = feedback_matrix.shape[0]
    scores = np.zeros(n_guesses, dtype=np.int32)

    for g in prange(n_guesses):
        scores[g] = worst_case(feedback_matrix[g], candidates)

    return scores


def select_index(feedback_matrix: np.ndarray, candidates: np.ndarray,
                 candidate_guess_idx: np.ndarray = None) -> int:
    """
    Index of the minimax guess for the given candidates.

    Args:
        feedback_matrix: shape (n_guesses, n_answers) feedback patterns
        candidates: array of candidate answer indices (non-empty)
        candidate_guess_idx: guess index of every answer; when given, a lone
            candidate is returned without scanning

    Returns:
        Row index into the feedback matrix
    """
    if len(candidates) == 0:
        raise ValueError("No candidates")

    if len(candidates) == 1 and candidate_guess_idx is not None:
        return int(candidate_guess_idx[candidates[0]])

    scores = worst_case_scores(feedback_matrix, candidates)
    return int(np.argmin(scores))


def select(candidates: Sequence[str], guess_list: Sequence[str]) -> str:
    """
    Minimax guess from `guess_list` for the candidate words.

    A single remaining candidate is returned directly, since guessing it
    wins at once.
    """
    if len(candidates) == 0:
        raise ValueError("No candidates")
    if len(candidates) == 1:
        return candidates[0]

    matrix = compute_feedback_matrix(words_to_chars(guess_list), words_to_chars(candidates))
    idx = select_index(matrix, np.arange(len(candidates), dtype=np.int32))
    return guess_list[idx]
