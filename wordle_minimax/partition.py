"""
Candidate partitioning.

A guess splits the candidate set into groups that share a feedback pattern.
Only observed patterns get a group, so no group is ever empty and the group
sizes always sum to the number of candidates.
"""

import numpy as np
from numba import jit
from typing import Dict, List, Sequence

from .feedback import N_PATTERNS, evaluate


@jit(nopython=True, cache=True)
def worst_case(feedback_row: np.ndarray, candidates: np.ndarray) -> int:
    """
    Size of the largest partition produced by one guess.

    Args:
        feedback_row: feedback values for one guess against all answers
        candidates: array of candidate answer indices
    """
    sizes = np.zeros(N_PATTERNS, dtype=np.int32)
    worst = 0
    for c in candidates:
        p = feedback_row[c]
        sizes[p] += 1
        if sizes[p] > worst:
            worst = sizes[p]
    return worst


def partition(guess: str, candidates: Sequence[str]) -> Dict[int, List[str]]:
    """Group candidate words by the feedback each would give against `guess`."""
    groups: Dict[int, List[str]] = {}
    for word in candidates:
        groups.setdefault(evaluate(guess, word), []).append(word)
    return groups


def partition_indices(feedback_row: np.ndarray, candidates: np.ndarray) -> Dict[int, np.ndarray]:
    """Group candidate indices by feedback pattern using one feedback matrix row."""
    patterns = feedback_row[candidates]
    groups = {}
    for p in np.unique(patterns):
        groups[int(p)] = candidates[patterns == p]
    return groups
