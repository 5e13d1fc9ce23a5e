"""Grouping candidate words into feedback buckets for a guess."""

import numpy as np
from numba import jit
from typing import Dict, List, Sequence

from .feedback import classify


# A ResultPartition maps feedback code -> candidates producing it, in the
# order the codes were first seen.
ResultPartition = Dict[int, List[str]]


@jit(nopython=True, cache=True)
def get_partition_sizes(feedback_row: np.ndarray, candidates: np.ndarray) -> np.ndarray:
    """Count how many candidates fall into each of the 243 feedback patterns."""
    sizes = np.zeros(243, dtype=np.int32)
    for c in candidates:
        sizes[feedback_row[c]] += 1
    return sizes


def partition(candidates: Sequence[str], guess: str) -> ResultPartition:
    """Bucket every candidate by the feedback it would give against `guess`."""
    out: ResultPartition = {}
    for word in candidates:
        out.setdefault(classify(guess, word), []).append(word)
    return out


def partition_by_row(feedback_row: np.ndarray, candidate_indices: np.ndarray,
                     words: Sequence[str]) -> ResultPartition:
    """
    Same as `partition`, but reading codes from a precomputed feedback row.

    Args:
        feedback_row: codes for one guess against every dictionary word
        candidate_indices: dictionary indices of the candidates, in order
        words: the dictionary words the indices refer to
    """
    out: ResultPartition = {}
    for idx in candidate_indices:
        out.setdefault(int(feedback_row[idx]), []).append(words[idx])
    return out


def largest_bucket(results: ResultPartition) -> int:
    """Size of the worst-case bucket."""
    return max((len(bucket) for bucket in results.values()), default=0)
