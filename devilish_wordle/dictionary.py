"""
Dictionary Loading
==================

The dictionary is both the guess list and the answer list. It is loaded once
and never mutated; the feedback matrix over it is computed on first use.
"""

import re
import time
import numpy as np
from typing import Dict, List, Optional, Sequence

from .errors import EmptyDictionaryError
from .feedback import compute_feedback_matrix, words_to_chars


WORD_PATTERN = re.compile(r'[a-z]{5}')


def load_words(filepath: str) -> List[str]:
    """
    Load the 5-letter lowercase words from a file, one per line.

    Lines are split on newlines only; anything else (blank lines, other
    lengths, uppercase, punctuation, trailing whitespace) is dropped.
    Order and duplicates are kept.
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        contents = f.read()
    return [line for line in contents.split('\n') if WORD_PATTERN.fullmatch(line)]


class Dictionary:
    """
    Immutable word list with its char array and feedback matrix.
    """

    def __init__(self, words: Sequence[str], verbose: bool = False):
        """
        Args:
            words: Dictionary words in scan order
            verbose: Print timing for the feedback matrix precomputation
        """
        self._words = tuple(words)
        if not self._words:
            raise EmptyDictionaryError("Dictionary contains no 5-letter words")
        self.verbose = verbose

        self._index: Dict[str, int] = {}
        for i, w in enumerate(self._words):
            self._index.setdefault(w, i)

        # Validates every word (MalformedWordError)
        self._chars = words_to_chars(list(self._words))
        self._feedback_matrix: Optional[np.ndarray] = None

    @classmethod
    def from_file(cls, filepath: str, verbose: bool = False) -> 'Dictionary':
        return cls(load_words(filepath), verbose=verbose)

    @property
    def words(self):
        return self._words

    @property
    def chars(self) -> np.ndarray:
        return self._chars

    @property
    def feedback_matrix(self) -> np.ndarray:
        """Feedback codes, shape (n_words, n_words): [guess, answer]."""
        if self._feedback_matrix is None:
            n = len(self._words)
            if self.verbose:
                print(f"Precomputing feedback matrix ({n} guesses × {n} answers)...")
            start = time.time()
            matrix = compute_feedback_matrix(self._chars, self._chars)
            self._feedback_matrix = matrix
            if self.verbose:
                elapsed = time.time() - start
                print(f"Done in {elapsed:.1f}s")
        return self._feedback_matrix

    def index_of(self, word: str) -> int:
        """Dictionary index of a word (first occurrence). Raises KeyError."""
        return self._index[word]

    def indices_of(self, words: Sequence[str]) -> np.ndarray:
        return np.array([self._index[w] for w in words], dtype=np.int64)

    def __contains__(self, word) -> bool:
        return word in self._index

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __getitem__(self, i: int) -> str:
        return self._words[i]

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"
