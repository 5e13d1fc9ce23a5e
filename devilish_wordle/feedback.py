"""
Wordle Feedback
===============

Feedback codes are packed base-3 integers (0-242). Position i contributes
digit * 3^i, where ABSENT=0, PRESENT=1, EXACT=2, so WIN (all EXACT) is 242.

Words are handled as int32 char-code arrays (a=0 .. z=25) so the hot loops
can run under numba.
"""

import numpy as np
from numba import jit, prange
from collections import Counter
from typing import List

from .errors import MalformedWordError


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5
ALPHABET_SIZE = 26

ABSENT = 0
PRESENT = 1
EXACT = 2

WIN = 242  # 2 + 2*3 + 2*9 + 2*27 + 2*81 = 242 (all exact)
N_PATTERNS = 243  # 3^5 possible feedback patterns

# Codes are only defined for words with at most this many copies of a letter
MAX_LETTER_REPEATS = 3

PATTERN_CHARS = 'BYG'
EMOJI_CHARS = '⬛🟨🟩'


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """
    Compute Wordle feedback for a guess against an answer.

    Args:
        guess: shape (5,) array of char codes (0-25 for a-z)
        answer: shape (5,) array of char codes

    Returns:
        Integer feedback pattern (0-242)
    """
    feedback = np.zeros(5, dtype=np.int32)
    answer_counts = np.zeros(26, dtype=np.int32)

    # Count letters in answer
    for i in range(5):
        answer_counts[answer[i]] += 1

    # First pass: claim exact matches
    for i in range(5):
        if guess[i] == answer[i]:
            feedback[i] = 2
            answer_counts[guess[i]] -= 1

    # Second pass: present elsewhere, only while unclaimed copies remain
    for i in range(5):
        if feedback[i] == 0:
            c = guess[i]
            if answer_counts[c] > 0:
                feedback[i] = 1
                answer_counts[c] -= 1

    return feedback[0] + 3*feedback[1] + 9*feedback[2] + 27*feedback[3] + 81*feedback[4]


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_matrix(guess_chars: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Compute feedback for all guess/answer pairs.

    Args:
        guess_chars: shape (n_guesses, 5) array of char codes
        answer_chars: shape (n_answers, 5) array of char codes

    Returns:
        shape (n_guesses, n_answers) feedback matrix
    """
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    result = np.zeros((n_guesses, n_answers), dtype=np.uint8)

    for i in prange(n_guesses):
        for j in range(n_answers):
            result[i, j] = compute_feedback(guess_chars[i], answer_chars[j])

    return result


# ============================================================================
# WORD ENCODING
# ============================================================================

def validate_word(word: str) -> None:
    """Raise MalformedWordError unless word can be given a feedback code."""
    if len(word) != WORD_LENGTH or not all('a' <= c <= 'z' for c in word):
        raise MalformedWordError(f"Not a {WORD_LENGTH}-letter lowercase word: {word!r}")
    letter, count = Counter(word).most_common(1)[0]
    if count > MAX_LETTER_REPEATS:
        raise MalformedWordError(
            f"Word {word!r} repeats '{letter}' {count} times "
            f"(at most {MAX_LETTER_REPEATS} supported)")


def word_to_chars(word: str) -> np.ndarray:
    """Convert a single word to a char code array."""
    validate_word(word)
    return np.array([ord(c) - ord('a') for c in word], dtype=np.int32)


def words_to_chars(words: List[str]) -> np.ndarray:
    """Convert words to a (n_words, 5) char code array."""
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        arr[i] = word_to_chars(w)
    return arr


def classify(guess: str, target: str) -> int:
    """Feedback code for guessing `guess` when the answer is `target`."""
    return int(compute_feedback(word_to_chars(guess), word_to_chars(target)))


# ============================================================================
# DISPLAY
# ============================================================================

def feedback_digits(code: int) -> List[int]:
    """Per-position outcomes (ABSENT/PRESENT/EXACT), position 0 first."""
    if not 0 <= code < N_PATTERNS:
        raise ValueError(f"Invalid feedback code: {code}")
    digits = []
    for _ in range(WORD_LENGTH):
        digits.append(code % 3)
        code //= 3
    return digits


def feedback_to_string(code: int) -> str:
    """Convert integer code to pattern string, e.g. 242 -> 'GGGGG'."""
    return ''.join(PATTERN_CHARS[d] for d in feedback_digits(code))


def feedback_to_emoji(code: int) -> str:
    return ''.join(EMOJI_CHARS[d] for d in feedback_digits(code))


def string_to_feedback(pattern: str) -> int:
    """Convert pattern string (e.g., 'BBYGG') to integer (0-242)."""
    if len(pattern) != WORD_LENGTH:
        raise ValueError(f"Pattern must have {WORD_LENGTH} characters: {pattern!r}")
    result = 0
    multiplier = 1
    for c in pattern.upper():
        if c not in PATTERN_CHARS:
            raise ValueError(f"Invalid pattern char: {c}")
        result += PATTERN_CHARS.index(c) * multiplier
        multiplier *= 3
    return result
