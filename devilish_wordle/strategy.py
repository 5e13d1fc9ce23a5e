"""
Knuth Strategy Search
=====================

Plays out every game of Wordle under the "Knuth heuristic": at each turn pick
the guess that minimizes the size of the largest bucket of indistinguishable
words left by its feedback. Knuth (1977) used this rule for Mastermind.

The search explores the full strategy-induced game tree (every feedback
outcome of every chosen guess) and returns the longest line of guesses the
strategy is ever forced into. Its last word is the hardest word to find.

The heuristic uses "number of words remaining" as an estimate of tree depth,
so it is not guaranteed optimal.
"""

import time
import numpy as np
from numba import jit
from collections import Counter, defaultdict
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .dictionary import Dictionary
from .errors import EmptyDictionaryError, ExhaustedError
from .feedback import WIN, classify, feedback_to_emoji
from .partition import ResultPartition, get_partition_sizes, largest_bucket, partition_by_row


DEFAULT_STATUS_INTERVAL = 2.0  # seconds between verbose status lines


# ============================================================================
# NUMBA-ACCELERATED GUESS SCORING
# ============================================================================

@jit(nopython=True, cache=True)
def score_guesses(feedback_matrix: np.ndarray, candidates: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Score every guess against a candidate set.

    Returns:
        worst: largest bucket size per guess
        wins: whether the guess has a winning bucket (is itself a candidate)
    """
    n_guesses = feedback_matrix.shape[0]
    worst = np.zeros(n_guesses, dtype=np.int32)
    wins = np.zeros(n_guesses, dtype=np.bool_)

    for g in range(n_guesses):
        sizes = get_partition_sizes(feedback_matrix[g], candidates)
        worst[g] = sizes.max()
        wins[g] = sizes[242] > 0

    return worst, wins


@jit(nopython=True, cache=True)
def pick_best_guess(worst: np.ndarray, wins: np.ndarray, used: np.ndarray,
                    n_candidates: int) -> int:
    """
    Pick the guess with the smallest worst-case bucket, in dictionary order.

    The running best starts as "no guess", scored n_candidates with no win.
    Equal scores only replace the best when they add a winning bucket.

    Returns:
        Index of the chosen guess, or -1 if no guess beats "no guess"
    """
    best = -1
    best_worst = n_candidates
    best_win = False

    for g in range(worst.shape[0]):
        if used[g]:
            continue
        w = worst[g]
        if w < best_worst or (w == best_worst and wins[g] and not best_win):
            best = g
            best_worst = w
            best_win = wins[g]

    return best


# ============================================================================
# GAME STATE
# ============================================================================

class GameState(NamedTuple):
    """The state of the game right before a new guess."""
    remaining_words: Tuple[str, ...]  # Words not yet ruled out
    guesses_so_far: Tuple[str, ...]  # Words already guessed, in order

    @classmethod
    def initial(cls, words: Sequence[str]) -> 'GameState':
        return cls(tuple(words), ())

    def advance(self, guess: str, bucket: Sequence[str]) -> 'GameState':
        """State after guessing `guess` and seeing the feedback of `bucket`."""
        return GameState(tuple(bucket), self.guesses_so_far + (guess,))


class SearchStats:
    """Counters for one top-level search."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.nodes = 0  # select_guess calls
        self.scans = 0  # full dictionary scans
        self.max_depth = 0

    def __repr__(self):
        return f"SearchStats(nodes={self.nodes}, scans={self.scans}, max_depth={self.max_depth})"


# ============================================================================
# STRATEGY CLASS
# ============================================================================

class KnuthStrategy:
    """
    Deterministic minimize-worst-bucket strategy over a single dictionary.
    """

    def __init__(self, dictionary: Dictionary, verbose: bool = False,
                 status_interval: float = DEFAULT_STATUS_INTERVAL):
        """
        Args:
            dictionary: Word list used for both guesses and answers
            verbose: Print periodic status lines during the search
            status_interval: Seconds between status lines
        """
        self.dictionary = dictionary
        self.verbose = verbose
        self.status_interval = status_interval
        self.stats = SearchStats()
        self.last_status_time = time.time()

        # Every index of each word, so used guesses are excluded even if duplicated
        self._positions: Dict[str, List[int]] = defaultdict(list)
        for i, w in enumerate(dictionary.words):
            self._positions[w].append(i)

    def initial_state(self) -> GameState:
        return GameState.initial(self.dictionary.words)

    def _used_mask(self, guesses: Sequence[str]) -> np.ndarray:
        used = np.zeros(len(self.dictionary), dtype=np.bool_)
        for g in guesses:
            used[self._positions.get(g, [])] = True
        return used

    def select_guess(self, state: GameState) -> Tuple[str, ResultPartition]:
        """
        Find the best guess for the given game state.

        Returns:
            (guess, partition of the remaining words by feedback)

        Raises:
            ExhaustedError: no unused dictionary word improves on not guessing
        """
        self.stats.nodes += 1
        remaining = state.remaining_words

        if len(remaining) == 1:
            # Only one candidate - guess it
            return remaining[0], {WIN: [remaining[0]]}

        self.stats.scans += 1
        candidates = self.dictionary.indices_of(remaining)
        matrix = self.dictionary.feedback_matrix

        worst, wins = score_guesses(matrix, candidates)
        used = self._used_mask(state.guesses_so_far)
        best_idx = pick_best_guess(worst, wins, used, len(remaining))

        if best_idx < 0:
            raise ExhaustedError(
                f"Unable to find a productive guess for {len(remaining)} words "
                f"after {len(state.guesses_so_far)} guesses")

        guess = self.dictionary[best_idx]
        return guess, partition_by_row(matrix[best_idx], candidates, self.dictionary.words)

    def deepest_forced_line(self, state: Optional[GameState] = None) -> List[str]:
        """
        Play out the entire game tree starting from the given state.

        Returns:
            The guesses along the maximum-depth branch. Ties keep the branch
            whose feedback was seen first.
        """
        if state is None:
            state = self.initial_state()
            self.stats.reset()
            self.last_status_time = time.time()

        depth = len(state.guesses_so_far) + 1
        self.stats.max_depth = max(self.stats.max_depth, depth)
        self._status(state)

        guess, results = self.select_guess(state)
        longest = list(state.guesses_so_far)

        for code, bucket in results.items():
            if code == WIN:
                chain = list(state.guesses_so_far) + [guess]
            else:
                chain = self.deepest_forced_line(state.advance(guess, bucket))
            if len(chain) > len(longest):
                longest = chain

        return longest

    def _status(self, state: GameState):
        if self.verbose and time.time() - self.last_status_time > self.status_interval:
            print(f"  [search] nodes={self.stats.nodes}, depth={len(state.guesses_so_far) + 1}, "
                  f"n={len(state.remaining_words)}, max_depth={self.stats.max_depth}")
            self.last_status_time = time.time()

    def play(self, answer: str, verbose: bool = False) -> List[str]:
        """
        Follow the strategy for a known answer.

        Args:
            answer: Target word
            verbose: Print each turn

        Returns:
            Guesses made, ending with the answer
        """
        if answer not in self.dictionary:
            raise ValueError(f"Answer '{answer}' not in dictionary")

        state = self.initial_state()
        while True:
            n_cand = len(state.remaining_words)
            guess, results = self.select_guess(state)
            feedback = classify(guess, answer)
            if verbose:
                print(f"  Turn {len(state.guesses_so_far) + 1}: {guess} -> "
                      f"{feedback_to_emoji(feedback)} ({n_cand} -> {len(results[feedback])} candidates, "
                      f"worst bucket {largest_bucket(results)})")
            if feedback == WIN:
                return list(state.guesses_so_far) + [guess]
            state = state.advance(guess, results[feedback])


def find_deepest_line(dictionary: Dictionary, verbose: bool = False) -> List[str]:
    """Run the full search from the root of the game tree."""
    if len(dictionary) == 0:
        raise EmptyDictionaryError("Dictionary contains no 5-letter words")
    strategy = KnuthStrategy(dictionary, verbose=verbose)
    chain = strategy.deepest_forced_line()
    if verbose:
        print(f"Search finished: {strategy.stats}")
    return chain


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def benchmark(strategy: KnuthStrategy, words: Sequence[str] = None,
              verbose: bool = True) -> Dict:
    """
    Play every word under the strategy.

    Args:
        strategy: KnuthStrategy instance
        words: Answers to play (default: the whole dictionary)
        verbose: Print progress

    Returns:
        Dict with results
    """
    if words is None:
        words = strategy.dictionary.words

    results = []
    dist = Counter()
    worst_words = []
    worst = 0

    start = time.time()
    for i, word in enumerate(words):
        if verbose and i % 500 == 0:
            elapsed = time.time() - start
            rate = (i + 1) / elapsed if elapsed > 0 else 0
            avg = sum(results) / len(results) if results else 0
            print(f"[{i}/{len(words)}] {rate:.1f} w/s, avg={avg:.4f}")

        n = len(strategy.play(word))
        results.append(n)
        dist[n] += 1
        if n > worst:
            worst = n
            worst_words = [word]
        elif n == worst:
            worst_words.append(word)

    elapsed = time.time() - start

    return {
        'total': len(words),
        'average': sum(results) / len(results) if results else 0.0,
        'distribution': dict(sorted(dist.items())),
        'worst': worst,
        'worst_words': worst_words[:20],
        'time': elapsed,
        'rate': len(words) / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results: Dict):
    """Pretty print benchmark results."""
    print("\n" + "=" * 50)
    print("BENCHMARK RESULTS")
    print("=" * 50)
    print(f"Words played: {results['total']}")
    print(f"Average guesses: {results['average']:.4f}")
    print(f"Worst case: {results['worst']} guesses")
    print(f"Time: {results['time']:.1f}s ({results['rate']:.1f} words/sec)")
    print("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / results['total']
        bar = "█" * int(pct / 2)
        print(f"  {n}: {count:5d} ({pct:5.2f}%) {bar}")
    if results['worst_words']:
        print(f"\nHardest words: {results['worst_words']}")
    print("=" * 50)
