"""
Devilish Wordle
===============

Finds the longest line of guesses the Knuth "minimize the worst bucket"
strategy is ever forced into for a dictionary, and so the word that is
hardest for it to find.
"""

__version__ = "1.0.0"

from .errors import SearchError, MalformedWordError, ExhaustedError, EmptyDictionaryError
from .feedback import WIN, classify, feedback_to_string, string_to_feedback
from .partition import partition, largest_bucket
from .dictionary import Dictionary, load_words
from .strategy import GameState, KnuthStrategy, find_deepest_line, benchmark, print_results
