"""
Command line entry point.

    $ devilish-wordle path/to/dictionary

Prints the worst-case series of guesses for the dictionary; the last word is
the one that is hardest for the strategy to find.
"""

import argparse
import sys
from typing import List, Optional

from .dictionary import Dictionary
from .errors import SearchError
from .strategy import KnuthStrategy, benchmark, find_deepest_line, print_results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devilish-wordle",
        description="Find the deepest line of play forced on the Knuth "
                    "worst-case strategy by a Wordle dictionary.")
    parser.add_argument("dictionary", help="Word list file, one word per line")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print progress while searching")
    parser.add_argument("--play", metavar="WORD",
                        help="Show the strategy's guesses for a single answer")
    parser.add_argument("--benchmark", action="store_true",
                        help="Play every word and print the distribution of guesses")
    return parser


def print_chain(chain: List[str]):
    """Report the deepest forced line."""
    print(f"Deepest forced line ({len(chain)} guesses): {chain}")
    if chain:
        print(f"Hardest word: {chain[-1]}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        dictionary = Dictionary.from_file(args.dictionary, verbose=args.verbose)
        print(f"{len(dictionary)} words in dictionary. Starting...")

        if args.play:
            strategy = KnuthStrategy(dictionary)
            guesses = strategy.play(args.play, verbose=True)
            print(f"Solved in {len(guesses)} guesses: {' -> '.join(guesses)}")
        elif args.benchmark:
            strategy = KnuthStrategy(dictionary)
            print_results(benchmark(strategy, verbose=args.verbose))
        else:
            print_chain(find_deepest_line(dictionary, verbose=args.verbose))
    except (SearchError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
