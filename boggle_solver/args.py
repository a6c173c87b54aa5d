"""Standard command-line arguments shared across tools."""

import argparse
import os
import random

from boggle_solver.dice import GameType
from boggle_solver.trie import Dictionary, WordSizeConstraint

DEFAULT_DICTIONARIES = (
    "words.txt",
    "words.txt.gz",
    "/etc/dictionaries-common/words",
)


def default_dictionary() -> str:
    """The first of DEFAULT_DICTIONARIES that exists, or "" if none do."""
    return next((d for d in DEFAULT_DICTIONARIES if os.path.isfile(d)), "")


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "-g",
        "--game",
        type=GameType,
        choices=list(GameType),
        default=GameType.CLASSIC,
        metavar="{" + ",".join(g.value for g in GameType) + "}",
        help="Game variant, which determines the dice and board size.",
    )
    parser.add_argument(
        "-d",
        "--dictionary",
        type=str,
        default=default_dictionary(),
        help="Path to dictionary file with one word per line, optionally gzipped. "
        "Defaults to the first of: " + ", ".join(DEFAULT_DICTIONARIES),
    )
    parser.add_argument(
        "-m",
        "--min_len",
        type=int,
        default=3,
        help="Minimum word length to find.",
    )
    parser.add_argument(
        "--max_len",
        type=int,
        default=None,
        help="Maximum word length to find (default: no limit).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report dictionary statistics and timings.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_dictionary_from_args(args: argparse.Namespace) -> Dictionary:
    size = WordSizeConstraint(min=args.min_len, max=args.max_len)
    return Dictionary.from_file(args.dictionary, size, verbose=args.verbose)


def get_rng_from_args(args: argparse.Namespace) -> random.Random:
    if args.random_seed >= 0:
        return random.Random(args.random_seed)
    return random.Random()
