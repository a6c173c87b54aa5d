#!/usr/bin/env python
"""Find all the words on a Boggle board and print them.

    $ python -m boggle_solver.solve -d words.txt.gz C A T S R E P O B O N E D I G S
    $ python -m boggle_solver.solve --game big-deluxe --random_seed 42

Faces are given row-major. "QU" and friends are ligatures and "" is a
blocked cell. With no faces, a random board is rolled for the game variant.
"""

import argparse
import sys
import time

from boggle_solver.args import (
    DEFAULT_DICTIONARIES,
    add_standard_args,
    get_dictionary_from_args,
    get_rng_from_args,
)
from boggle_solver.board import Board, DimensionError
from boggle_solver.dice import random_board
from boggle_solver.solver import find_words, find_words_parallel
from boggle_solver.tile import InvalidFaceError
from boggle_solver.trie import DictionaryIOError
from boggle_solver.util import group_by


def format_results(words: set[str]) -> str:
    """One line per word length, shortest first."""
    by_len = group_by(sorted(words, key=lambda w: (len(w), w)), len)
    lines = [f"{n} letters: {' '.join(ws)}" for n, ws in by_len.items()]
    lines.append(f"{len(words)} words found")
    return "\n".join(lines)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="Boggle solver",
        description="Find all the words on a Boggle board",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument("-x", "--width", type=int, help="Board width.")
    parser.add_argument("-y", "--height", type=int, help="Board height.")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Trace every dictionary lookup made by the search.",
    )
    parser.add_argument(
        "--processes",
        type=int,
        default=0,
        help="Search start cells in parallel using this many processes.",
    )
    parser.add_argument(
        "faces",
        metavar="FACE",
        nargs="*",
        help="Dice faces to use. If none given a random board is generated.",
    )
    args = parser.parse_args(argv)
    if args.debug and args.processes > 0:
        parser.error("--debug can't be combined with --processes")

    if not args.dictionary:
        sys.stderr.write(
            "No dictionary file given and none of the default dictionaries could be found.\n"
            "Default dictionaries are:\n"
        )
        for d in DEFAULT_DICTIONARIES:
            sys.stderr.write(f"  {d}\n")
        sys.exit(1)

    try:
        dictionary = get_dictionary_from_args(args)
        if args.faces:
            board = Board.from_faces(args.faces, args.width, args.height)
        else:
            board = random_board(args.game, get_rng_from_args(args))
    except (DictionaryIOError, DimensionError, InvalidFaceError) as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    print("Board:")
    print(board.render())

    start_s = time.time()
    if args.processes > 0:
        words = find_words_parallel(
            board, dictionary, args.processes, progress=args.verbose
        )
    else:
        words = find_words(board, dictionary, debug=args.debug)
    elapsed_s = time.time() - start_s
    if args.verbose:
        print(f"Search took {elapsed_s:.02f} seconds")

    print(format_results(words))


if __name__ == "__main__":
    main()
