#!/usr/bin/env python
"""I/O-free performance test.

$ python -m boggle_solver.perf -d words.txt.gz --game classic --random_seed 808813 1000
"""

import argparse
import time

from boggle_solver.args import (
    add_standard_args,
    get_dictionary_from_args,
    get_rng_from_args,
)
from boggle_solver.dice import random_board
from boggle_solver.solver import find_words


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="Solver perf test",
        description="Measure the speed of board solving, free from I/O.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to solve",
        default=1_000,
        nargs="?",
    )
    args = parser.parse_args(argv)

    dictionary = get_dictionary_from_args(args)
    rng = get_rng_from_args(args)

    w, h = args.game.layout
    print(f"Generating {args.num_boards} {w}x{h} {args.game.value} boards...")
    boards = [random_board(args.game, rng) for _ in range(args.num_boards)]

    total_words = 0
    print("Solving boards...")
    start_s = time.time()
    for board in boards:
        total_words += len(find_words(board, dictionary))
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = len(boards) / elapsed_s

    print(f"{total_words=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")


if __name__ == "__main__":
    main()
