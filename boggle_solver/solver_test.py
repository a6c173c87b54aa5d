import functools
import os

import pytest
from inline_snapshot import snapshot

from boggle_solver.board import Board
from boggle_solver.solver import Solver, find_words, find_words_parallel
from boggle_solver.trie import Dictionary, WordSizeConstraint

WORDS = os.path.join(os.path.dirname(__file__), "..", "testdata", "words.txt")


@functools.cache
def get_dictionary():
    return Dictionary.from_file(WORDS, WordSizeConstraint(min=3))


def brute_force_words(board: Board, dictionary: Dictionary) -> set[str]:
    """Walk every simple path that spells a prefix of some dictionary word."""
    words = {w.upper() for w in dictionary.words()}
    prefixes = {w[:i] for w in words for i in range(len(w) + 1)}
    out = set()

    def walk(path: list[tuple[int, int]], text: str):
        if text not in prefixes:
            return
        if text in words:
            out.add(text)
        for n in board.neighbors(*path[-1]):
            if n not in path and not board.tile(*n).is_blocked:
                walk(path + [n], text + board.tile(*n).text)

    for cell in board.cells():
        if not board.tile(*cell).is_blocked:
            walk([cell], board.tile(*cell).text)
    return out


def test_find_words_44():
    board = Board.from_faces([*"CATSREPOBONEDIGS"])
    words = find_words(board, get_dictionary())
    assert sorted(words) == snapshot(
        [
            "APE",
            "BONE",
            "BONES",
            "CAR",
            "CARE",
            "CAT",
            "CATS",
            "DIG",
            "DIGS",
            "NOPE",
            "ONE",
            "ONES",
            "OPEN",
            "PEN",
            "TEA",
        ]
    )
    assert words == brute_force_words(board, get_dictionary())


@pytest.mark.parametrize(
    "faces",
    [
        "C A T S R E P O B O N E D I G S",
        "QU I T E S A N D R",
        "B O N E S . E . R",
        "O P E N E P O . N . E . P O N E",
        "T E A P O T S E A",
    ],
)
def test_matches_brute_force(faces):
    board = Board.from_faces([f.replace(".", "") for f in faces.split(" ")])
    d = get_dictionary()
    assert find_words(board, d) == brute_force_words(board, d)


def test_cat_needs_adjacent_path():
    d = Dictionary.from_wordlist(["cat", "car", "care"], WordSizeConstraint(min=3))

    # C A
    # R T
    board = Board.from_faces([*"CART"])
    assert find_words(board, d) == {"CAT", "CAR"}

    # C A R T: every letter is on the board but T isn't next to A.
    board = Board.from_faces([*"CART"], width=4)
    assert find_words(board, d) == {"CAR"}


def test_ligature_is_matched_as_a_unit():
    d = Dictionary.from_wordlist(["quiz", "quit", "qi", "uz", "zit"])
    # QU I
    # Z  T
    board = Board.from_faces(["QU", "I", "Z", "T"])
    assert find_words(board, d) == {"QUIZ", "QUIT", "ZIT"}


def test_blocked_tile_is_never_traversed():
    d = Dictionary.from_wordlist(["be", "bxe", "bye"])
    # B X X
    # X . X
    # X X E
    board = Board.from_faces(["B", "X", "X", "X", "", "X", "X", "X", "E"])
    assert find_words(board, d) == set()

    # Same board with the center filled in.
    board = Board.from_faces(["B", "X", "X", "X", "Y", "X", "X", "X", "E"])
    assert find_words(board, d) == {"BYE"}


def test_blocked_start_cell():
    # The empty word is in the dictionary, but a blocked cell never reports it.
    d = Dictionary.from_string("\nat\n")
    assert d.is_word_end(0)
    board = Board.from_faces(["", "A", "T", ""])
    assert find_words(board, d) == {"AT"}
    assert find_words(Board.from_faces([""]), d) == set()


def test_one_by_one():
    board = Board.from_faces(["A"])
    assert find_words(board, Dictionary.from_wordlist(["a", "at"])) == {"A"}
    min3 = Dictionary.from_wordlist(["a", "at"], WordSizeConstraint(min=3))
    assert find_words(board, min3) == set()


def test_no_revisit():
    d = Dictionary.from_wordlist(["aba", "ab", "abc"])
    board = Board.from_faces([*"ABCD"])
    assert find_words(board, d) == {"AB", "ABC"}


def test_deduplication():
    # "TAT" can be traced several ways on this board.
    d = Dictionary.from_wordlist(["tat", "at"])
    board = Board.from_faces([*"TAAT"])
    assert find_words(board, d) == {"TAT", "AT"}


def test_path_state_is_restored():
    board = Board.from_faces([*"CATSREPOBONEDIGS"])
    solver = Solver(board, get_dictionary())
    first = solver.find_words()
    assert solver._chosen == []
    assert solver._visited == set()
    assert solver._found == set()
    assert solver.find_words() == first

    by_cell = set().union(*(solver.search_from(x, y) for x, y in board.cells()))
    assert by_cell == first


def test_debug_trace(capsys):
    d = Dictionary.from_wordlist(["at"])
    find_words(Board.from_faces([*"AT"], width=2), d, debug=True)
    assert capsys.readouterr().out.splitlines() == snapshot(
        ["Starting at 0x0", "A (1)", " AT (2)", "Starting at 1x0"]
    )


def test_find_words_parallel():
    board = Board.from_faces([*"CATSREPOBONEDIGS"])
    d = get_dictionary()
    assert find_words_parallel(board, d, processes=2) == find_words(board, d)
