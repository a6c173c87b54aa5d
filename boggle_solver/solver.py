"""Find all the dictionary words on a board.

Depth-first search from every cell, descending the trie one tile at a time.
As soon as a tile's letters fall off the trie the path is abandoned, so only
real prefixes are ever extended.
"""

import multiprocessing

from tqdm import tqdm

from boggle_solver.board import Board
from boggle_solver.trie import Dictionary, index_letter


def chosen_string(chosen: list[int]) -> str:
    return "".join(index_letter(i) for i in chosen)


class Solver:
    """Search state for one (board, dictionary) pair.

    _chosen and _visited describe the path currently being explored. Every
    call to _find_words_rec restores them on the way out, so sibling branches
    never see each other's cells.
    """

    def __init__(self, board: Board, dictionary: Dictionary, debug=False):
        self._board = board
        self._dictionary = dictionary
        self._debug = debug
        self._chosen: list[int] = []
        self._visited: set[tuple[int, int]] = set()
        self._found: set[str] = set()

    def find_words(self) -> set[str]:
        out = set[str]()
        for x, y in self._board.cells():
            if self._debug:
                print(f"Starting at {x}x{y}")
            out.update(self.search_from(x, y))
        self._found = set()
        return out

    def search_from(self, x: int, y: int) -> set[str]:
        """Words found on paths starting at (x, y)."""
        self._found = set()
        self._find_words_rec(x, y, 0)
        return self._found

    def _find_words_rec(self, x: int, y: int, node: int):
        board = self._board
        d = self._dictionary
        chosen = self._chosen
        self._visited.add((x, y))
        in_chosen = len(chosen)
        try:
            # A ligature's letters must all match, in order, within this step.
            for letter in board.alphabet_indices(x, y):
                node = d.lookup_child(node, letter)
                if node == 0:
                    break
                chosen.append(letter)
                if self._debug:
                    self._debug_lookup(node)

            # node 0 is either a dead end or a blocked start cell (still at the root).
            if node == 0:
                return
            if d.is_word_end(node):
                self._found.add(chosen_string(chosen))
            for cell in board.neighbors(x, y):
                if cell not in self._visited and not board.tile(*cell).is_blocked:
                    self._find_words_rec(cell[0], cell[1], node)
        finally:
            self._visited.discard((x, y))
            del chosen[in_chosen:]

    def _debug_lookup(self, node: int):
        string = chosen_string(self._chosen)
        indent = " " * (len(string) - 1)
        print(f"{indent}{string} ({node})")


def find_words(board: Board, dictionary: Dictionary, debug=False) -> set[str]:
    return Solver(board, dictionary, debug).find_words()


def search_init(board: Board, dictionary: Dictionary):
    # Each worker process gets its own Solver, and with it its own path state.
    search_worker.solver = Solver(board, dictionary)


def search_worker(cell: tuple[int, int]) -> set[str]:
    solver: Solver = search_worker.solver
    return solver.search_from(*cell)


def find_words_parallel(
    board: Board, dictionary: Dictionary, processes: int | None = None, progress=False
) -> set[str]:
    """Same result as find_words, with one task per start cell."""
    cells = [*board.cells()]
    out = set[str]()
    with multiprocessing.Pool(processes, search_init, (board, dictionary)) as pool:
        it = pool.imap_unordered(search_worker, cells)
        if progress:
            it = tqdm(it, total=len(cells), desc="cells")
        for words in it:
            out.update(words)
    return out
