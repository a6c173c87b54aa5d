"""An immutable grid of tiles."""

import math
from typing import Iterator, Self, Sequence

from boggle_solver.neighbors import init_neighbors
from boggle_solver.tile import Tile


class DimensionError(ValueError):
    """Board width/height can't be worked out from the number of faces."""


def resolve_dimensions(
    num_faces: int, width: int | None = None, height: int | None = None
) -> tuple[int, int]:
    """Fill in whichever of width and height wasn't given."""
    if num_faces == 0:
        raise DimensionError("A board needs at least one face")
    if (width is not None and width <= 0) or (height is not None and height <= 0):
        raise DimensionError(f"Invalid board dimensions {width}x{height}")

    if width is not None and height is not None:
        w, h = width, height
    elif width is not None:
        h, rem = divmod(num_faces, width)
        if rem:
            raise DimensionError(
                "Unable to calculate board height from width and number of dice faces"
            )
        w = width
    elif height is not None:
        w, rem = divmod(num_faces, height)
        if rem:
            raise DimensionError(
                "Unable to calculate board width from height and number of dice faces"
            )
        h = height
    else:
        w = math.isqrt(num_faces)
        if w * w != num_faces:
            raise DimensionError(
                "Unable to calculate board size from number of dice faces"
            )
        h = w

    if w * h != num_faces:
        raise DimensionError(f"{w}x{h} board can't hold {num_faces} dice faces")
    return w, h


class Board:
    """Tiles in row-major order: tiles[y][x].

    The trie slot numbers for every cell are worked out up front since the
    solver looks them up on every step of every path.
    """

    def __init__(self, tiles: Sequence[Sequence[Tile]]):
        rows = tuple(tuple(row) for row in tiles)
        if not rows or not rows[0]:
            raise DimensionError("A board needs at least one tile")
        w = len(rows[0])
        if any(len(row) != w for row in rows):
            raise DimensionError("All rows of a board must be the same width")
        self._width = w
        self._height = len(rows)
        self._tiles = rows
        self._indices = tuple(tuple(t.alphabet_indices() for t in row) for row in rows)
        self._neighbors = init_neighbors(self._width, self._height)

    @staticmethod
    def from_faces(
        faces: Sequence[str], width: int | None = None, height: int | None = None
    ) -> Self:
        """Build a board from face strings such as ["A", "QU", "", "T"]."""
        w, h = resolve_dimensions(len(faces), width, height)
        tiles = [Tile.from_text(face) for face in faces]
        return Board([tiles[y * w : (y + 1) * w] for y in range(h)])

    @property
    def dimensions(self) -> tuple[int, int]:
        return self._width, self._height

    def tile(self, x: int, y: int) -> Tile:
        return self._tiles[y][x]

    def alphabet_indices(self, x: int, y: int) -> tuple[int, ...]:
        return self._indices[y][x]

    def neighbors(self, x: int, y: int) -> tuple[tuple[int, int], ...]:
        return self._neighbors[y][x]

    def cells(self) -> Iterator[tuple[int, int]]:
        for y in range(self._height):
            for x in range(self._width):
                yield x, y

    def render(self) -> str:
        """The grid as text, with columns padded to the longest face."""
        longest = max(len(str(t)) for row in self._tiles for t in row)
        return "\n".join(
            "".join(f" {str(t):<{longest}}" for t in row) for row in self._tiles
        )

    def __str__(self):
        return self.render()

    def __eq__(self, other):
        return isinstance(other, Board) and self._tiles == other._tiles

    def __hash__(self):
        return hash(self._tiles)
