"""The contents of a single board cell.

A tile is a single letter, a multi-letter ligature (e.g. "QU") which is
matched as a unit, or blocked. Blocked tiles can't be part of any word.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from boggle_solver.trie import letter_index

BLOCKED_GLYPH = "█"


class InvalidFaceError(ValueError):
    """A face contains something other than the letters A-Z."""


class TileKind(Enum):
    LETTER = "letter"
    LIGATURE = "ligature"
    BLOCKED = "blocked"


def is_ascii_upper(text: str) -> bool:
    return all("A" <= c <= "Z" for c in text)


@dataclass(frozen=True)
class Tile:
    text: str

    def __post_init__(self):
        if not is_ascii_upper(self.text):
            raise InvalidFaceError(f"Invalid face {self.text!r}")

    @property
    def kind(self) -> TileKind:
        n = len(self.text)
        if n == 0:
            return TileKind.BLOCKED
        return TileKind.LETTER if n == 1 else TileKind.LIGATURE

    @property
    def is_blocked(self) -> bool:
        return self.text == ""

    def alphabet_indices(self) -> tuple[int, ...]:
        """Trie slot numbers (1-26) for each letter on this tile."""
        return tuple(letter_index(c) for c in self.text)

    def __str__(self):
        return self.text or BLOCKED_GLYPH

    @staticmethod
    def from_text(text: str) -> Self:
        """Parse a face: "" is blocked, "a" is a letter, "qu" is a ligature.

        Case is ignored. Raises InvalidFaceError for anything non-alphabetic.
        """
        # str.upper() maps some non-ASCII letters onto A-Z, e.g. "ß" -> "SS".
        if not text.isascii():
            raise InvalidFaceError(f"Invalid face {text!r}")
        return Tile(text.upper())


BLOCKED = Tile("")
