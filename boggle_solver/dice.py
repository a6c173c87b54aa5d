"""Dice sets for the various Boggle variants, and random boards rolled from them.

Letter distributions from https://boardgamegeek.com/thread/300883/letter-distribution

Each die is a string of six faces. A-Z are letters, "0" is a blank (blocked)
face and "1"-"6" are the ligatures listed in LIGATURES.
"""

import random
from enum import Enum

from boggle_solver.board import Board
from boggle_solver.tile import BLOCKED, InvalidFaceError, Tile

LIGATURES = {
    "1": "QU",
    "2": "IN",
    "3": "TH",
    "4": "ER",
    "5": "HE",
    "6": "AN",
}
BLANK = "0"
FACES_PER_DIE = 6


def parse_face(c: str) -> Tile:
    if c == BLANK:
        return BLOCKED
    if c in LIGATURES:
        return Tile(LIGATURES[c])
    if "A" <= c <= "Z":
        return Tile(c)
    raise InvalidFaceError(f"Unknown face value {c!r}")


class Die:
    faces: tuple[Tile, ...]

    def __init__(self, faces: str):
        if len(faces) != FACES_PER_DIE:
            raise InvalidFaceError(f"A die has {FACES_PER_DIE} faces: {faces!r}")
        self.faces = tuple(parse_face(c) for c in faces)

    def face(self, i: int) -> Tile:
        return self.faces[i]


class GameType(Enum):
    CLASSIC = "classic"
    NEW = "new"
    BIG_ORIGINAL = "big-original"
    BIG_CHALLENGE = "big-challenge"
    BIG_DELUXE = "big-deluxe"
    BIG_2012 = "big2012"
    SUPER_BIG = "super-big"

    def dice(self) -> list[Die]:
        return [Die(faces) for faces in DICE[self]]

    @property
    def layout(self) -> tuple[int, int]:
        return LAYOUTS[self]


# "Classic" Boggle dice, 1976 to 1986
CLASSIC_DICE = [
    "AACIOT", "ABILTY", "ABJMO1", "ACDEMP", "ACELRS", "ADENVZ", "AHMORS", "BIFORX",
    "DENOSW", "DKNOTU", "EEFHIY", "EGKLUY", "EGINTV", "EHINPS", "ELPSTU", "GILRUW",
]  # fmt: skip

# "New" Boggle dice, 1987 onwards
NEW_DICE = [
    "AAEEGN", "ABBJOO", "ACHOPS", "AFFKPS", "AOOTTW", "CIMOTU", "DEILRX", "DELRVY",
    "DISTTY", "EEGHNW", "EEINSU", "EHRTVW", "EIOSST", "ELRTTY", "HIMNU1", "HLNNRZ",
]  # fmt: skip

BIG_ORIGINAL_DICE = [
    "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM", "AEEGMU", "AEGMNN", "AFIRSY",
    "BJK1XZ", "CCENST", "CEIILT", "CEIPST", "DDHNOT", "DHHLOR", "DHHLOR", "DHLNOR",
    "EIIITT", "CEILPT", "EMOTTT", "ENSSSU", "FIPRSY", "GORRVW", "IPRRRY", "NOOTUW",
    "OOOTTU",
]  # fmt: skip

BIG_CHALLENGE_DICE = [
    "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM", "AEEGMU", "AEGMNN", "AFIRSY",
    "BJK1XZ", "CCENST", "CEIILT", "CEIPST", "DDHNOT", "DHHLOR", "IKLM1U", "DHLNOR",
    "EIIITT", "CEILPT", "EMOTTT", "ENSSSU", "FIPRSY", "GORRVW", "IPRRRY", "NOOTUW",
    "OOOTTU",
]  # fmt: skip

BIG_DELUXE_DICE = [
    "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM", "AEEGMU", "AEGMNN", "AFIRSY",
    "BJK1XZ", "CCNSTW", "CEIILT", "CEIPST", "DDLNOR", "DHHLOR", "DHHNOT", "DHLNOR",
    "EIIITT", "CEILPT", "EMOTTT", "ENSSSU", "FIPRSY", "GORRVW", "HIPRRY", "NOOTUW",
    "OOOTTU",
]  # fmt: skip

BIG_2012_DICE = [
    "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM", "AEEGMU", "AEGMNN", "AFIRSY",
    "BBJKXZ", "CCENST", "EIILST", "CEIPST", "DDHNOT", "DHHLOR", "DHHNOW", "DHLNOR",
    "EIIITT", "EILPST", "EMOTTT", "ENSSSU", "123456", "GORRVW", "IPRSYY", "NOOTUW",
    "OOOTTU",
]  # fmt: skip

SUPER_BIG_DICE = [
    "AAAFRS", "AAEEEE", "AAEEOO", "AAFIRS", "ABDEIO", "ADENNN", "AEEEEM", "AEEGMU",
    "AEGMNN", "AEILMN", "AEINOU", "AFIRSY", "123456", "BBJKXZ", "CCENST", "CDDLNN",
    "CEIITT", "CEIPST", "CFGNUY", "DDHNOT", "DHHLOR", "DHHNOW", "DHLNOR", "EHILRS",
    "EIILST", "EILPST", "EIO000", "EMTTTO", "ENSSSU", "GORRVW", "HIRSTV", "HOPRST",
    "IPRSYY", "JK1WXZ", "NOOTUW", "OOOTTU",
]  # fmt: skip

DICE = {
    GameType.CLASSIC: CLASSIC_DICE,
    GameType.NEW: NEW_DICE,
    GameType.BIG_ORIGINAL: BIG_ORIGINAL_DICE,
    GameType.BIG_CHALLENGE: BIG_CHALLENGE_DICE,
    GameType.BIG_DELUXE: BIG_DELUXE_DICE,
    GameType.BIG_2012: BIG_2012_DICE,
    GameType.SUPER_BIG: SUPER_BIG_DICE,
}

LAYOUTS = {
    GameType.CLASSIC: (4, 4),
    GameType.NEW: (4, 4),
    GameType.BIG_ORIGINAL: (5, 5),
    GameType.BIG_CHALLENGE: (5, 5),
    GameType.BIG_DELUXE: (5, 5),
    GameType.BIG_2012: (5, 5),
    GameType.SUPER_BIG: (6, 6),
}


def random_board(game_type: GameType, rng: random.Random) -> Board:
    """Shake the dice: each die lands in one cell, showing one random face."""
    w, h = game_type.layout
    dice = game_type.dice()
    rows = []
    for _y in range(h):
        row = []
        for _x in range(w):
            die = dice.pop(rng.randrange(len(dice)))
            row.append(die.face(rng.randrange(FACES_PER_DIE)))
        rows.append(row)
    return Board(rows)
