import pytest

from boggle_solver.tile import BLOCKED, InvalidFaceError, Tile, TileKind


def test_from_text():
    assert Tile.from_text("") == BLOCKED
    assert Tile.from_text("a") == Tile("A")
    assert Tile.from_text("Qu") == Tile("QU")

    assert Tile.from_text("").kind == TileKind.BLOCKED
    assert Tile.from_text("x").kind == TileKind.LETTER
    assert Tile.from_text("th").kind == TileKind.LIGATURE
    assert Tile.from_text("abc").kind == TileKind.LIGATURE


@pytest.mark.parametrize("face", ["1", "A1", "?", " ", "Q-U", "ß", "é"])
def test_invalid_face(face):
    with pytest.raises(InvalidFaceError):
        Tile.from_text(face)


def test_invalid_face_is_value_error():
    with pytest.raises(ValueError):
        Tile("a")


def test_alphabet_indices():
    assert Tile("A").alphabet_indices() == (1,)
    assert Tile("QU").alphabet_indices() == (17, 21)
    assert BLOCKED.alphabet_indices() == ()
    assert BLOCKED.is_blocked
    assert not Tile("Z").is_blocked


def test_str():
    assert str(Tile("QU")) == "QU"
    assert str(BLOCKED) == "█"
