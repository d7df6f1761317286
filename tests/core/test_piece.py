"""Tests for the Piece value object."""

import pytest

from chesspane.core.enums import Color, PieceKind
from chesspane.core.piece import Piece
from chesspane.core.types import Coordinate


def test_empty_piece() -> None:
    piece = Piece.empty(Coordinate(3, 3))
    assert piece.is_empty
    assert piece.color == Color.EMPTY
    assert str(piece) == "."
    assert piece.symbol == ""


@pytest.mark.parametrize(
    ("kind", "color"),
    [(PieceKind.EMPTY, Color.WHITE), (PieceKind.PAWN, Color.EMPTY)],
)
def test_kind_and_color_must_agree_on_emptiness(kind: PieceKind, color: Color) -> None:
    with pytest.raises(ValueError):
        Piece(Coordinate(0, 0), kind, color)


def test_fen_letter_case_follows_color() -> None:
    assert str(Piece(Coordinate(7, 6), PieceKind.KNIGHT, Color.WHITE)) == "N"
    assert str(Piece(Coordinate(0, 6), PieceKind.KNIGHT, Color.BLACK)) == "n"


def test_moved_to_keeps_identity_and_changes_coordinate() -> None:
    pawn = Piece(Coordinate(6, 4), PieceKind.PAWN, Color.WHITE)
    moved = pawn.moved_to(Coordinate(4, 4))
    assert moved.coordinate == Coordinate(4, 4)
    assert (moved.kind, moved.color) == (PieceKind.PAWN, Color.WHITE)
    assert pawn.coordinate == Coordinate(6, 4)


def test_same_glyph_for_both_colours() -> None:
    white = Piece(Coordinate(7, 4), PieceKind.KING, Color.WHITE)
    black = Piece(Coordinate(0, 4), PieceKind.KING, Color.BLACK)
    assert white.symbol == black.symbol == "♚"
