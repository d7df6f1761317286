"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesspane.core.enums import Color, PieceKind
from chesspane.core.types import Coordinate

_UNICODE: dict[PieceKind, str] = {
    PieceKind.KING: "♚",
    PieceKind.QUEEN: "♛",
    PieceKind.ROOK: "♜",
    PieceKind.BISHOP: "♝",
    PieceKind.KNIGHT: "♞",
    PieceKind.PAWN: "♟",
}

_LETTERS: dict[PieceKind, str] = {
    PieceKind.KING: "K",
    PieceKind.QUEEN: "Q",
    PieceKind.ROOK: "R",
    PieceKind.BISHOP: "B",
    PieceKind.KNIGHT: "N",
    PieceKind.PAWN: "P",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable occupant of a square (possibly ``EMPTY``)."""

    coordinate: Coordinate
    kind: PieceKind
    color: Color

    def __post_init__(self) -> None:
        if (self.kind == PieceKind.EMPTY) != (self.color == Color.EMPTY):
            raise ValueError(
                f"Inconsistent piece at {self.coordinate}: "
                f"{self.color.name} {self.kind.name}"
            )

    @classmethod
    def empty(cls, coordinate: Coordinate) -> Piece:
        return cls(coordinate, PieceKind.EMPTY, Color.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.kind == PieceKind.EMPTY

    def moved_to(self, coordinate: Coordinate) -> Piece:
        """Same kind and colour placed on *coordinate*."""
        return Piece(coordinate, self.kind, self.color)

    @property
    def symbol(self) -> str:
        """Unicode glyph (filled set; colour is applied when drawing)."""
        return _UNICODE.get(self.kind, "")

    def __str__(self) -> str:
        """FEN-style letter: uppercase = white, lowercase = black, '.' = empty."""
        if self.is_empty:
            return "."
        letter = _LETTERS[self.kind]
        return letter if self.color == Color.WHITE else letter.lower()
