"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side colour of a piece. ``EMPTY`` marks an unoccupied square."""

    WHITE = 0
    BLACK = 1
    EMPTY = 2

    @property
    def opposite(self) -> Color:
        if self == Color.EMPTY:
            return Color.EMPTY
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds. ``EMPTY`` marks an unoccupied square."""

    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6
    EMPTY = 7


def active_color(turn: int) -> Color:
    """Side to move for *turn*: even → White, odd → Black."""
    if turn < 0:
        raise ValueError(f"Turn must be non-negative, got {turn}")
    return Color.WHITE if turn % 2 == 0 else Color.BLACK
