"""Core domain layer - board value objects with no Qt dependency.

Quick start::

    from chesspane.core import BoardState, parse_square

    board = BoardState.starting()
    print(board[parse_square("e2")])
"""

from chesspane.core.board import STARTING_PLACEMENT, BoardState
from chesspane.core.enums import Color, PieceKind, active_color
from chesspane.core.piece import Piece
from chesspane.core.types import (
    ALL_COORDINATES,
    BOARD_SIZE,
    Coordinate,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    "active_color",
    # Types / helpers
    "ALL_COORDINATES",
    "BOARD_SIZE",
    "Coordinate",
    "parse_square",
    "square_name",
    # Domain objects
    "BoardState",
    "Piece",
    "STARTING_PLACEMENT",
]
