"""In-process reference rules engine.

Generates pseudo-legal destinations only: no check detection, castling,
en passant or promotion. The game ends when a king is captured.
"""

from __future__ import annotations

import logging
import threading

from chesspane.core.board import BoardState
from chesspane.core.enums import Color, PieceKind
from chesspane.core.types import Coordinate
from chesspane.engine.errors import GameOver, IllegalMove

_LOGGER = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "The game is over"

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL = ((1, 1), (-1, -1), (1, -1), (-1, 1))
_KNIGHT_JUMPS = (
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
)

_SLIDES: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.ROOK: _ORTHOGONAL,
    PieceKind.BISHOP: _DIAGONAL,
    PieceKind.QUEEN: _ORTHOGONAL + _DIAGONAL,
}

# White moves toward rank 0, Black toward rank 7.
_PAWN_STEP = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_HOME_RANK = {Color.WHITE: 6, Color.BLACK: 1}


def destinations(board: BoardState, origin: Coordinate) -> list[Coordinate]:
    """Pseudo-legal destinations for the piece on *origin* (ignores turn)."""
    piece = board[origin]
    if piece.is_empty:
        return []

    if piece.kind in _SLIDES:
        return _slide_targets(board, origin, piece.color, _SLIDES[piece.kind])
    if piece.kind == PieceKind.KNIGHT:
        return _step_targets(board, origin, piece.color, _KNIGHT_JUMPS)
    if piece.kind == PieceKind.KING:
        return _step_targets(board, origin, piece.color, _ORTHOGONAL + _DIAGONAL)
    return _pawn_targets(board, origin, piece.color)


def _slide_targets(
    board: BoardState,
    origin: Coordinate,
    color: Color,
    directions: tuple[tuple[int, int], ...],
) -> list[Coordinate]:
    targets: list[Coordinate] = []
    for d_rank, d_file in directions:
        sq = origin.offset(d_rank, d_file)
        while sq.is_valid and board[sq].is_empty:
            targets.append(sq)
            sq = sq.offset(d_rank, d_file)
        if sq.is_valid and board[sq].color == color.opposite:
            targets.append(sq)
    return targets


def _step_targets(
    board: BoardState,
    origin: Coordinate,
    color: Color,
    offsets: tuple[tuple[int, int], ...],
) -> list[Coordinate]:
    targets: list[Coordinate] = []
    for d_rank, d_file in offsets:
        sq = origin.offset(d_rank, d_file)
        if sq.is_valid and board[sq].color != color:
            targets.append(sq)
    return targets


def _pawn_targets(
    board: BoardState, origin: Coordinate, color: Color
) -> list[Coordinate]:
    step = _PAWN_STEP[color]
    targets: list[Coordinate] = []

    one = origin.offset(step, 0)
    if one.is_valid and board[one].is_empty:
        targets.append(one)
        two = origin.offset(2 * step, 0)
        if origin.rank == _PAWN_HOME_RANK[color] and board[two].is_empty:
            targets.append(two)

    for d_file in (-1, 1):
        sq = origin.offset(step, d_file)
        if sq.is_valid and board[sq].color == color.opposite:
            targets.append(sq)
    return targets


class LocalRulesEngine:
    """Holds one game's board and serialises access with a lock.

    Safe to call from an engine worker thread while the UI thread reads
    its own confirmed copy of the board.
    """

    __slots__ = ("_board", "_lock")

    def __init__(self, board: BoardState | None = None) -> None:
        self._board = board if board is not None else BoardState.starting()
        self._lock = threading.Lock()

    def reset(self, board: BoardState | None = None) -> None:
        with self._lock:
            self._board = board if board is not None else BoardState.starting()

    @property
    def is_game_over(self) -> bool:
        with self._lock:
            return self._is_game_over()

    def get_initial_board(self) -> BoardState:
        with self._lock:
            return self._board

    def get_legal_moves(self, origin: Coordinate) -> list[Coordinate]:
        with self._lock:
            if self._is_game_over():
                raise GameOver(GAME_OVER_MESSAGE)
            if not origin.is_valid:
                return []
            piece = self._board[origin]
            if piece.color != self._board.active_color:
                return []
            return destinations(self._board, origin)

    def make_move(self, origin: Coordinate, destination: Coordinate) -> BoardState:
        with self._lock:
            if self._is_game_over():
                raise GameOver(GAME_OVER_MESSAGE)
            if not origin.is_valid or not destination.is_valid:
                raise IllegalMove(f"Off-board move {origin}->{destination}")

            piece = self._board[origin]
            if piece.color != self._board.active_color:
                raise IllegalMove(f"Not {piece.color}'s turn to move from {origin}")

            legal = destinations(self._board, origin)
            if destination not in legal:
                raise IllegalMove(f"{origin}->{destination} is not legal")

            self._board = self._board.with_move(origin, destination)
            _LOGGER.debug(
                "Move %s->%s applied, turn=%d", origin, destination, self._board.turn
            )
            return self._board

    def _is_game_over(self) -> bool:
        return not (
            self._board.has_king(Color.WHITE) and self._board.has_king(Color.BLACK)
        )
