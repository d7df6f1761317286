"""Rules engine contract consumed by the selection controller."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chesspane.core.board import BoardState
    from chesspane.core.types import Coordinate


class IRulesEngine(Protocol):
    """Authoritative rules service.

    ``make_move`` raises :class:`~chesspane.engine.errors.IllegalMove` or
    :class:`~chesspane.engine.errors.GameOver`; ``get_legal_moves`` may also
    raise ``GameOver`` once the session has concluded. Transports may raise
    :class:`~chesspane.engine.errors.TransportFailure`.

    ``is_game_over`` turns true as soon as a move concludes the session, so
    the move that ends the game is reported together with its board.
    """

    @property
    def is_game_over(self) -> bool: ...

    def reset(self) -> None:
        """Start a fresh session from the starting board."""
        ...

    def get_initial_board(self) -> BoardState: ...

    def get_legal_moves(self, origin: Coordinate) -> Sequence[Coordinate]: ...

    def make_move(self, origin: Coordinate, destination: Coordinate) -> BoardState: ...
