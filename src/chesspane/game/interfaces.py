"""Abstract interfaces for the game layer.

The selection controller depends on these, not on the Qt engine session,
so it can be driven synchronously from tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesspane.core.types import Coordinate


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states of the selection controller."""

    LOADING = auto()  # waiting for the initial board
    IDLE = auto()
    DESTINATION_PENDING = auto()
    RESOLVING = auto()  # move submitted, awaiting the engine
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IEngineClient(ABC):
    """Asynchronous channel to the rules engine.

    Requests return immediately. Results are delivered later to the
    controller's ``on_*`` methods carrying the same ``request_id``.
    """

    @abstractmethod
    def request_initial_board(self, request_id: int, restart: bool = False) -> None:
        """Ask for the session's starting board.

        With *restart* the engine first starts a new game. The restart is
        queued behind requests already sent, so a move still in flight
        cannot land on the fresh board.
        """

    @abstractmethod
    def request_legal_moves(self, request_id: int, origin: Coordinate) -> None:
        """Ask for legal destinations of the piece on *origin*."""

    @abstractmethod
    def request_move(
        self, request_id: int, origin: Coordinate, destination: Coordinate
    ) -> None:
        """Submit a move and ask for the resulting board."""

    @abstractmethod
    def cancel(self, request_id: int) -> None:
        """Best-effort cancellation; a late response is still possible."""
