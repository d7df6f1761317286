"""BoardStore - holder of the last engine-confirmed board."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chesspane.core.board import BoardState
from chesspane.core.types import ALL_COORDINATES, Coordinate

_LOGGER = logging.getLogger(__name__)

ReplacedCallback = Callable[[BoardState, frozenset[Coordinate]], None]


class BoardStore:
    """Single source of truth for board contents.

    Only whole, engine-confirmed states go in; there is no partial update.
    Listeners receive the new state and the squares whose piece changed.
    """

    __slots__ = ("_state", "_listeners")

    def __init__(self, initial: BoardState | None = None) -> None:
        self._state = initial if initial is not None else BoardState.starting()
        self._listeners: list[ReplacedCallback] = []

    def current(self) -> BoardState:
        return self._state

    def subscribe(self, callback: ReplacedCallback) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def replace(self, new_state: BoardState) -> frozenset[Coordinate]:
        """Swap in *new_state*; returns the coordinates that changed."""
        if not isinstance(new_state, BoardState):
            raise TypeError(f"Expected BoardState, got {type(new_state).__name__}")

        changed = self._state.changed_squares(new_state)
        self._state = new_state
        _LOGGER.debug(
            "Board replaced: turn=%d, %d squares changed", new_state.turn, len(changed)
        )
        for cb in list(self._listeners):
            cb(new_state, changed)
        return changed

    def reset(self, new_state: BoardState) -> frozenset[Coordinate]:
        """Replace and report every square as changed (new session)."""
        self._state = new_state
        changed = frozenset(ALL_COORDINATES)
        for cb in list(self._listeners):
            cb(new_state, changed)
        return changed
