"""SelectionState and SessionState - the owned state of one game session."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from chesspane.core.board import BoardState
from chesspane.core.enums import Color
from chesspane.core.types import Coordinate
from chesspane.game.interfaces import SelectionPhase
from chesspane.game.store import BoardStore


@dataclass(frozen=True, slots=True)
class SelectionState:
    """Transient interaction state.

    Invariants (checked on construction):
        * ``destination`` set ⇒ ``origin`` set
        * ``legal_destinations`` non-empty ⇒ ``origin`` set
        * ``destination`` set ⇒ ``destination in legal_destinations``
    """

    origin: Coordinate | None = None
    destination: Coordinate | None = None
    last_moved: Coordinate | None = None
    legal_destinations: frozenset[Coordinate] = frozenset()

    def __post_init__(self) -> None:
        if self.destination is not None and self.origin is None:
            raise ValueError("Destination requires an origin")
        if self.legal_destinations and self.origin is None:
            raise ValueError("Legal destinations require an origin")
        if (
            self.destination is not None
            and self.destination not in self.legal_destinations
        ):
            raise ValueError(f"Destination {self.destination} is not a legal target")

    # ── Transitions (each returns a new state) ───────────────────────────

    def select(self, origin: Coordinate) -> SelectionState:
        return SelectionState(origin=origin, last_moved=self.last_moved)

    def with_legal(self, destinations: Iterable[Coordinate]) -> SelectionState:
        return replace(self, legal_destinations=frozenset(destinations))

    def with_destination(self, destination: Coordinate) -> SelectionState:
        return replace(self, destination=destination)

    def without_destination(self) -> SelectionState:
        return replace(self, destination=None)

    def cleared(self) -> SelectionState:
        """Drop the selection, keep the last-moved marker."""
        return SelectionState(last_moved=self.last_moved)

    def after_move(self) -> SelectionState:
        """Reset after an accepted move; the destination becomes last-moved."""
        return SelectionState(last_moved=self.destination)


@dataclass
class SessionState:
    """Everything one game session owns; no process-wide singletons."""

    store: BoardStore = field(default_factory=BoardStore)
    selection: SelectionState = field(default_factory=SelectionState)
    loaded: bool = False
    game_over: bool = False
    game_over_message: str = ""

    @property
    def board(self) -> BoardState:
        return self.store.current()

    @property
    def active_color(self) -> Color:
        return self.board.active_color

    @property
    def phase(self) -> SelectionPhase:
        if self.game_over:
            return SelectionPhase.GAME_OVER
        if not self.loaded:
            return SelectionPhase.LOADING
        if self.selection.destination is not None:
            return SelectionPhase.RESOLVING
        if self.selection.origin is not None:
            return SelectionPhase.DESTINATION_PENDING
        return SelectionPhase.IDLE

    def reset(self) -> None:
        """Back to a fresh, not-yet-loaded session (board is kept until replaced)."""
        self.selection = SelectionState()
        self.loaded = False
        self.game_over = False
        self.game_over_message = ""
