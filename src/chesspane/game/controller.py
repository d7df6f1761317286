"""SelectionController - the click-driven selection / move-submission FSM.

Coordinates: SessionState (board store + selection), IEngineClient.
Emits events via simple callbacks so the UI / tests can subscribe.

States::

    IDLE ──click own piece──▶ DESTINATION_PENDING ──click legal target──▶ RESOLVING
      ▲                           │  ▲      (re-select own piece)            │
      │                           └──┘                                       │
      └──────────────── move accepted / transport failure ◀─────────────────┘
                                  illegal move ─▶ back to DESTINATION_PENDING
                        game-ending move or GameOver ─▶ GAME_OVER (terminal)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from chesspane.core.board import BoardState
from chesspane.core.types import Coordinate
from chesspane.engine.errors import ErrorKind
from chesspane.game.interfaces import IEngineClient, SelectionPhase
from chesspane.game.state import SelectionState, SessionState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[SelectionState, SelectionPhase], None]
BoardReplacedCallback = Callable[[BoardState, frozenset[Coordinate]], None]
ErrorCallback = Callable[[ErrorKind, str], None]  # kind, message
GameOverCallback = Callable[[str], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_board_replaced: list[BoardReplacedCallback] = field(default_factory=list)
    on_error: list[ErrorCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class _PendingRequest:
    request_id: int
    origin: Coordinate | None = None
    destination: Coordinate | None = None


# ── Controller ───────────────────────────────────────────────────────────────


class SelectionController:
    """Turns square clicks into engine queries and reconciles the answers.

    Every request carries a fresh id. A response whose id (or whose
    origin / destination) no longer matches what the controller is waiting
    for is stale and is dropped without touching any state.

    Thread-safety: all methods must be called from one thread (the UI
    thread). Engine answers are marshalled onto it by the engine session.
    """

    MAX_REJECTED_MOVES = 2
    _MAX_QUERY_RETRIES = 1

    __slots__ = (
        "_client",
        "_session",
        "_request_seq",
        "_board_request",
        "_legal_request",
        "_move_request",
        "_rejected_moves",
        "_query_retries",
        "events",
    )

    def __init__(
        self,
        client: IEngineClient,
        session: SessionState | None = None,
    ) -> None:
        self._client = client
        self._session = session if session is not None else SessionState()
        self._request_seq = 0
        self._board_request: _PendingRequest | None = None
        self._legal_request: _PendingRequest | None = None
        self._move_request: _PendingRequest | None = None
        self._rejected_moves = 0
        self._query_retries = 0
        self.events = SessionEvents()
        self._session.store.subscribe(self._emit_board_replaced)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def board(self) -> BoardState:
        return self._session.board

    @property
    def selection(self) -> SelectionState:
        return self._session.selection

    @property
    def phase(self) -> SelectionPhase:
        return self._session.phase

    @property
    def has_pending_request(self) -> bool:
        return any(
            r is not None
            for r in (self._board_request, self._legal_request, self._move_request)
        )

    # ── Session lifecycle ────────────────────────────────────────────────

    def new_session(self, *, restart: bool = False) -> None:
        """Forget the current game and ask the engine for a starting board.

        Outstanding requests are cancelled first. With *restart* the engine
        is told to begin a new game before it answers.
        """
        self._cancel_outstanding()
        self._session.reset()
        self._rejected_moves = 0
        self._board_request = _PendingRequest(self._next_request_id())
        self._emit_selection()
        self._client.request_initial_board(
            self._board_request.request_id, restart=restart
        )

    # ── User input ───────────────────────────────────────────────────────

    def click(self, square: Coordinate) -> bool:
        """Handle a click on *square*. Returns ``True`` if anything changed."""
        phase = self.phase
        if phase in (SelectionPhase.LOADING, SelectionPhase.GAME_OVER):
            _LOGGER.debug("Click on %s ignored in %s", square, phase.name)
            return False
        if phase == SelectionPhase.RESOLVING:
            # One submitted move at a time; duplicates are suppressed.
            _LOGGER.debug("Click on %s ignored while resolving", square)
            return False
        if not square.is_valid:
            return False

        board = self.board
        piece = board[square]
        own_piece = piece.color == board.active_color

        if phase == SelectionPhase.IDLE:
            if not own_piece:
                return False
            self._select(square)
            return True

        selection = self.selection
        if square == selection.origin:
            return False
        if own_piece:
            self._select(square)
            return True
        if square not in selection.legal_destinations:
            return False
        self._submit(square)
        return True

    # ── Engine responses ─────────────────────────────────────────────────

    def on_initial_board(self, request_id: int, board: BoardState) -> bool:
        pending = self._board_request
        if pending is None or pending.request_id != request_id:
            return self._drop_stale(request_id, "initial board")

        self._board_request = None
        self._session.selection = SelectionState()
        self._session.loaded = True
        self._session.store.reset(board)
        self._emit_selection()
        return True

    def on_legal_moves(
        self,
        request_id: int,
        origin: Coordinate,
        destinations: Iterable[Coordinate],
    ) -> bool:
        pending = self._legal_request
        selection = self.selection
        if (
            pending is None
            or pending.request_id != request_id
            or pending.origin != origin
            or selection.origin != origin
            or self.phase != SelectionPhase.DESTINATION_PENDING
        ):
            return self._drop_stale(request_id, f"legal moves for {origin}")

        self._legal_request = None
        self._session.selection = selection.with_legal(
            self._sanitise_destinations(origin, destinations)
        )
        self._emit_selection()
        return True

    def on_move_result(
        self, request_id: int, board: BoardState, game_over_message: str = ""
    ) -> bool:
        """Accept the engine's board for the submitted move.

        A non-empty *game_over_message* means this move ended the game; the
        final board is stored before the session turns terminal.
        """
        pending = self._move_request
        selection = self.selection
        if (
            pending is None
            or pending.request_id != request_id
            or selection.origin != pending.origin
            or selection.destination != pending.destination
        ):
            return self._drop_stale(request_id, "move result")

        self._move_request = None
        self._rejected_moves = 0

        previous_turn = self.board.turn
        if board.turn != previous_turn + 1:
            _LOGGER.warning(
                "Engine answered %s->%s with turn %d (was %d)",
                pending.origin,
                pending.destination,
                board.turn,
                previous_turn,
            )

        self._session.selection = selection.after_move()
        self._session.store.replace(board)
        if game_over_message:
            self._enter_game_over(game_over_message)
        else:
            self._emit_selection()
        return True

    def on_request_failed(self, request_id: int, kind: ErrorKind, message: str) -> bool:
        kind = ErrorKind(kind)
        if self._matches(self._board_request, request_id):
            self._board_request = None
            return self._fail_initial_board(kind, message)
        if self._matches(self._legal_request, request_id):
            self._legal_request = None
            return self._fail_legal_moves(kind, message)
        if self._matches(self._move_request, request_id):
            self._move_request = None
            return self._fail_move(kind, message)
        return self._drop_stale(request_id, f"{kind.name} failure")

    def on_request_cancelled(self, request_id: int) -> None:
        _LOGGER.debug("Engine skipped cancelled request %d", request_id)

    # ── Transitions ──────────────────────────────────────────────────────

    def _select(self, origin: Coordinate) -> None:
        if self._legal_request is not None:
            # Superseded: its answer will be dropped even if the cancel loses the race.
            self._client.cancel(self._legal_request.request_id)
            self._legal_request = None

        self._rejected_moves = 0
        self._query_retries = self._MAX_QUERY_RETRIES
        self._session.selection = self.selection.select(origin)
        _LOGGER.debug("Selected %s", origin)
        self._emit_selection()
        self._query_legal_moves(origin)

    def _query_legal_moves(self, origin: Coordinate) -> None:
        self._legal_request = _PendingRequest(self._next_request_id(), origin=origin)
        self._client.request_legal_moves(self._legal_request.request_id, origin)

    def _submit(self, destination: Coordinate) -> None:
        selection = self.selection
        if self._move_request is not None or selection.origin is None:
            return
        if destination not in selection.legal_destinations:
            return

        self._session.selection = selection.with_destination(destination)
        self._move_request = _PendingRequest(
            self._next_request_id(),
            origin=selection.origin,
            destination=destination,
        )
        _LOGGER.debug("Submitting %s->%s", selection.origin, destination)
        self._emit_selection()
        self._client.request_move(
            self._move_request.request_id, selection.origin, destination
        )

    def _fail_initial_board(self, kind: ErrorKind, message: str) -> bool:
        if kind == ErrorKind.GAME_OVER:
            self._enter_game_over(message)
            return True
        self._emit_error(kind, message)
        return True

    def _fail_legal_moves(self, kind: ErrorKind, message: str) -> bool:
        if kind == ErrorKind.GAME_OVER:
            self._enter_game_over(message)
            return True

        origin = self.selection.origin
        if (
            kind == ErrorKind.TRANSPORT_FAILURE
            and origin is not None
            and self._query_retries > 0
        ):
            self._query_retries -= 1
            _LOGGER.info("Retrying legal-move query for %s", origin)
            self._query_legal_moves(origin)
            return True

        self._session.selection = self.selection.cleared()
        self._emit_selection()
        self._emit_error(kind, message)
        return True

    def _fail_move(self, kind: ErrorKind, message: str) -> bool:
        if kind == ErrorKind.GAME_OVER:
            self._enter_game_over(message)
            return True

        if kind == ErrorKind.ILLEGAL_MOVE:
            self._rejected_moves += 1
            if self._rejected_moves < self.MAX_REJECTED_MOVES:
                # Keep origin and its legal set so the user can retry.
                self._session.selection = self.selection.without_destination()
                self._emit_selection()
                self._emit_error(kind, message)
                return True

        self._rejected_moves = 0
        self._session.selection = self.selection.cleared()
        self._emit_selection()
        self._emit_error(kind, message)
        return True

    def _enter_game_over(self, message: str) -> None:
        self._cancel_outstanding()
        self._session.game_over = True
        self._session.game_over_message = message
        self._session.selection = self.selection.cleared()
        _LOGGER.info("Game over: %s", message)
        self._emit_selection()
        for cb in self.events.on_game_over:
            cb(message)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _next_request_id(self) -> int:
        self._request_seq += 1
        return self._request_seq

    def _cancel_outstanding(self) -> None:
        for pending in (self._board_request, self._legal_request, self._move_request):
            if pending is not None:
                self._client.cancel(pending.request_id)
        self._board_request = None
        self._legal_request = None
        self._move_request = None

    @staticmethod
    def _matches(pending: _PendingRequest | None, request_id: int) -> bool:
        return pending is not None and pending.request_id == request_id

    @staticmethod
    def _drop_stale(request_id: int, what: str) -> bool:
        _LOGGER.debug("Dropping stale response %d (%s)", request_id, what)
        return False

    @staticmethod
    def _sanitise_destinations(
        origin: Coordinate, destinations: Iterable[Coordinate]
    ) -> frozenset[Coordinate]:
        received = frozenset(Coordinate(*d) for d in destinations)
        clean = frozenset(d for d in received if d.is_valid and d != origin)
        if clean != received:
            _LOGGER.warning(
                "Discarded invalid legal destinations for %s: %s",
                origin,
                sorted(received - clean),
            )
        return clean

    def _emit_selection(self) -> None:
        selection, phase = self.selection, self.phase
        for cb in self.events.on_selection_changed:
            cb(selection, phase)

    def _emit_board_replaced(
        self, state: BoardState, changed: frozenset[Coordinate]
    ) -> None:
        for cb in self.events.on_board_replaced:
            cb(state, changed)

    def _emit_error(self, kind: ErrorKind, message: str) -> None:
        _LOGGER.warning("%s: %s", kind.name, message)
        for cb in self.events.on_error:
            cb(kind, message)
