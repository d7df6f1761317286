"""Qt bridge to run rules-engine calls in a worker thread."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesspane.core.board import BoardState
from chesspane.core.types import Coordinate
from chesspane.engine.errors import error_kind_of
from chesspane.engine.interfaces import IRulesEngine
from chesspane.engine.rules import GAME_OVER_MESSAGE, LocalRulesEngine

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class EngineWorker(QObject):
    """Thread-affine worker that answers engine queries on demand.

    Every result is tagged with the caller's request id so the UI thread can
    drop responses it no longer cares about. Requests run one at a time in
    the order they were sent, restarts included.
    """

    initial_board_ready = pyqtSignal(int, object)
    legal_moves_ready = pyqtSignal(int, object, object)  # id, origin, destinations
    move_ready = pyqtSignal(int, object, str)  # id, board, game-over message or ""
    request_failed = pyqtSignal(int, int, str)  # id, ErrorKind, message
    request_cancelled = pyqtSignal(int)

    __slots__ = ("_engine", "_cancelled", "_cancel_lock")

    def __init__(self, engine: IRulesEngine | None = None) -> None:
        super().__init__()
        self._engine: IRulesEngine = (
            engine if engine is not None else LocalRulesEngine()
        )
        self._cancelled: set[int] = set()
        self._cancel_lock = threading.Lock()

    @property
    def engine(self) -> IRulesEngine:
        return self._engine

    @pyqtSlot(int, bool)
    def request_initial_board(self, request_id: int, restart: bool = False) -> None:
        def _load() -> BoardState:
            if restart:
                _LOGGER.info("Restarting engine session (request %d)", request_id)
                self._engine.reset()
            return self._engine.get_initial_board()

        self._run(
            request_id,
            _load,
            lambda board: self.initial_board_ready.emit(request_id, board),
        )

    @pyqtSlot(int, object)
    def request_legal_moves(self, request_id: int, origin_obj: object) -> None:
        if not isinstance(origin_obj, Coordinate):
            self._fail(request_id, TypeError("Engine received invalid origin"))
            return

        def _emit(result: object) -> None:
            self.legal_moves_ready.emit(request_id, origin_obj, tuple(result))

        self._run(
            request_id,
            lambda: self._engine.get_legal_moves(origin_obj),
            _emit,
        )

    @pyqtSlot(int, object, object)
    def request_move(
        self, request_id: int, origin_obj: object, destination_obj: object
    ) -> None:
        if not isinstance(origin_obj, Coordinate) or not isinstance(
            destination_obj, Coordinate
        ):
            self._fail(request_id, TypeError("Engine received invalid move"))
            return

        def _move() -> tuple[BoardState, bool]:
            board = self._engine.make_move(origin_obj, destination_obj)
            return board, self._engine.is_game_over

        def _emit(result: tuple[BoardState, bool]) -> None:
            board, concluded = result
            if concluded:
                _LOGGER.info("Move %s->%s ended the game", origin_obj, destination_obj)
            message = GAME_OVER_MESSAGE if concluded else ""
            self.move_ready.emit(request_id, board, message)

        self._run(request_id, _move, _emit)

    def cancel(self, request_id: int) -> None:
        """Skip *request_id* if it has not started yet.

        Called directly from the UI thread; the request queue itself is
        drained on the worker thread.
        """
        with self._cancel_lock:
            self._cancelled.add(request_id)

    def _take_cancelled(self, request_id: int) -> bool:
        # Requests arrive in id order, so lower ids can never show up again.
        with self._cancel_lock:
            cancelled = request_id in self._cancelled
            self._cancelled = {rid for rid in self._cancelled if rid > request_id}
            return cancelled

    def _run(
        self,
        request_id: int,
        call: Callable[[], _T],
        on_result: Callable[[_T], object],
    ) -> None:
        if self._take_cancelled(request_id):
            self.request_cancelled.emit(request_id)
            return
        try:
            result = call()
        except Exception as exc:
            self._fail(request_id, exc)
            return
        on_result(result)

    def _fail(self, request_id: int, exc: BaseException) -> None:
        kind = error_kind_of(exc)
        _LOGGER.warning("Engine request %d failed (%s): %s", request_id, kind.name, exc)
        self.request_failed.emit(request_id, int(kind), str(exc))
