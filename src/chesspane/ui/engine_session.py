"""Engine request routing between the selection controller and the worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from chesspane.core.board import BoardState
from chesspane.core.types import Coordinate
from chesspane.engine.errors import ErrorKind
from chesspane.engine.interfaces import IRulesEngine
from chesspane.engine.qt_bridge import EngineWorker
from chesspane.game.controller import SelectionController
from chesspane.game.interfaces import IEngineClient

_LOGGER = logging.getLogger(__name__)


class _EngineBus(QObject):
    """Signal bridge living on the UI thread.

    Commands go out to the worker with queued delivery; worker answers are
    re-emitted here so the session callbacks always run on the UI thread.
    """

    initial_board_requested = pyqtSignal(int, bool)
    legal_moves_requested = pyqtSignal(int, object)
    move_requested = pyqtSignal(int, object, object)

    initial_board_ready = pyqtSignal(int, object)
    legal_moves_ready = pyqtSignal(int, object, object)
    move_ready = pyqtSignal(int, object, str)
    request_failed = pyqtSignal(int, int, str)
    request_cancelled = pyqtSignal(int)


class EngineSession(IEngineClient):
    """Owns the worker-thread lifecycle and hands answers back to the controller.

    Until :meth:`setup` starts the thread, requests run synchronously on
    the caller's thread.
    """

    _SHUTDOWN_TIMEOUT_MS = 2000

    __slots__ = (
        "_controller",
        "_bus",
        "_engine_thread",
        "_engine_worker",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        engine: IRulesEngine | None = None,
        parent: QObject | None = None,
    ) -> None:
        self._controller: SelectionController | None = None
        self._bus = _EngineBus(parent)
        self._engine_thread = QThread(parent)
        self._engine_worker = EngineWorker(engine)
        self._is_shutting_down = False
        self._is_started = False

        worker, bus = self._engine_worker, self._bus
        worker.initial_board_ready.connect(bus.initial_board_ready)
        worker.legal_moves_ready.connect(bus.legal_moves_ready)
        worker.move_ready.connect(bus.move_ready)
        worker.request_failed.connect(bus.request_failed)
        worker.request_cancelled.connect(bus.request_cancelled)
        bus.initial_board_ready.connect(self._on_initial_board)
        bus.legal_moves_ready.connect(self._on_legal_moves)
        bus.move_ready.connect(self._on_move_ready)
        bus.request_failed.connect(self._on_request_failed)
        bus.request_cancelled.connect(self._on_request_cancelled)

    @property
    def engine(self) -> IRulesEngine:
        return self._engine_worker.engine

    @property
    def is_started(self) -> bool:
        return self._is_started

    def attach(self, controller: SelectionController) -> None:
        """Route engine answers to *controller*."""
        self._controller = controller

    def setup(self) -> None:
        """Start the engine worker in a dedicated thread."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._engine_worker.moveToThread(self._engine_thread)
        bus = self._bus
        bus.initial_board_requested.connect(self._engine_worker.request_initial_board)
        bus.legal_moves_requested.connect(self._engine_worker.request_legal_moves)
        bus.move_requested.connect(self._engine_worker.request_move)
        self._engine_thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Stop the worker thread; answers still in flight are ignored."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self._engine_thread.quit()
        if not self._engine_thread.wait(self._SHUTDOWN_TIMEOUT_MS):
            _LOGGER.warning(
                "Engine thread did not stop within %d ms", self._SHUTDOWN_TIMEOUT_MS
            )
        self._is_started = False

    # ── IEngineClient impl ───────────────────────────────────────────────

    def request_initial_board(self, request_id: int, restart: bool = False) -> None:
        if self._is_shutting_down:
            return
        if self._is_started:
            self._bus.initial_board_requested.emit(request_id, restart)
            return
        self._engine_worker.request_initial_board(request_id, restart)

    def request_legal_moves(self, request_id: int, origin: Coordinate) -> None:
        if self._is_shutting_down:
            return
        if self._is_started:
            self._bus.legal_moves_requested.emit(request_id, origin)
            return
        self._engine_worker.request_legal_moves(request_id, origin)

    def request_move(
        self, request_id: int, origin: Coordinate, destination: Coordinate
    ) -> None:
        if self._is_shutting_down:
            return
        if self._is_started:
            self._bus.move_requested.emit(request_id, origin, destination)
            return
        self._engine_worker.request_move(request_id, origin, destination)

    def cancel(self, request_id: int) -> None:
        self._engine_worker.cancel(request_id)

    # ── Worker callbacks (UI thread) ─────────────────────────────────────

    def _on_initial_board(self, request_id: int, board_obj: object) -> None:
        if self._controller is None or self._is_shutting_down:
            return
        if not isinstance(board_obj, BoardState):
            self._report_bad_payload(request_id, board_obj)
            return
        self._controller.on_initial_board(request_id, board_obj)

    def _on_legal_moves(
        self, request_id: int, origin_obj: object, destinations_obj: object
    ) -> None:
        if self._controller is None or self._is_shutting_down:
            return
        if not isinstance(origin_obj, Coordinate) or not isinstance(
            destinations_obj, tuple
        ):
            self._report_bad_payload(request_id, destinations_obj)
            return
        self._controller.on_legal_moves(request_id, origin_obj, destinations_obj)

    def _on_move_ready(
        self, request_id: int, board_obj: object, game_over_message: str
    ) -> None:
        if self._controller is None or self._is_shutting_down:
            return
        if not isinstance(board_obj, BoardState):
            self._report_bad_payload(request_id, board_obj)
            return
        self._controller.on_move_result(request_id, board_obj, game_over_message)

    def _on_request_failed(self, request_id: int, kind: int, message: str) -> None:
        if self._controller is None or self._is_shutting_down:
            return
        self._controller.on_request_failed(request_id, ErrorKind(kind), message)

    def _on_request_cancelled(self, request_id: int) -> None:
        if self._controller is None or self._is_shutting_down:
            return
        self._controller.on_request_cancelled(request_id)

    def _report_bad_payload(self, request_id: int, payload: object) -> None:
        message = f"Unexpected engine payload: {type(payload).__name__}"
        _LOGGER.error("Request %d: %s", request_id, message)
        if self._controller is not None:
            self._controller.on_request_failed(
                request_id, ErrorKind.TRANSPORT_FAILURE, message
            )
