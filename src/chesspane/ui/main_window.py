"""MainWindow - top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chesspane.core.board import BoardState
from chesspane.core.enums import Color
from chesspane.core.types import Coordinate
from chesspane.engine.errors import ErrorKind
from chesspane.engine.interfaces import IRulesEngine
from chesspane.game.controller import SelectionController
from chesspane.game.interfaces import SelectionPhase
from chesspane.game.state import SelectionState
from chesspane.ui.board.board_view import BoardView
from chesspane.ui.bootstrap import resolve_log_level
from chesspane.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from chesspane.ui.engine_session import EngineSession
from chesspane.ui.i18n import set_language, t
from chesspane.ui.styles.theme import theme_by_name

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window for Chesspane.

    Args:
        engine: Rules engine to talk to; the in-process engine by default.
        settings: Initial settings.
        threaded: Run engine calls on a worker thread. Tests pass ``False``
            so answers arrive synchronously.
    """

    def __init__(
        self,
        *,
        engine: IRulesEngine | None = None,
        settings: AppSettings | None = None,
        threaded: bool = True,
    ) -> None:
        super().__init__()
        self.setMinimumSize(560, 640)
        self.resize(760, 840)

        self._settings = settings if settings is not None else AppSettings()
        self._engine_session = EngineSession(engine=engine, parent=self)
        self._controller = SelectionController(self._engine_session)
        self._engine_session.attach(self._controller)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_session_events()
        if threaded:
            self._engine_session.setup()

        self._apply_settings()
        self._controller.new_session()

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnBanner")
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._turn_label, alignment=Qt.AlignmentFlag.AlignHCenter)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_new_game = QAction(self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_flip = QAction(self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        self._menu_settings = menu_bar.addMenu("")
        assert self._menu_settings is not None

        self._act_settings = QAction(self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        assert self._menu_game is not None and self._menu_settings is not None
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        self._update_turn_label(self._controller.board)
        self._update_status()

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)

    def _connect_session_events(self) -> None:
        """Subscribe to SelectionController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_selection_changed, self._on_selection_changed)
        self._replace_callback(events.on_board_replaced, self._on_board_replaced)
        self._replace_callback(events.on_error, self._on_error)
        self._replace_callback(events.on_game_over, self._on_game_over)

    def _disconnect_session_events(self) -> None:
        events = self._controller.events
        self._remove_callback(events.on_selection_changed, self._on_selection_changed)
        self._remove_callback(events.on_board_replaced, self._on_board_replaced)
        self._remove_callback(events.on_error, self._on_error)
        self._remove_callback(events.on_game_over, self._on_game_over)

    @staticmethod
    def _replace_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Actions ──────────────────────────────────────────────────────────

    def _on_square_clicked(self, square: object) -> None:
        if isinstance(square, Coordinate):
            self._controller.click(square)

    def _on_new_game(self) -> None:
        self._controller.new_session(restart=True)

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())
        self._sync_scene()

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self._apply_settings()

    def _apply_settings(self) -> None:
        s = self._settings

        # Language first so every retranslated label uses the new locale
        set_language(s.language)
        self.retranslate_ui()

        level = resolve_log_level(s.log_level)
        if level is not None:
            logging.getLogger("chesspane").setLevel(level)

        scene = self._board_view.board_scene
        scene.set_theme(theme_by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        self._sync_scene()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_session_events()
        self._engine_session.shutdown()
        super().closeEvent(event)

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_selection_changed(
        self, selection: SelectionState, phase: SelectionPhase
    ) -> None:
        del selection
        self._sync_scene()
        self._board_view.board_scene.set_interactive(
            phase not in (SelectionPhase.LOADING, SelectionPhase.GAME_OVER)
        )
        self._update_status()

    def _on_board_replaced(
        self, board: BoardState, _changed: frozenset[Coordinate]
    ) -> None:
        self._sync_scene()
        self._update_turn_label(board)

    def _on_error(self, kind: ErrorKind, message: str) -> None:
        s = t()
        if kind == ErrorKind.ILLEGAL_MOVE:
            self._status_label.setText(s.status_illegal_move.format(msg=message))
        else:
            self._status_label.setText(s.status_engine_error.format(msg=message))

    def _on_game_over(self, message: str) -> None:
        text = t().status_game_over.format(msg=message)
        self._status_label.setText(text)
        self._update_turn_label(self._controller.board)
        QMessageBox.information(self, t().game_over_title, text)

    # ── Status helpers ───────────────────────────────────────────────────

    def _sync_scene(self) -> None:
        """Redraw from the confirmed board; nothing is drawn before it arrives."""
        if not self._controller.session.loaded:
            return
        self._board_view.board_scene.sync(
            self._controller.board, self._controller.selection
        )

    def _update_turn_label(self, board: BoardState) -> None:
        s = t()
        if self._controller.phase == SelectionPhase.GAME_OVER:
            self._turn_label.setText(s.game_over_title)
            return
        color = s.color_white if board.active_color == Color.WHITE else s.color_black
        self._turn_label.setText(s.turn_to_play.format(color=color))

    def _update_status(self) -> None:
        s = t()
        ctrl = self._controller
        selection = ctrl.selection
        phase = ctrl.phase

        if phase == SelectionPhase.LOADING:
            text = s.status_loading
        elif phase == SelectionPhase.GAME_OVER:
            text = s.status_game_over.format(msg=ctrl.session.game_over_message)
        elif phase == SelectionPhase.RESOLVING:
            text = s.status_submitting.format(
                origin=selection.origin, destination=selection.destination
            )
        elif phase == SelectionPhase.DESTINATION_PENDING:
            if not selection.legal_destinations and not ctrl.has_pending_request:
                text = s.status_no_moves.format(square=selection.origin)
            else:
                text = s.status_selected.format(square=selection.origin)
        else:
            text = s.status_ready
        self._status_label.setText(text)
