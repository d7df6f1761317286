"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chesspane.ui.dialogs.settings_dialog import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(name: str) -> int | None:
    """Numeric level for a name such as ``"debug"``; ``None`` if unknown."""
    return logging.getLevelNamesMapping().get(name.upper())


def _configure_logging(settings: AppSettings) -> None:
    level = resolve_log_level(settings.log_level)
    logging.basicConfig(
        level=level if level is not None else logging.INFO, format=_LOG_FORMAT
    )
    if level is None:
        _LOGGER.warning("Unknown log level %r, using INFO", settings.log_level)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chesspane.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chesspane")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chesspane.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    _configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings=settings)
    window.show()

    _LOGGER.info("Chesspane started")
    return app.exec()
