"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from chesspane.core.board import BoardState

# Headless Linux runners have no display; Qt needs the offscreen platform there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _needs_qt(request: pytest.FixtureRequest) -> bool:
    parts = Path(str(request.node.fspath)).parts
    return "ui" in parts or "engine" in parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """One QApplication for the whole run."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def starting_board() -> BoardState:
    return BoardState.starting()


@pytest.fixture(autouse=True)
def _english_locale() -> Iterator[None]:
    """Locale is module state in ``chesspane.ui.i18n``; keep tests isolated."""
    from chesspane.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _qt_environment(request: pytest.FixtureRequest) -> Iterator[None]:
    """Provide the app to Qt-backed tests and close their windows afterwards."""
    if not _needs_qt(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
