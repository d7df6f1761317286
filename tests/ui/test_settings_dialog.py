"""Tests for settings dialog widgets, themes and locales."""

from __future__ import annotations

import logging

from chesspane.game.decoration import Highlight
from chesspane.ui.bootstrap import resolve_log_level
from chesspane.ui.dialogs.settings_dialog import (
    AppSettings,
    SettingsDialog,
    _BoardPage,
    _GeneralPage,
)
from chesspane.ui.i18n import LANGUAGES, set_language, t
from chesspane.ui.styles.theme import THEMES, BoardTheme, theme_by_name


def test_dialog_accept_applies_changes_to_settings() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)

    board_page = next(page for page in dialog._pages if isinstance(page, _BoardPage))
    board_page._theme_combo.setCurrentText("Blue")
    board_page._coords_check.setChecked(False)
    board_page._legal_check.setChecked(False)

    general_page = next(
        page for page in dialog._pages if isinstance(page, _GeneralPage)
    )
    general_page._lang_combo.setCurrentText("Russian")
    general_page._level_combo.setCurrentText("DEBUG")

    dialog._on_accept()

    assert settings.board_theme == "Blue"
    assert settings.show_coordinates is False
    assert settings.show_legal_moves is False
    assert settings.language == "Russian"
    assert settings.log_level == "DEBUG"


def test_rejected_dialog_leaves_settings_alone() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)
    board_page = next(page for page in dialog._pages if isinstance(page, _BoardPage))
    board_page._theme_combo.setCurrentText("Green")

    dialog.reject()

    assert settings.board_theme == "Slate"


def test_theme_preview_follows_combo() -> None:
    page = _BoardPage(AppSettings(board_theme="Classic"))
    assert page._preview.theme_name() == "Classic"

    page._theme_combo.setCurrentText("Green")
    assert page._preview.theme_name() == "Green"


def test_dialog_retranslate_keeps_sidebar_items_populated() -> None:
    dialog = SettingsDialog(AppSettings())
    set_language("Russian")
    dialog.retranslate_ui()

    assert dialog._sidebar.count() == len(dialog._pages)
    assert dialog._sidebar.item(0).text() == "Общие"
    assert dialog.windowTitle() == "Настройки"


def test_locales_define_every_string() -> None:
    for language in LANGUAGES:
        set_language(language)
        strings = t()
        assert strings.turn_to_play.format(color=strings.color_white)
        assert strings.status_selected.format(square="e2")


def test_unknown_language_falls_back_to_english() -> None:
    set_language("Klingon")
    assert t().color_white == "White"


def test_every_theme_colours_every_highlight() -> None:
    for theme in THEMES.values():
        colours = {theme.square_color(h).name() for h in Highlight}
        assert len(colours) == len(Highlight)


def test_unknown_theme_falls_back_to_slate() -> None:
    assert theme_by_name("Nope") == BoardTheme.slate()


def test_log_level_names() -> None:
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("WARNING") == logging.WARNING
    assert resolve_log_level("chatty") is None
