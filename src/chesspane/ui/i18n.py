"""Internationalisation strings for Chesspane UI.

Usage::

    from chesspane.ui.i18n import t, set_language

    set_language("Russian")
    print(t().menu_new_game)       # "&Новая игра"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_flip_board: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str

    turn_to_play: str  # "{color} to play"
    color_white: str
    color_black: str

    status_ready: str
    status_loading: str
    status_selected: str  # "Selected {square}"
    status_no_moves: str  # "No legal moves from {square}"
    status_submitting: str  # "Moving {origin} → {destination}..."
    status_illegal_move: str  # "Move rejected: {msg}"
    status_engine_error: str  # "Engine unavailable: {msg}"
    status_game_over: str  # "Game over: {msg}"

    game_over_title: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_general: str
    settings_board: str
    settings_language: str
    settings_log_level: str
    settings_board_theme: str
    settings_show_coords: str
    settings_show_legal: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Chesspane",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_settings_action="&Settings...",
    turn_to_play="{color} to play",
    color_white="White",
    color_black="Black",
    status_ready="Ready",
    status_loading="Loading board...",
    status_selected="Selected {square}",
    status_no_moves="No legal moves from {square}",
    status_submitting="Moving {origin} → {destination}...",
    status_illegal_move="Move rejected: {msg}",
    status_engine_error="Engine unavailable, try again: {msg}",
    status_game_over="Game over: {msg}",
    game_over_title="Game Over",
    settings_title="Settings",
    settings_general="General",
    settings_board="Board",
    settings_language="Language",
    settings_log_level="Log level",
    settings_board_theme="Board theme",
    settings_show_coords="Show coordinates",
    settings_show_legal="Highlight legal moves",
)

_RU = Strings(
    window_title="Chesspane",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_flip_board="&Перевернуть доску",
    menu_quit="&Выход",
    menu_settings="&Настройки",
    menu_settings_action="&Настройки...",
    turn_to_play="Ход: {color}",
    color_white="белые",
    color_black="чёрные",
    status_ready="Готово",
    status_loading="Загрузка доски...",
    status_selected="Выбрано поле {square}",
    status_no_moves="Нет ходов с поля {square}",
    status_submitting="Ход {origin} → {destination}...",
    status_illegal_move="Ход отклонён: {msg}",
    status_engine_error="Движок недоступен, попробуйте снова: {msg}",
    status_game_over="Игра окончена: {msg}",
    game_over_title="Игра окончена",
    settings_title="Настройки",
    settings_general="Общие",
    settings_board="Доска",
    settings_language="Язык",
    settings_log_level="Уровень журнала",
    settings_board_theme="Тема доски",
    settings_show_coords="Показывать координаты",
    settings_show_legal="Подсвечивать возможные ходы",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
