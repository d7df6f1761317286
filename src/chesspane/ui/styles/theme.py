"""Visual theme constants and QSS styles for Chesspane."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from chesspane.core.enums import Color
from chesspane.game.decoration import Highlight


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # selected origin
    legal_destination: QColor
    last_moved: QColor
    white_piece: QColor
    black_piece: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    def square_color(self, highlight: Highlight) -> QColor:
        return {
            Highlight.LIGHT: self.light_square,
            Highlight.DARK: self.dark_square,
            Highlight.SELECTED: self.selected,
            Highlight.LEGAL_DESTINATION: self.legal_destination,
            Highlight.LAST_MOVED: self.last_moved,
        }[highlight]

    def piece_color(self, color: Color) -> QColor:
        return self.white_piece if color == Color.WHITE else self.black_piece

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(71, 85, 105),
            dark_square=QColor(30, 41, 59),
            selected=QColor(249, 115, 22),  # orange
            legal_destination=QColor(255, 237, 213),  # pale orange
            last_moved=QColor(253, 186, 116),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            coord_light=QColor(148, 163, 184),
            coord_dark=QColor(203, 213, 225),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(246, 246, 105),
            legal_destination=QColor(205, 210, 106),
            last_moved=QColor(170, 162, 58),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            selected=QColor(246, 246, 105),
            legal_destination=QColor(186, 202, 68),
            last_moved=QColor(155, 199, 0),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            selected=QColor(246, 246, 105),
            legal_destination=QColor(186, 202, 68),
            last_moved=QColor(155, 199, 0),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )


THEMES: dict[str, BoardTheme] = {
    "Slate": BoardTheme.slate(),
    "Classic": BoardTheme.classic(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}


def theme_by_name(name: str) -> BoardTheme:
    return THEMES.get(name, BoardTheme.slate())


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLabel#turnBanner {
    background: #1e293b;
    border-radius: 10px;
    padding: 8px 16px;
    font-size: 16px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
