"""SettingsDialog - application-wide settings with a category sidebar."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QPaintEvent
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLayout,
    QListWidget,
    QListWidgetItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from chesspane.game.decoration import Highlight
from chesspane.ui.i18n import LANGUAGES, t
from chesspane.ui.styles.theme import THEMES, theme_by_name

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "INFO"

    # Board
    board_theme: str = "Slate"
    show_coordinates: bool = True
    show_legal_moves: bool = True


# ── Individual settings pages ────────────────────────────────────────────────


class _SettingsPage(QWidget):
    """Form page: a bold title row, then labelled rows keyed by string name."""

    title_attr = ""

    def __init__(self) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)
        self._row_labels: dict[str, QLabel] = {}

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 16px; font-weight: bold; color: #e0e0e0;")
        self._form.addRow(self._title)

    def _add_row(self, label_attr: str, field: QWidget | QLayout) -> None:
        label = QLabel()
        self._row_labels[label_attr] = label
        self._form.addRow(label, field)

    def _add_check(self, label_attr: str, checked: bool) -> QCheckBox:
        box = QCheckBox()
        box.setChecked(checked)
        self._add_row(label_attr, box)
        return box

    @staticmethod
    def _combo(items: Iterable[str], current: str) -> QComboBox:
        combo = QComboBox()
        combo.addItems(list(items))
        combo.setCurrentIndex(max(0, combo.findText(current)))
        return combo

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(getattr(s, self.title_attr))
        for attr, label in self._row_labels.items():
            label.setText(getattr(s, attr))

    def apply(self, settings: AppSettings) -> None:
        raise NotImplementedError


class _GeneralPage(_SettingsPage):
    title_attr = "settings_general"

    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._lang_combo = self._combo(LANGUAGES, settings.language)
        self._add_row("settings_language", self._lang_combo)
        self._level_combo = self._combo(LOG_LEVELS, settings.log_level.upper())
        self._add_row("settings_log_level", self._level_combo)
        self.retranslate_ui()

    def apply(self, settings: AppSettings) -> None:
        settings.language = self._lang_combo.currentText()
        settings.log_level = self._level_combo.currentText()


class _HighlightPreview(QWidget):
    """Strip of swatches: base squares followed by each highlight colour."""

    _ORDER = (
        Highlight.LIGHT,
        Highlight.DARK,
        Highlight.SELECTED,
        Highlight.LEGAL_DESTINATION,
        Highlight.LAST_MOVED,
    )
    _SWATCH = 28

    def __init__(self, theme_name: str) -> None:
        super().__init__()
        self._theme_name = theme_name
        self.setFixedSize(self._SWATCH * len(self._ORDER) + 4, self._SWATCH + 4)

    def theme_name(self) -> str:
        return self._theme_name

    def set_theme_name(self, theme_name: str) -> None:
        if self._theme_name == theme_name:
            return
        self._theme_name = theme_name
        self.update()

    def paintEvent(self, event: QPaintEvent | None) -> None:
        del event
        theme = theme_by_name(self._theme_name)
        size = self._SWATCH
        painter = QPainter(self)
        painter.fillRect(self.rect(), Qt.GlobalColor.black)
        for i, highlight in enumerate(self._ORDER):
            painter.fillRect(2 + i * size, 2, size, size, theme.square_color(highlight))
        painter.end()


class _BoardPage(_SettingsPage):
    title_attr = "settings_board"

    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._theme_combo = self._combo(THEMES, settings.board_theme)
        self._theme_combo.setMinimumWidth(220)
        self._preview = _HighlightPreview(self._theme_combo.currentText())
        self._theme_combo.currentTextChanged.connect(self._preview.set_theme_name)

        theme_column = QVBoxLayout()
        theme_column.setSpacing(6)
        theme_column.addWidget(self._theme_combo)
        theme_column.addWidget(self._preview)
        self._add_row("settings_board_theme", theme_column)

        self._coords_check = self._add_check(
            "settings_show_coords", settings.show_coordinates
        )
        self._legal_check = self._add_check(
            "settings_show_legal", settings.show_legal_moves
        )
        self.retranslate_ui()

    def apply(self, settings: AppSettings) -> None:
        settings.board_theme = self._theme_combo.currentText()
        settings.show_coordinates = self._coords_check.isChecked()
        settings.show_legal_moves = self._legal_check.isChecked()


# ── Main dialog ──────────────────────────────────────────────────────────────

_PAGE_CLASSES: tuple[type[_GeneralPage | _BoardPage], ...] = (_GeneralPage, _BoardPage)


class SettingsDialog(QDialog):
    """Modal settings dialog; edits *settings* in place on OK."""

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumSize(560, 320)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._settings = settings
        self._pages: list[_SettingsPage] = []

        self._build_ui()
        self.retranslate_ui()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setFixedWidth(150)
        self._sidebar.setStyleSheet(
            "QListWidget { background: #1e293b; border: none;"
            "  border-right: 1px solid #334155; }"
            "QListWidget::item { padding: 10px 14px; color: #cbd5e1; font-size: 13px; }"
            "QListWidget::item:selected { background: #f97316; color: #ffffff; }"
        )

        self._stack = QStackedWidget()
        for page_class in _PAGE_CLASSES:
            self._sidebar.addItem(QListWidgetItem())
            page = page_class(self._settings)
            self._pages.append(page)
            self._stack.addWidget(page)
        self._sidebar.setCurrentRow(0)
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)
        root.addWidget(self._sidebar)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.setContentsMargins(12, 8, 12, 8)
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)

        right = QVBoxLayout()
        right.setContentsMargins(0, 0, 0, 0)
        right.addWidget(self._stack)
        right.addWidget(self._btn_box)
        root.addLayout(right)

    def retranslate_ui(self) -> None:
        self.setWindowTitle(t().settings_title)
        for i, page in enumerate(self._pages):
            item = self._sidebar.item(i)
            if item is not None:
                item.setText(getattr(t(), page.title_attr))
            page.retranslate_ui()

    def _on_accept(self) -> None:
        for page in self._pages:
            page.apply(self._settings)
        self.accept()
