"""BoardScene - QGraphicsScene that draws the board from derived decorations."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesspane.core.board import BoardState
from chesspane.core.types import ALL_COORDINATES, BOARD_SIZE, Coordinate
from chesspane.game.decoration import (
    Highlight,
    Highlights,
    board_highlights,
    changed_highlights,
)
from chesspane.game.state import SelectionState
from chesspane.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the 64 squares, piece glyphs and coordinate labels.

    :meth:`sync` receives the confirmed board and the current selection,
    derives every square's decoration and repaints only squares whose piece
    or decoration changed. The last synced pair is kept only to diff
    against.

    Signals:
        square_clicked(Coordinate): Emitted on a left click over the board.
    """

    square_clicked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.slate()
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        self._board: BoardState | None = None
        self._selection = SelectionState()
        self._highlights: Highlights = {}

        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._glyph_items: dict[Coordinate, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def sync(self, board: BoardState, selection: SelectionState) -> set[Coordinate]:
        """Sync visuals with *board* and *selection*; returns repainted squares."""
        highlights = board_highlights(
            board, selection, show_legal=self._show_legal_moves
        )
        dirty = set(changed_highlights(self._highlights, highlights))
        if self._board is None:
            dirty.update(ALL_COORDINATES)
        else:
            dirty.update(self._board.changed_squares(board))

        self._board = board
        self._selection = selection
        self._highlights = highlights
        for sq in dirty:
            self._paint_square(sq)
        return dirty

    def highlight_of(self, square: Coordinate) -> Highlight | None:
        return self._highlights.get(square)

    def glyph_of(self, square: Coordinate) -> str:
        item = self._glyph_items.get(square)
        return item.text() if item is not None else ""

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click handling."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination highlights."""
        if self._show_legal_moves == visible:
            return
        self._show_legal_moves = visible
        if self._board is not None:
            self.sync(self._board, self._selection)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw all squares, glyphs and coordinate labels."""
        for item in [*self._square_items.values(), *self._glyph_items.values()]:
            self.removeItem(item)
        self._square_items.clear()
        self._glyph_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in ALL_COORDINATES:
            col, row = self._visual_coords(sq)
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            glyph = QGraphicsSimpleTextItem()
            glyph.setFont(QFont("DejaVu Sans", int(t * 0.6)))
            glyph.setZValue(1)
            self.addItem(glyph)
            self._glyph_items[sq] = glyph

            label_color = (
                self._theme.coord_dark if sq.is_light else self._theme.coord_light
            )

            # Rank numbers (left edge)
            if col == 0:
                txt = QGraphicsSimpleTextItem(str(BOARD_SIZE - sq.rank))
                txt.setFont(font)
                txt.setBrush(QBrush(label_color))
                txt.setPos(col * t + 2, row * t + 1)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

            # File letters (bottom edge)
            if row == BOARD_SIZE - 1:
                txt = QGraphicsSimpleTextItem(chr(ord("a") + sq.file))
                txt.setFont(font)
                txt.setBrush(QBrush(label_color))
                txt.setPos(col * t + t - 12, row * t + t - 16)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)
        for sq in ALL_COORDINATES:
            self._paint_square(sq)

    def _paint_square(self, sq: Coordinate) -> None:
        highlight = self._highlights.get(sq)
        if highlight is None:
            highlight = Highlight.LIGHT if sq.is_light else Highlight.DARK
        self._square_items[sq].setBrush(QBrush(self._theme.square_color(highlight)))

        glyph = self._glyph_items[sq]
        piece = self._board[sq] if self._board is not None else None
        if piece is None or piece.is_empty:
            glyph.setText("")
            glyph.setCursor(Qt.CursorShape.ArrowCursor)
            return

        glyph.setText(piece.symbol)
        glyph.setBrush(QBrush(self._theme.piece_color(piece.color)))
        outline = self._theme.piece_color(piece.color.opposite)
        glyph.setPen(QPen(outline, 1.0))
        glyph.setCursor(Qt.CursorShape.PointingHandCursor)

        t = self.TILE
        col, row = self._visual_coords(sq)
        bounds = glyph.boundingRect()
        glyph.setPos(
            col * t + (t - bounds.width()) / 2,
            row * t + (t - bounds.height()) / 2,
        )

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if (
            not self._interactive
            or event is None
            or event.button() != Qt.MouseButton.LeftButton
        ):
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq)
        event.accept()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Coordinate) -> tuple[int, int]:
        """Board square → visual (column, row)."""
        if self._flipped:
            return BOARD_SIZE - 1 - sq.file, BOARD_SIZE - 1 - sq.rank
        return sq.file, sq.rank

    def _pos_to_square(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Coordinate(BOARD_SIZE - 1 - row, BOARD_SIZE - 1 - col)
        return Coordinate(row, col)
