"""BoardScene — QGraphicsScene that draws the preview board and destinations."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from pieceforge.core.board_state import BoardState
from pieceforge.core.destinations import Destination, DestinationMap
from pieceforge.core.enums import BlockerKind
from pieceforge.core.types import DEFAULT_BOARD_SIZE, Coord, square_name
from pieceforge.preview.interfaces import PreviewFrame
from pieceforge.ui.styles.theme import BoardTheme

PIECE_GLYPH = "P"
ALLY_GLYPH = "A"
ENEMY_GLYPH = "E"


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, occupant / blocker glyphs and markers.

    The scene holds no board state of its own: :meth:`show_frame` redraws from a
    :class:`PreviewFrame`, and clicks are only reported upwards.

    Signals:
        square_clicked(int, int): Emitted with ``(x, y)`` of a clicked square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 56  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._size = DEFAULT_BOARD_SIZE
        self._show_coordinates = True
        self._frame: PreviewFrame | None = None

        # Visual layers
        self._square_items: dict[Coord, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._marker_items: dict[Coord, QGraphicsRectItem] = {}
        self._glyph_items: dict[Coord, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board_size(self) -> int:
        return self._size

    def show_frame(self, frame: PreviewFrame) -> None:
        """Redraw glyphs and destination markers for *frame*."""
        self._frame = frame
        if frame.board.size != self._size:
            self._size = frame.board.size
            self._draw_board()
        self._sync_glyphs(frame.board)
        self._sync_markers(frame.destinations)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._frame is not None:
            self.show_frame(self._frame)

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the size x size squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        n = self._size
        font = QFont("Adwaita Sans", max(8, t // 8))

        for y in range(n):
            for x in range(n):
                is_light = (x + y) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(x * t, y * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setToolTip(square_name(x, y, n))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[(x, y)] = rect

                coord_color = (
                    self._theme.coord_on_light if is_light else self._theme.coord_on_dark
                )

                # Rank numbers (left edge)
                if x == 0:
                    txt = QGraphicsSimpleTextItem(str(n - y))
                    txt.setFont(font)
                    txt.setBrush(QBrush(coord_color))
                    txt.setPos(2, y * t + 1)
                    self._add_coord_item(txt)

                # File letters (bottom edge)
                if y == n - 1:
                    txt = QGraphicsSimpleTextItem(chr(ord("a") + x))
                    txt.setFont(font)
                    txt.setBrush(QBrush(coord_color))
                    txt.setPos(x * t + t - 12, y * t + t - 16)
                    self._add_coord_item(txt)

        self.setSceneRect(0, 0, n * t, n * t)

    def _add_coord_item(self, item: QGraphicsSimpleTextItem) -> None:
        item.setZValue(0.3)
        item.setVisible(self._show_coordinates)
        self.addItem(item)
        self._coord_items.append(item)

    # ── Frame synchronisation ────────────────────────────────────────────

    def _sync_glyphs(self, board: BoardState) -> None:
        """Re-create occupant and blocker letters."""
        for item in self._glyph_items.values():
            self.removeItem(item)
        self._glyph_items.clear()

        if board.occupant is not None:
            self._place_glyph(board.occupant, PIECE_GLYPH, self._theme.piece_glyph)
        for coord, kind in board.blockers.items():
            if kind is BlockerKind.ALLY:
                self._place_glyph(coord, ALLY_GLYPH, self._theme.ally_glyph)
            else:
                self._place_glyph(coord, ENEMY_GLYPH, self._theme.enemy_glyph)

    def _place_glyph(self, coord: Coord, text: str, color: QColor) -> None:
        t = self.TILE
        item = QGraphicsSimpleTextItem(text)
        font = QFont("Adwaita Sans", t // 2)
        font.setBold(True)
        item.setFont(font)
        item.setBrush(QBrush(color))
        bounds = item.boundingRect()
        x, y = coord
        item.setPos(
            x * t + (t - bounds.width()) / 2,
            y * t + (t - bounds.height()) / 2,
        )
        item.setZValue(2)
        self.addItem(item)
        self._glyph_items[coord] = item

    def _sync_markers(self, destinations: DestinationMap) -> None:
        """Overlay move / capture / both highlights."""
        for item in self._marker_items.values():
            self.removeItem(item)
        self._marker_items.clear()

        for coord, dest in destinations.items():
            rect = self._make_highlight(coord, self._marker_color(dest))
            self._marker_items[coord] = rect

    def _marker_color(self, dest: Destination) -> QColor:
        if dest.is_both:
            return self._theme.both_mark
        if dest.move:
            return self._theme.move_mark
        return self._theme.capture_mark

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        coord = self._pos_to_coord(event.scenePos())
        if coord is not None:
            self.square_clicked.emit(*coord)
            return
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_coord(self, pos: QPointF) -> Coord | None:
        """Scene position → board coordinate."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < self._size and 0 <= row < self._size):
            return None
        return col, row

    def _make_highlight(self, coord: Coord, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        x, y = coord
        rect = QGraphicsRectItem(x * t, y * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
