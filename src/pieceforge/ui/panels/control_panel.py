"""ControlPanel — board size, side, first-move flag and editing tools."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from pieceforge.core.board_state import BoardState
from pieceforge.core.enums import Color
from pieceforge.core.types import DEFAULT_BOARD_SIZE, MAX_BOARD_SIZE, MIN_BOARD_SIZE
from pieceforge.preview.interfaces import Tool

_TOOL_LABELS: dict[Tool, str] = {
    Tool.PIECE: "Piece",
    Tool.ALLY: "Ally",
    Tool.ENEMY: "Enemy",
    Tool.ERASE: "Erase",
}


class ControlPanel(QWidget):
    """Widgets for the board settings and the active click tool.

    ``sync_board`` and ``set_tool`` update the widgets without emitting.
    """

    size_changed = pyqtSignal(int)
    color_changed = pyqtSignal(str)
    first_move_toggled = pyqtSignal(bool)
    tool_selected = pyqtSignal(str)
    reset_clicked = pyqtSignal()
    clear_blockers_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._tool_buttons: dict[Tool, QPushButton] = {}
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        # Board settings
        board_box = QGroupBox("Board")
        form = QFormLayout(board_box)

        self._size_spin = QSpinBox()
        self._size_spin.setRange(MIN_BOARD_SIZE, MAX_BOARD_SIZE)
        self._size_spin.setValue(DEFAULT_BOARD_SIZE)
        self._size_spin.valueChanged.connect(self.size_changed)
        form.addRow("Size", self._size_spin)

        self._color_combo = QComboBox()
        for color in Color:
            self._color_combo.addItem(color.value.capitalize(), color.value)
        self._color_combo.currentIndexChanged.connect(self._on_color_index)
        form.addRow("Side", self._color_combo)

        self._first_move_check = QCheckBox("First move")
        self._first_move_check.toggled.connect(self.first_move_toggled)
        form.addRow(self._first_move_check)
        layout.addWidget(board_box)

        # Tools (exclusive)
        tool_box = QGroupBox("Tool")
        tool_row = QHBoxLayout(tool_box)
        self._tool_group = QButtonGroup(self)
        self._tool_group.setExclusive(True)
        for tool, label in _TOOL_LABELS.items():
            btn = QPushButton(label)
            btn.setFont(btn_font)
            btn.setCheckable(True)
            btn.setMinimumHeight(32)
            btn.clicked.connect(lambda _checked, tl=tool: self.tool_selected.emit(tl.value))
            self._tool_group.addButton(btn)
            self._tool_buttons[tool] = btn
            tool_row.addWidget(btn)
        self._tool_buttons[Tool.PIECE].setChecked(True)
        layout.addWidget(tool_box)

        # Actions
        row = QHBoxLayout()
        self._btn_reset = QPushButton("Reset board")
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        row.addWidget(self._btn_reset)

        self._btn_clear = QPushButton("Clear blockers")
        self._btn_clear.setFont(btn_font)
        self._btn_clear.setMinimumHeight(36)
        self._btn_clear.clicked.connect(self.clear_blockers_clicked)
        row.addWidget(self._btn_clear)
        layout.addLayout(row)

    def _on_color_index(self, index: int) -> None:
        self.color_changed.emit(str(self._color_combo.itemData(index)))

    # ── Sync from state ──────────────────────────────────────────────────

    def sync_board(self, board: BoardState) -> None:
        """Reflect *board* in the widgets (e.g. after clamping)."""
        widgets = (self._size_spin, self._color_combo, self._first_move_check)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            self._size_spin.setValue(board.size)
            self._color_combo.setCurrentIndex(
                self._color_combo.findData(board.active_color.value)
            )
            self._first_move_check.setChecked(board.first_move)
        finally:
            for widget in widgets:
                widget.blockSignals(False)

    def set_tool(self, tool: Tool) -> None:
        self._tool_buttons[tool].setChecked(True)

    def checked_tool(self) -> Tool:
        for tool, btn in self._tool_buttons.items():
            if btn.isChecked():
                return tool
        return Tool.PIECE
