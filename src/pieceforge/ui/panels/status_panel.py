"""StatusPanel — textual summary of the current preview."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFormLayout, QLabel, QVBoxLayout, QWidget

from pieceforge.preview.report import PreviewReport


class StatusPanel(QWidget):
    """Shows the status line and the move / capture square lists."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._status_label = QLabel()
        self._status_label.setFont(QFont("Adwaita Sans", 11, QFont.Weight.Bold))
        self._status_label.setWordWrap(True)
        layout.addWidget(self._status_label)

        form = QFormLayout()
        mono = QFont("AdwaitaMono Nerd Font", 10)
        self._moves_label = QLabel()
        self._captures_label = QLabel()
        for label in (self._moves_label, self._captures_label):
            label.setFont(mono)
            label.setWordWrap(True)
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        form.addRow("Moves:", self._moves_label)
        form.addRow("Captures:", self._captures_label)
        layout.addLayout(form)

    def show_report(self, report: PreviewReport) -> None:
        self._status_label.setText(report.status)
        self._moves_label.setText(report.moves_text)
        self._captures_label.setText(report.captures_text)

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    @property
    def moves_text(self) -> str:
        return self._moves_label.text()

    @property
    def captures_text(self) -> str:
        return self._captures_label.text()
