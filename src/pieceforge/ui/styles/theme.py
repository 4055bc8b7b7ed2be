"""Visual theme constants and QSS styles for PieceForge."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from PyQt6.QtGui import QColor

RGB: TypeAlias = tuple[int, int, int]

# Theme name -> (light square, dark square)
_SQUARE_PALETTES: dict[str, tuple[RGB, RGB]] = {
    "Classic": ((240, 217, 181), (181, 136, 99)),
    "Blue": ((222, 227, 230), (140, 162, 173)),
    "Green": ((236, 238, 220), (112, 149, 120)),
    "Walnut": ((228, 210, 184), (118, 74, 47)),
    "Slate": ((224, 226, 231), (101, 110, 122)),
}

DEFAULT_THEME = "Classic"


@dataclass(frozen=True)
class BoardTheme:
    """Square colours plus the marker and glyph colours of the preview."""

    light_square: QColor
    dark_square: QColor
    move_mark: QColor = field(default_factory=lambda: QColor(70, 160, 70, 130))
    capture_mark: QColor = field(default_factory=lambda: QColor(210, 50, 50, 140))
    both_mark: QColor = field(default_factory=lambda: QColor(220, 150, 30, 150))
    piece_glyph: QColor = field(default_factory=lambda: QColor(30, 60, 160))
    ally_glyph: QColor = field(default_factory=lambda: QColor(40, 110, 40))
    enemy_glyph: QColor = field(default_factory=lambda: QColor(160, 30, 30))

    # Coordinates use the opposite square colour to stay readable.
    @property
    def coord_on_light(self) -> QColor:
        return self.dark_square

    @property
    def coord_on_dark(self) -> QColor:
        return self.light_square

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names give the classic palette."""
        light, dark = _SQUARE_PALETTES.get(name, _SQUARE_PALETTES[DEFAULT_THEME])
        return cls(light_square=QColor(*light), dark_square=QColor(*dark))

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.by_name(DEFAULT_THEME)


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QScrollArea, QScrollArea > QWidget > QWidget {
    background: #26282b;
}

QLabel, QCheckBox, QStatusBar {
    color: #dcdfe4;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QGroupBox {
    color: #dcdfe4;
    border: 1px solid #41454b;
    border-radius: 5px;
    margin-top: 14px;
    padding: 8px 6px 4px 6px;
}
QGroupBox::title {
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 3px;
}
QGroupBox:disabled, QCheckBox:disabled {
    color: #7a7f87;
}

QComboBox, QSpinBox {
    background: #1b1c1f;
    color: #d0d3d8;
    border: 1px solid #41454b;
    border-radius: 3px;
    padding: 2px 6px;
}

QPushButton {
    background: #373a3f;
    color: #dcdfe4;
    border: 1px solid #50555c;
    border-radius: 4px;
    padding: 5px 10px;
}
QPushButton:hover {
    background: #464a50;
}
QPushButton:checked {
    background: #2f5f8f;
    border-color: #4d86bf;
}
"""
