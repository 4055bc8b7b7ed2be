"""MovesPanel — per-method move settings that make up the previewed piece."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QLabel,
    QScrollArea,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from pieceforge.core.authoring import (
    MoveConfig,
    build_piece_moves,
    split_primary_secondary,
)
from pieceforge.core.catalog import MovementCatalog, MovementMethod
from pieceforge.core.descriptor import MoveDescriptor
from pieceforge.core.enums import ColorScope, MoveMode
from pieceforge.core.types import MAX_BOARD_SIZE

_MODE_LABELS: dict[MoveMode, str] = {
    MoveMode.BOTH: "Move & capture",
    MoveMode.MOVE: "Move only",
    MoveMode.CAPTURE: "Capture only",
}

_SCOPE_LABELS: dict[ColorScope, str] = {
    ColorScope.ANY: "Any side",
    ColorScope.WHITE: "White only",
    ColorScope.BLACK: "Black only",
}


def _limit_spin() -> QSpinBox:
    """Spin box where 0 means "method default"."""
    spin = QSpinBox()
    spin.setRange(0, MAX_BOARD_SIZE)
    spin.setSpecialValueText("default")
    return spin


def _spin_limit(spin: QSpinBox) -> int | None:
    return spin.value() or None


class _MethodGroup(QGroupBox):
    """Settings for one movement method of the piece."""

    changed = pyqtSignal()

    def __init__(self, method: MovementMethod, parent: QWidget | None = None) -> None:
        super().__init__(method.name, parent)
        self._method = method
        self.setCheckable(True)
        self.setChecked(False)
        self.setToolTip(method.description)

        form = QFormLayout(self)
        form.setSpacing(4)

        self._mode_combo = QComboBox()
        for mode, label in _MODE_LABELS.items():
            self._mode_combo.addItem(label, mode.value)
        form.addRow("Mode", self._mode_combo)

        self._scope_combo = QComboBox()
        for scope, label in _SCOPE_LABELS.items():
            self._scope_combo.addItem(label, scope.value)
        form.addRow("Applies to", self._scope_combo)

        self._first_only_check = QCheckBox("First move only")
        form.addRow(self._first_only_check)

        self._limit_spin: QSpinBox | None = None
        self._secondary_check: QCheckBox | None = None
        self._secondary_spin: QSpinBox | None = None
        if method.supports_ray_limit:
            self._limit_spin = _limit_spin()
            form.addRow("Ray limit", self._limit_spin)
            self._secondary_check = QCheckBox("Other mode with its own limit")
            form.addRow(self._secondary_check)
            self._secondary_spin = _limit_spin()
            form.addRow("Other limit", self._secondary_spin)

        self.toggled.connect(self.changed)
        self._mode_combo.currentIndexChanged.connect(self._on_edit)
        self._scope_combo.currentIndexChanged.connect(self._on_edit)
        self._first_only_check.toggled.connect(self._on_edit)
        for spin in (self._limit_spin, self._secondary_spin):
            if spin is not None:
                spin.valueChanged.connect(self._on_edit)
        if self._secondary_check is not None:
            self._secondary_check.toggled.connect(self._on_edit)
        self._update_secondary_enabled()

    @property
    def method(self) -> MovementMethod:
        return self._method

    def _on_edit(self, *_args: object) -> None:
        self._update_secondary_enabled()
        self.changed.emit()

    def _update_secondary_enabled(self) -> None:
        if self._secondary_check is None or self._secondary_spin is None:
            return
        splittable = MoveMode.parse(self._mode_combo.currentData()).complement is not None
        self._secondary_check.setEnabled(splittable)
        self._secondary_spin.setEnabled(splittable and self._secondary_check.isChecked())

    # ── Config <-> widgets ───────────────────────────────────────────────

    def config(self) -> MoveConfig | None:
        """Current settings, or ``None`` when the method is switched off."""
        if not self.isChecked():
            return None
        return MoveConfig(
            method=self._method,
            mode=MoveMode.parse(self._mode_combo.currentData()),
            color_scope=ColorScope.parse(self._scope_combo.currentData()),
            ray_limit=_spin_limit(self._limit_spin) if self._limit_spin else None,
            first_move_only=self._first_only_check.isChecked(),
            secondary_enabled=bool(
                self._secondary_check and self._secondary_check.isChecked()
            ),
            secondary_ray_limit=(
                _spin_limit(self._secondary_spin) if self._secondary_spin else None
            ),
        )

    def load(self, primary: MoveDescriptor | None, secondary: MoveDescriptor | None) -> None:
        """Fill the widgets from descriptors without emitting ``changed``."""
        self.blockSignals(True)
        try:
            self.setChecked(primary is not None)
            mode = primary.mode if primary else MoveMode.BOTH
            scope = primary.color_scope if primary else ColorScope.ANY
            self._mode_combo.setCurrentIndex(self._mode_combo.findData(mode.value))
            self._scope_combo.setCurrentIndex(self._scope_combo.findData(scope.value))
            self._first_only_check.setChecked(bool(primary and primary.first_move_only))
            if self._limit_spin is not None:
                self._limit_spin.setValue((primary.ray_limit if primary else None) or 0)
            if self._secondary_check is not None and self._secondary_spin is not None:
                self._secondary_check.setChecked(secondary is not None)
                self._secondary_spin.setValue(
                    (secondary.ray_limit if secondary else None) or 0
                )
        finally:
            self.blockSignals(False)
        self._update_secondary_enabled()


class MovesPanel(QWidget):
    """One checkable group per catalog method; edits rebuild the move list.

    Moves the groups cannot represent (no catalog method, geometry that
    differs from the catalog, or a further entry for an already shown
    method) are kept unchanged and appended after the edited ones.

    Signals:
        moves_changed(list): The full ``list[MoveDescriptor]`` after an edit.
    """

    moves_changed = pyqtSignal(list)

    def __init__(
        self, catalog: MovementCatalog | None = None, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._catalog = catalog if catalog is not None else MovementCatalog.standard()
        self._groups: dict[int, _MethodGroup] = {}
        self._extra: list[MoveDescriptor] = []
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        body = QWidget()
        body_layout = QVBoxLayout(body)
        body_layout.setContentsMargins(0, 0, 0, 0)
        for method in self._catalog:
            group = _MethodGroup(method)
            group.changed.connect(self._emit_moves)
            body_layout.addWidget(group)
            self._groups[method.id] = group
        body_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setWidget(body)
        layout.addWidget(scroll, stretch=1)

        self._extra_label = QLabel()
        self._extra_label.setWordWrap(True)
        self._extra_label.setVisible(False)
        layout.addWidget(self._extra_label)

    # ── Public API ───────────────────────────────────────────────────────

    def load_moves(self, moves: Iterable[MoveDescriptor]) -> None:
        """Show *moves* in the groups; does not emit ``moves_changed``."""
        moves = list(moves)
        pairs = split_primary_secondary(m for m in moves if self._matches_catalog(m))
        shown = {id(d) for pair in pairs.values() for d in pair if d is not None}
        self._extra = [m for m in moves if id(m) not in shown]
        for method_id, group in self._groups.items():
            primary, secondary = pairs.get(method_id, (None, None))
            group.load(primary, secondary)

        self._extra_label.setVisible(bool(self._extra))
        self._extra_label.setText(
            f"{len(self._extra)} custom move(s) from file kept as-is."
        )

    def _matches_catalog(self, move: MoveDescriptor) -> bool:
        group = self._groups.get(move.movement_method_id or 0)
        return group is not None and move.geometry == group.method.geometry

    def configs(self) -> list[MoveConfig]:
        return [c for g in self._groups.values() if (c := g.config()) is not None]

    def descriptors(self) -> list[MoveDescriptor]:
        return build_piece_moves(self.configs()) + self._extra

    def _emit_moves(self) -> None:
        self.moves_changed.emit(self.descriptors())
