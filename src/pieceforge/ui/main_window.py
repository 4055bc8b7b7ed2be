"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from pieceforge.core.board_state import BoardState
from pieceforge.core.descriptor import MoveDescriptor
from pieceforge.core.pieces import STANDARD_PIECES, PieceDefinition, standard_piece
from pieceforge.preview.controller import PreviewController
from pieceforge.preview.interfaces import PreviewFrame
from pieceforge.preview.piece_file import load_piece_file, save_piece_file
from pieceforge.settings import THEME_NAMES, AppSettings
from pieceforge.ui.board.board_view import BoardView
from pieceforge.ui.panels.control_panel import ControlPanel
from pieceforge.ui.panels.moves_panel import MovesPanel
from pieceforge.ui.panels.status_panel import StatusPanel
from pieceforge.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_PIECE_FILTER = "Piece files (*.json);;All files (*)"


class MainWindow(QMainWindow):
    """Main application window for PieceForge."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        piece: PieceDefinition | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("PieceForge")
        self.setMinimumSize(900, 640)
        self.resize(1100, 750)

        self._settings = settings if settings is not None else AppSettings()
        self._piece = piece if piece is not None else standard_piece("Queen")
        board = BoardState.centered(
            self._settings.board_size,
            active_color=self._settings.piece_color,
            first_move=self._settings.first_move,
        )
        self._controller = PreviewController(board)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_view_settings()

        self._controller.events.on_render.append(self._on_render)
        self._controller.events.on_tool_changed.append(self._control_panel.set_tool)
        self._show_piece(self._piece)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> PreviewController:
        return self._controller

    @property
    def piece(self) -> PieceDefinition:
        return self._piece

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (center)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        self._moves_panel = MovesPanel()
        right.addWidget(self._moves_panel, stretch=1)

        self._status_panel = StatusPanel()
        right.addWidget(self._status_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(320)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # File menu
        self._menu_file = menu_bar.addMenu("&File")
        assert self._menu_file is not None

        self._act_open = QAction("Open piece…", self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open_piece)
        self._menu_file.addAction(self._act_open)

        self._act_save = QAction("Save piece…", self)
        self._act_save.setShortcut("Ctrl+S")
        self._act_save.triggered.connect(self._on_save_piece)
        self._menu_file.addAction(self._act_save)

        self._menu_file.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.setMenuRole(QAction.MenuRole.QuitRole)
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        # Piece presets
        self._menu_piece = menu_bar.addMenu("&Piece")
        assert self._menu_piece is not None
        for preset in STANDARD_PIECES.values():
            action = QAction(preset.name, self)
            action.setToolTip(preset.description)
            action.triggered.connect(lambda _checked, p=preset: self._show_piece(p))
            self._menu_piece.addAction(action)

        # View menu
        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None

        self._act_coords = QAction("Show coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.toggled.connect(self._on_toggle_coordinates)
        self._menu_view.addAction(self._act_coords)

        theme_menu = self._menu_view.addMenu("Board theme")
        assert theme_menu is not None
        self._theme_group = QActionGroup(self)
        self._theme_group.setExclusive(True)
        self._theme_actions: dict[str, QAction] = {}
        for name in THEME_NAMES:
            action = QAction(name, self)
            action.setCheckable(True)
            action.triggered.connect(lambda _checked, n=name: self._on_theme(n))
            self._theme_group.addAction(action)
            theme_menu.addAction(action)
            self._theme_actions[name] = action

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals to the controller."""
        ctrl = self._controller
        self._board_view.square_clicked.connect(ctrl.apply_tool)
        self._control_panel.size_changed.connect(ctrl.resize)
        self._control_panel.color_changed.connect(ctrl.set_active_color)
        self._control_panel.first_move_toggled.connect(ctrl.set_first_move)
        self._control_panel.tool_selected.connect(ctrl.select_tool)
        self._control_panel.reset_clicked.connect(ctrl.reset_board)
        self._control_panel.clear_blockers_clicked.connect(ctrl.clear_blockers)
        self._moves_panel.moves_changed.connect(self._on_moves_edited)

    def _apply_view_settings(self) -> None:
        self._act_coords.setChecked(self._settings.show_coordinates)
        self._board_view.board_scene.set_show_coordinates(self._settings.show_coordinates)
        self._on_theme(self._settings.board_theme)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_render(self, frame: PreviewFrame) -> None:
        self._board_view.render_frame(frame)
        self._control_panel.sync_board(frame.board)
        self._status_panel.show_report(frame.report)
        self._status_label.setText(frame.report.summary)

    # ── Piece handling ───────────────────────────────────────────────────

    def _show_piece(self, piece: PieceDefinition) -> None:
        self._piece = piece
        self._moves_panel.load_moves(piece.moves)
        self._controller.load_piece(piece)
        self.setWindowTitle(f"PieceForge - {piece.name}")
        _LOGGER.info("Previewing piece %r", piece.name)

    def _on_moves_edited(self, moves: list[MoveDescriptor]) -> None:
        self._piece = PieceDefinition(
            name=self._piece.name,
            description=self._piece.description,
            moves=tuple(moves),
        )
        self._controller.set_moves(moves)

    def _on_open_piece(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, "Open piece", "", _PIECE_FILTER)
        if not file_path:
            return
        self.open_piece_file(Path(file_path))

    def open_piece_file(self, file_path: Path) -> bool:
        """Load and preview a piece file; on failure keep the current piece."""
        try:
            piece = load_piece_file(file_path)
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Could not open piece file %s: %s", file_path, exc)
            QMessageBox.warning(self, "Open piece", f"Could not open piece file:\n{exc}")
            return False
        self._show_piece(piece)
        return True

    def _on_save_piece(self) -> None:
        default_name = f"{self._piece.name.lower() or 'piece'}.json"
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save piece", default_name, _PIECE_FILTER
        )
        if not file_path:
            return

        save_path = Path(file_path)
        if save_path.suffix.lower() != ".json":
            save_path = save_path.with_suffix(".json")
        try:
            save_piece_file(save_path, self._piece)
        except OSError as exc:
            QMessageBox.warning(self, "Save piece", f"Could not save piece file:\n{exc}")
            return
        self._status_label.setText(f"Saved {save_path.name}")

    # ── View handling ────────────────────────────────────────────────────

    def _on_toggle_coordinates(self, visible: bool) -> None:
        self._settings.show_coordinates = visible
        self._board_view.board_scene.set_show_coordinates(visible)

    def _on_theme(self, name: str) -> None:
        if name not in self._theme_actions:
            name = THEME_NAMES[0]
        self._settings.board_theme = name
        self._theme_actions[name].setChecked(True)
        self._board_view.board_scene.set_theme(BoardTheme.by_name(name))
