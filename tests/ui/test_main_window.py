"""Tests for MainWindow wiring between widgets and the preview controller."""

from __future__ import annotations

from pathlib import Path

import pytest

from pieceforge.core.enums import Color
from pieceforge.core.pieces import standard_piece
from pieceforge.preview.interfaces import Tool
from pieceforge.preview.piece_file import load_piece_file, save_piece_file
from pieceforge.settings import AppSettings
from pieceforge.ui.main_window import MainWindow


def _make_window(piece: str = "rook", **settings: object) -> MainWindow:
    return MainWindow(AppSettings(**settings), standard_piece(piece))  # type: ignore[arg-type]


class TestStartup:
    def test_settings_applied(self) -> None:
        window = _make_window(board_size=10, piece_color=Color.BLACK, first_move=True)
        board = window.controller.board
        assert board.size == 10
        assert board.occupant == (5, 5)
        assert board.active_color is Color.BLACK
        assert board.first_move is True
        assert window._control_panel._size_spin.value() == 10

    def test_initial_report(self) -> None:
        window = _make_window("king")
        assert window._status_panel.status_text == "King at e4 (white, not first move)"
        assert window._status_label.text().startswith("Moves: d5, e5, f5")
        assert window.windowTitle() == "PieceForge - King"

    def test_defaults_to_queen(self) -> None:
        window = MainWindow()
        assert window.piece.name == "Queen"
        assert len(window.controller.frame.destinations) == 27


class TestInteraction:
    def test_square_click_applies_tool(self) -> None:
        window = _make_window()
        window._board_view.square_clicked.emit(0, 7)
        assert window.controller.board.occupant == (0, 7)
        assert window._status_panel.status_text.startswith("Rook at a1")

    def test_tool_button_selects_tool(self) -> None:
        window = _make_window()
        window._control_panel._tool_buttons[Tool.ENEMY].click()
        assert window.controller.tool is Tool.ENEMY
        window._board_view.square_clicked.emit(4, 1)
        assert window._status_panel.captures_text == "e7"

    def test_size_spin_resizes_board(self) -> None:
        window = _make_window()
        window._control_panel._size_spin.setValue(5)
        assert window.controller.board.size == 5
        assert window._board_view.board_scene.board_size == 5

    def test_moves_panel_edit_updates_preview(self) -> None:
        window = _make_window("rook")
        window._moves_panel._groups[4].setChecked(True)
        assert [m.movement_method_id for m in window.piece.moves] == [1, 4]
        assert len(window.controller.moves) == 2

    def test_preset_menu_switches_piece(self) -> None:
        window = _make_window("rook")
        assert window._menu_piece is not None
        actions = {a.text(): a for a in window._menu_piece.actions()}
        actions["Knight"].trigger()
        assert window.piece.name == "Knight"
        assert len(window.controller.frame.destinations) == 8

    def test_theme_and_coordinates(self) -> None:
        window = _make_window()
        window._theme_actions["Green"].trigger()
        assert window._settings.board_theme == "Green"
        window._act_coords.setChecked(False)
        scene = window._board_view.board_scene
        assert all(not item.isVisible() for item in scene._coord_items)


class TestPieceFiles:
    def test_open_piece_file(self, tmp_path: Path) -> None:
        path = tmp_path / "knight.json"
        save_piece_file(path, standard_piece("knight"))
        window = _make_window()
        assert window.open_piece_file(path)
        assert window.piece.name == "Knight"

    def test_open_invalid_file_keeps_piece(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[1, 2", encoding="utf-8")
        warnings: list[str] = []
        monkeypatch.setattr(
            "pieceforge.ui.main_window.QMessageBox.warning",
            lambda _parent, _title, text: warnings.append(text),
        )
        window = _make_window("bishop")

        assert not window.open_piece_file(path)
        assert window.piece.name == "Bishop"
        assert len(warnings) == 1
        assert "broken.json" in warnings[0]

    def test_open_missing_file_warns(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        warnings: list[str] = []
        monkeypatch.setattr(
            "pieceforge.ui.main_window.QMessageBox.warning",
            lambda _parent, _title, text: warnings.append(text),
        )
        window = _make_window()
        assert not window.open_piece_file(tmp_path / "absent.json")
        assert warnings

    def test_save_adds_json_suffix(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        target = tmp_path / "my-rook"
        monkeypatch.setattr(
            "pieceforge.ui.main_window.QFileDialog.getSaveFileName",
            lambda *args, **kwargs: (str(target), "Piece files (*.json)"),
        )
        window = _make_window("rook")
        window._on_save_piece()

        saved = target.with_suffix(".json")
        assert saved.is_file()
        assert load_piece_file(saved) == standard_piece("rook")
        assert window._status_label.text() == "Saved my-rook.json"

    def test_save_cancelled(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(
            "pieceforge.ui.main_window.QFileDialog.getSaveFileName",
            lambda *args, **kwargs: ("", ""),
        )
        window = _make_window()
        window._on_save_piece()
        assert list(tmp_path.iterdir()) == []
