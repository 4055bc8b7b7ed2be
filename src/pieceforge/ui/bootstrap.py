"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from pieceforge.core.pieces import PieceDefinition, standard_piece
from pieceforge.preview.piece_file import load_piece_file
from pieceforge.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Install the root handler once; later calls only adjust the level."""
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger().setLevel(level)


def resolve_piece(settings: AppSettings) -> PieceDefinition:
    """Piece to preview at startup: ``--file``, else ``--piece``, else Queen.

    A broken file or unknown preset is logged and skipped.
    """
    if settings.piece_file is not None:
        try:
            return load_piece_file(settings.piece_file)
        except (OSError, ValueError) as exc:
            _LOGGER.warning("Ignoring piece file %s: %s", settings.piece_file, exc)
    try:
        return standard_piece(settings.piece_name)
    except KeyError:
        _LOGGER.warning("Unknown piece preset %r, using Queen", settings.piece_name)
    return standard_piece("Queen")


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from pieceforge.ui.styles.theme import APP_STYLE

    app.setApplicationName("PieceForge")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from pieceforge.ui.main_window import MainWindow

    args = sys.argv if argv is None else argv
    settings = AppSettings.from_args(args[1:])
    configure_logging(settings.log_level)
    _LOGGER.debug("Starting with %s", settings)

    app = QApplication(args[:1] + settings.extra_args)
    _configure_application(app)

    window = MainWindow(settings, resolve_piece(settings))
    window.show()

    return app.exec()
