"""Load and save piece definitions as JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pieceforge.core.pieces import PieceDefinition

_LOGGER = logging.getLogger(__name__)


def load_piece_file(file_path: Path) -> PieceDefinition:
    """Read a piece from *file_path*.

    The file holds either ``{"name", "description", "moves": [...]}`` or a
    bare list of move payloads.

    Raises:
        FileNotFoundError: *file_path* does not exist.
        ValueError: the file is not valid JSON.
    """
    text = Path(file_path).read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid piece file {file_path}: {exc}") from exc
    piece = PieceDefinition.from_payload(payload)
    _LOGGER.info(
        "Loaded piece %r with %d moves from %s", piece.name, len(piece.moves), file_path
    )
    return piece


def save_piece_file(file_path: Path, piece: PieceDefinition) -> None:
    """Write *piece* to *file_path* as indented JSON."""
    Path(file_path).write_text(
        json.dumps(piece.to_payload(), indent=2) + "\n", encoding="utf-8"
    )
