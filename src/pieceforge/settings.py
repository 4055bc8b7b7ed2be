"""Application settings and command-line parsing."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pieceforge.core.enums import Color
from pieceforge.core.types import (
    DEFAULT_BOARD_SIZE,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    clamp_board_size,
)

THEME_NAMES: tuple[str, ...] = ("Classic", "Blue", "Green", "Walnut", "Slate")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_size: int = DEFAULT_BOARD_SIZE
    piece_color: Color = Color.WHITE
    first_move: bool = False
    board_theme: str = "Classic"
    show_coordinates: bool = True

    # Piece source: a JSON file wins over a preset name
    piece_name: str = "Queen"
    piece_file: Path | None = None

    # Diagnostics
    log_level: str = "WARNING"

    # Arguments not consumed here (handed to Qt)
    extra_args: list[str] = field(default_factory=list)

    @classmethod
    def from_args(cls, argv: Sequence[str]) -> AppSettings:
        """Parse ``argv`` (without the program name)."""
        args, rest = _build_parser().parse_known_args(list(argv))
        return cls(
            board_size=args.size,
            piece_color=Color.parse(args.color),
            first_move=args.first_move,
            board_theme=args.theme,
            show_coordinates=not args.hide_coordinates,
            piece_name=args.piece,
            piece_file=args.file,
            log_level=args.log_level,
            extra_args=rest,
        )


def _board_size(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}") from None
    return clamp_board_size(value)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pieceforge", description="Preview custom chess piece movement"
    )
    parser.add_argument(
        "--size",
        type=_board_size,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board size, clamped to {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE} (default: 8)",
    )
    parser.add_argument(
        "--color", choices=[c.value for c in Color], default=Color.WHITE.value
    )
    parser.add_argument(
        "--first-move", action="store_true", help="Treat the piece as not yet moved"
    )
    parser.add_argument("--piece", default="Queen", help="Standard piece preset")
    parser.add_argument("--file", type=Path, default=None, help="Piece JSON file")
    parser.add_argument("--theme", choices=THEME_NAMES, default="Classic")
    parser.add_argument("--hide-coordinates", action="store_true")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    return parser
