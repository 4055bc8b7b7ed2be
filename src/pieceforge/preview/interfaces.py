"""Shared types for the preview layer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pieceforge.core.board_state import BoardState
    from pieceforge.core.destinations import DestinationMap
    from pieceforge.preview.report import PreviewReport


class Tool(str, Enum):
    """What a click on a board square does."""

    PIECE = "piece"  # place the previewed piece
    ALLY = "ally"
    ENEMY = "enemy"
    ERASE = "erase"

    @classmethod
    def parse(cls, value: object) -> Tool:
        """Unknown tool names fall back to ``piece``."""
        try:
            return cls(str(value))
        except ValueError:
            return cls.PIECE

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PreviewFrame:
    """Everything a renderer needs after one state change.

    ``board`` is a snapshot; mutating it does not affect the controller.
    """

    board: BoardState
    destinations: DestinationMap
    report: PreviewReport
    tool: Tool


RenderCallback = Callable[[PreviewFrame], None]
