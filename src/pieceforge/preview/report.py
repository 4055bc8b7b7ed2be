"""Human-readable summary of a preview frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pieceforge.core.types import square_name

if TYPE_CHECKING:
    from pieceforge.core.board_state import BoardState
    from pieceforge.core.destinations import DestinationMap

NO_PIECE_STATUS = "Place the preview piece to compute moves."
EMPTY_LIST = "none"
LIST_SEPARATOR = ", "


@dataclass(frozen=True, slots=True)
class PreviewReport:
    """Status line plus move / capture square lists."""

    status: str
    moves_text: str
    captures_text: str

    @property
    def summary(self) -> str:
        return f"Moves: {self.moves_text} | Captures: {self.captures_text}"


def _join(names: list[str]) -> str:
    return LIST_SEPARATOR.join(names) if names else EMPTY_LIST


def build_report(
    board: BoardState, destinations: DestinationMap, label: str = "Piece"
) -> PreviewReport:
    """``"<label> at <square> (<color>, <first move|not first move>)"`` + lists."""
    size = board.size
    if board.occupant is None:
        status = NO_PIECE_STATUS
    else:
        where = square_name(*board.occupant, size)
        phase = "first move" if board.first_move else "not first move"
        status = f"{label} at {where} ({board.active_color.value}, {phase})"

    return PreviewReport(
        status=status,
        moves_text=_join([square_name(x, y, size) for x, y in destinations.moves()]),
        captures_text=_join(
            [square_name(x, y, size) for x, y in destinations.captures()]
        ),
    )
