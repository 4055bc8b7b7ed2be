"""PreviewController — owns the board state and drives re-evaluation.

Every state-changing call follows the same cycle: mutate the
:class:`BoardState` (which re-sanitises itself), recompute destinations from
scratch, then notify render callbacks with a fresh :class:`PreviewFrame`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from pieceforge.core.board_state import BoardState
from pieceforge.core.descriptor import MoveDescriptor
from pieceforge.core.destinations import compute_destinations
from pieceforge.core.enums import BlockerKind, Color
from pieceforge.core.pieces import PieceDefinition
from pieceforge.preview.interfaces import PreviewFrame, RenderCallback, Tool
from pieceforge.preview.report import build_report

_LOGGER = logging.getLogger(__name__)

ToolCallback = Callable[[Tool], None]

_TOOL_BLOCKERS: dict[Tool, BlockerKind] = {
    Tool.ALLY: BlockerKind.ALLY,
    Tool.ENEMY: BlockerKind.ENEMY,
}


@dataclass
class PreviewEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_render: list[RenderCallback] = field(default_factory=list)
    on_tool_changed: list[ToolCallback] = field(default_factory=list)


class PreviewController:
    """Single owner of the preview board; translates gestures into updates.

    Thread-safety: meant to be driven from one thread (the UI thread); each
    call runs mutate → recompute → notify to completion.
    """

    # __weakref__ lets Qt signals connect to bound methods.
    __slots__ = (
        "_board",
        "_moves",
        "_tool",
        "_label",
        "_frame",
        "events",
        "__weakref__",
    )

    def __init__(
        self,
        board: BoardState | None = None,
        moves: Iterable[MoveDescriptor] = (),
        *,
        label: str = "Piece",
    ) -> None:
        self._board = board if board is not None else BoardState.centered()
        self._moves: tuple[MoveDescriptor, ...] = tuple(moves)
        self._tool = Tool.PIECE
        self._label = label
        self._frame: PreviewFrame | None = None
        self.events = PreviewEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> BoardState:
        """Live board state; mutate it only through the controller."""
        return self._board

    @property
    def moves(self) -> tuple[MoveDescriptor, ...]:
        return self._moves

    @property
    def tool(self) -> Tool:
        return self._tool

    @property
    def label(self) -> str:
        return self._label

    @property
    def frame(self) -> PreviewFrame:
        """Most recent frame, computed on demand the first time."""
        if self._frame is None:
            return self.refresh()
        return self._frame

    # ── Gestures ─────────────────────────────────────────────────────────

    def select_tool(self, tool: Tool | str) -> None:
        self._tool = Tool.parse(tool)
        for cb in self.events.on_tool_changed:
            cb(self._tool)

    def apply_tool(self, x: int, y: int) -> bool:
        """Apply the active tool to square ``(x, y)``.

        Returns True when the board changed (and a new frame was emitted).
        """
        board = self._board
        if not board.in_bounds(x, y):
            return False

        if self._tool is Tool.PIECE:
            board.place_occupant(x, y)
        elif board.is_occupant(x, y):
            # Only the eraser may touch the previewed piece.
            if self._tool is not Tool.ERASE:
                return False
            board.clear_square(x, y)
        elif self._tool is Tool.ERASE:
            board.clear_square(x, y)
        else:
            board.set_blocker(x, y, _TOOL_BLOCKERS[self._tool])

        self.refresh()
        return True

    # ── Board operations ─────────────────────────────────────────────────

    def place_occupant(self, x: int, y: int) -> None:
        self._board.place_occupant(x, y)
        self.refresh()

    def set_blocker(self, x: int, y: int, kind: BlockerKind) -> None:
        self._board.set_blocker(x, y, kind)
        self.refresh()

    def clear_square(self, x: int, y: int) -> None:
        self._board.clear_square(x, y)
        self.refresh()

    def resize(self, requested: object) -> int:
        size = self._board.resize(requested)
        self.refresh()
        return size

    def set_active_color(self, color: Color | str) -> None:
        self._board.set_active_color(color)
        self.refresh()

    def set_first_move(self, first_move: bool) -> None:
        self._board.set_first_move(first_move)
        self.refresh()

    def reset_board(self) -> None:
        self._board.reset_board()
        self.refresh()

    def clear_blockers(self) -> None:
        self._board.clear_blockers()
        self.refresh()

    # ── Move source ──────────────────────────────────────────────────────

    def set_moves(self, moves: Iterable[MoveDescriptor]) -> None:
        self._moves = tuple(moves)
        _LOGGER.debug("Move list replaced (%d descriptors)", len(self._moves))
        self.refresh()

    def set_label(self, label: str) -> None:
        self._label = label or "Piece"
        self.refresh()

    def load_piece(self, piece: PieceDefinition) -> None:
        """Preview *piece*: take over its label and move list."""
        self._label = piece.name
        self.set_moves(piece.moves)

    # ── Evaluation ───────────────────────────────────────────────────────

    def refresh(self) -> PreviewFrame:
        """Recompute destinations and notify every render callback."""
        board = self._board
        board.sanitize()
        destinations = compute_destinations(board, self._moves)
        frame = PreviewFrame(
            board=board.copy(),
            destinations=destinations,
            report=build_report(board, destinations, self._label),
            tool=self._tool,
        )
        self._frame = frame
        for cb in self.events.on_render:
            cb(frame)
        return frame
