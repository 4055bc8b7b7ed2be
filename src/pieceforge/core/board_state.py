"""BoardState — the live preview snapshot and its invariant-keeping mutations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pieceforge.core.enums import BlockerKind, Color
from pieceforge.core.types import (
    DEFAULT_BOARD_SIZE,
    Coord,
    clamp_board_size,
    in_bounds,
    positive_int,
)

_LOGGER = logging.getLogger(__name__)


@dataclass
class BoardState:
    """Board size, previewed piece, blockers, color and first-move flag.

    Invariants (restored by :meth:`sanitize` after every mutation):

    * ``MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE``;
    * every blocker lies on the board;
    * the occupant, when present, lies on the board and never shares its
      square with a blocker.

    When a resize pushes the occupant off the board it is re-centred; an
    absent occupant stays absent.
    """

    size: int = DEFAULT_BOARD_SIZE
    occupant: Coord | None = None
    blockers: dict[Coord, BlockerKind] = field(default_factory=dict)
    active_color: Color = Color.WHITE
    first_move: bool = False

    def __post_init__(self) -> None:
        self.size = clamp_board_size(self.size)
        self.active_color = Color.parse(self.active_color)
        self.sanitize()

    @classmethod
    def centered(
        cls,
        size: int = DEFAULT_BOARD_SIZE,
        *,
        active_color: Color = Color.WHITE,
        first_move: bool = False,
    ) -> BoardState:
        """Empty board with the occupant in the middle."""
        state = cls(size=size, active_color=active_color, first_move=first_move)
        state.occupant = state.center
        return state

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def center(self) -> Coord:
        return self.size // 2, self.size // 2

    def in_bounds(self, x: int, y: int) -> bool:
        return in_bounds(x, y, self.size)

    def blocker_at(self, x: int, y: int) -> BlockerKind | None:
        return self.blockers.get((x, y))

    def is_occupant(self, x: int, y: int) -> bool:
        return self.occupant == (x, y)

    # ── Mutations ────────────────────────────────────────────────────────

    def place_occupant(self, x: int, y: int) -> None:
        """Move the previewed piece to ``(x, y)``, replacing any blocker there."""
        if not self.in_bounds(x, y):
            return
        self.occupant = (x, y)
        self.blockers.pop((x, y), None)
        _LOGGER.debug("Occupant placed at %s", self.occupant)
        self.sanitize()

    def set_blocker(self, x: int, y: int, kind: BlockerKind) -> None:
        """Put an ally / enemy blocker on ``(x, y)``; no-op on the occupant."""
        if not self.in_bounds(x, y) or self.is_occupant(x, y):
            return
        self.blockers[(x, y)] = BlockerKind(kind)
        _LOGGER.debug("%s blocker set at %s", kind, (x, y))
        self.sanitize()

    def clear_square(self, x: int, y: int) -> None:
        """Remove the occupant or the blocker on ``(x, y)``."""
        if self.is_occupant(x, y):
            self.occupant = None
            _LOGGER.debug("Occupant cleared")
        elif self.blockers.pop((x, y), None) is not None:
            _LOGGER.debug("Blocker cleared at %s", (x, y))
        self.sanitize()

    def resize(self, requested: object) -> int:
        """Resize to *requested* (clamped to 4–20) and return the new size.

        Anything that is not a positive integer falls back to the default
        size of 8.
        """
        self.size = clamp_board_size(positive_int(requested) or DEFAULT_BOARD_SIZE)
        _LOGGER.debug("Board resized to %d", self.size)
        self.sanitize()
        return self.size

    def set_active_color(self, color: Color | str) -> None:
        self.active_color = Color.parse(color)

    def set_first_move(self, first_move: bool) -> None:
        self.first_move = bool(first_move)

    def reset_board(self) -> None:
        """Clear all blockers and put the occupant back in the centre."""
        self.blockers = {}
        self.occupant = self.center
        self.sanitize()

    def clear_blockers(self) -> None:
        self.blockers = {}

    def sanitize(self) -> None:
        """Restore the class invariants in place."""
        self.blockers = {
            coord: BlockerKind(kind)
            for coord, kind in self.blockers.items()
            if self.in_bounds(*coord)
        }
        if self.occupant is not None and not self.in_bounds(*self.occupant):
            _LOGGER.debug("Occupant %s off board, re-centring", self.occupant)
            self.occupant = self.center
        if self.occupant is not None:
            self.blockers.pop(self.occupant, None)

    def copy(self) -> BoardState:
        return BoardState(
            size=self.size,
            occupant=self.occupant,
            blockers=dict(self.blockers),
            active_color=self.active_color,
            first_move=self.first_move,
        )
