"""Destination engine — reachable squares for a set of move descriptors.

The engine is a pure function of ``(board, descriptors)``: every call starts
from an empty map and OR-accumulates ``move`` / ``capture`` flags, so the
result does not depend on descriptor order and repeated calls on the same
input are identical.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pieceforge.core.enums import BlockerKind
from pieceforge.core.geometry import LeapGeometry, RayGeometry, RuleGeometry
from pieceforge.core.types import Coord, Vector, coord_key

if TYPE_CHECKING:
    from pieceforge.core.board_state import BoardState
    from pieceforge.core.descriptor import MoveDescriptor


@dataclass(frozen=True, slots=True)
class Destination:
    """Flags for one reachable square; at least one of them is set."""

    move: bool = False
    capture: bool = False

    @property
    def is_both(self) -> bool:
        return self.move and self.capture


class DestinationMap(Mapping[Coord, Destination]):
    """Square → :class:`Destination`, iterated in board order (rows, then files)."""

    __slots__ = ("_marks",)

    def __init__(self) -> None:
        self._marks: dict[Coord, Destination] = {}

    def mark(self, coord: Coord, *, move: bool = False, capture: bool = False) -> None:
        """OR *move* / *capture* into the flags already stored for *coord*."""
        if not (move or capture):
            return
        prev = self._marks.get(coord)
        if prev is None:
            self._marks[coord] = Destination(move=move, capture=capture)
        else:
            self._marks[coord] = Destination(
                move=prev.move or move, capture=prev.capture or capture
            )

    # ── Mapping protocol ─────────────────────────────────────────────────

    def __getitem__(self, coord: Coord) -> Destination:
        return self._marks[coord]

    def __iter__(self) -> Iterator[Coord]:
        return iter(sorted(self._marks, key=lambda c: (c[1], c[0])))

    def __len__(self) -> int:
        return len(self._marks)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DestinationMap):
            return self._marks == other._marks
        return super().__eq__(other)

    def __repr__(self) -> str:
        body = ", ".join(
            f"{c}: {'both' if d.is_both else 'move' if d.move else 'capture'}"
            for c, d in self.items()
        )
        return f"DestinationMap({{{body}}})"

    # ── Views ────────────────────────────────────────────────────────────

    def moves(self) -> list[Coord]:
        return [c for c, d in self.items() if d.move]

    def captures(self) -> list[Coord]:
        return [c for c, d in self.items() if d.capture]

    def to_dict(self) -> dict[str, dict[str, bool]]:
        """JSON-ready form keyed by :func:`coord_key`."""
        return {
            coord_key(*c): {"move": d.move, "capture": d.capture}
            for c, d in self.items()
        }


class DestinationEngine:
    """Evaluates descriptors against one board snapshot.

    Instances are cheap and single-use; :func:`compute_destinations` is the
    public entry point.
    """

    __slots__ = ("_board", "_origin", "_result")

    def __init__(self, board: BoardState, origin: Coord) -> None:
        self._board = board
        self._origin = origin
        self._result = DestinationMap()

    @property
    def result(self) -> DestinationMap:
        return self._result

    def apply(self, descriptor: MoveDescriptor) -> None:
        board = self._board
        if not descriptor.color_scope.admits(board.active_color):
            return
        if descriptor.first_move_only and not board.first_move:
            return

        geometry = descriptor.geometry
        if isinstance(geometry, RayGeometry):
            limit = descriptor.ray_limit or geometry.ray_limit or board.size
            self._apply_rays(
                geometry.rays,
                limit,
                allows_move=descriptor.mode.allows_move,
                allows_capture=descriptor.mode.allows_capture,
            )
        elif isinstance(geometry, LeapGeometry):
            self._apply_leaps(
                geometry.leaps,
                allows_move=descriptor.mode.allows_move,
                allows_capture=descriptor.mode.allows_capture,
            )
        elif isinstance(geometry, RuleGeometry):
            self._apply_rule(
                geometry,
                allows_move=descriptor.mode.allows_move,
                allows_capture=descriptor.mode.allows_capture,
            )
        else:
            raise TypeError(f"Unsupported geometry: {geometry!r}")

    # -- Evaluators (private) ----------------------------------------------

    def _target(self, dx: int, dy: int, step: int = 1) -> Coord | None:
        x = self._origin[0] + dx * step
        y = self._origin[1] + dy * step
        if not self._board.in_bounds(x, y):
            return None
        return x, y

    def _apply_rays(
        self,
        rays: tuple[Vector, ...],
        limit: int,
        *,
        allows_move: bool,
        allows_capture: bool,
    ) -> None:
        blockers = self._board.blockers
        for dx, dy in rays:
            for step in range(1, limit + 1):
                target = self._target(dx, dy, step)
                if target is None:
                    break
                blocker = blockers.get(target)
                if blocker is None:
                    self._result.mark(target, move=allows_move)
                    continue
                # First obstacle ends the ray whether or not it is capturable.
                if blocker is BlockerKind.ENEMY:
                    self._result.mark(target, capture=allows_capture)
                break

    def _apply_leaps(
        self,
        leaps: tuple[Vector, ...],
        *,
        allows_move: bool,
        allows_capture: bool,
    ) -> None:
        blockers = self._board.blockers
        for dx, dy in leaps:
            target = self._target(dx, dy)
            if target is None:
                continue
            blocker = blockers.get(target)
            if blocker is None:
                self._result.mark(target, move=allows_move)
            elif blocker is BlockerKind.ENEMY:
                self._result.mark(target, capture=allows_capture)

    def _apply_rule(
        self,
        geometry: RuleGeometry,
        *,
        allows_move: bool,
        allows_capture: bool,
    ) -> None:
        board = self._board
        rule = geometry.rule_for(board.active_color)
        if rule is None:
            return
        blockers = board.blockers

        if allows_move:
            for dx, dy in rule.move_only:
                target = self._target(dx, dy)
                if target is not None and target not in blockers:
                    self._result.mark(target, move=True)

        if allows_capture:
            for dx, dy in rule.capture_only:
                target = self._target(dx, dy)
                if target is not None and blockers.get(target) is BlockerKind.ENEMY:
                    self._result.mark(target, capture=True)

        first = rule.first_move
        if allows_move and board.first_move and first is not None:
            limit = first.effective_limit
            for dx, dy in first.rays:
                for step in range(1, limit + 1):
                    target = self._target(dx, dy, step)
                    if target is None or target in blockers:
                        break
                    self._result.mark(target, move=True)


def compute_destinations(
    board: BoardState, descriptors: Iterable[MoveDescriptor]
) -> DestinationMap:
    """Reachable squares for *descriptors* from ``board.occupant``.

    Returns an empty map when no piece is placed.
    """
    if board.occupant is None:
        return DestinationMap()
    engine = DestinationEngine(board, board.occupant)
    for descriptor in descriptors:
        engine.apply(descriptor)
    return engine.result
