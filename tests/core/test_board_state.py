"""Tests for BoardState mutations and invariants."""

from __future__ import annotations

import pytest

from pieceforge.core.board_state import BoardState
from pieceforge.core.enums import BlockerKind, Color
from pieceforge.core.types import in_bounds


def _assert_invariants(board: BoardState) -> None:
    assert 4 <= board.size <= 20
    for x, y in board.blockers:
        assert in_bounds(x, y, board.size)
    if board.occupant is not None:
        assert in_bounds(*board.occupant, board.size)
        assert board.occupant not in board.blockers


class TestConstruction:
    def test_centered(self) -> None:
        board = BoardState.centered()
        assert board.size == 8
        assert board.occupant == (4, 4)
        assert board.blockers == {}
        assert board.active_color is Color.WHITE
        assert board.first_move is False

    def test_size_clamped(self) -> None:
        assert BoardState(size=2).size == 4
        assert BoardState(size=50).size == 20

    def test_color_parsed(self) -> None:
        assert BoardState(active_color="black").active_color is Color.BLACK  # type: ignore[arg-type]

    def test_constructor_sanitises(self) -> None:
        blockers: dict = {
            (1, 1): BlockerKind.ALLY,
            (9, 9): BlockerKind.ENEMY,
            (0, 0): "enemy",
        }
        board = BoardState(size=4, occupant=(1, 1), blockers=blockers)
        assert board.blockers == {(0, 0): BlockerKind.ENEMY}
        _assert_invariants(board)


class TestMutations:
    def test_place_occupant_replaces_blocker(self) -> None:
        board = BoardState.centered()
        board.set_blocker(1, 1, BlockerKind.ENEMY)
        board.place_occupant(1, 1)
        assert board.occupant == (1, 1)
        assert (1, 1) not in board.blockers

    def test_place_occupant_out_of_bounds_ignored(self) -> None:
        board = BoardState.centered()
        board.place_occupant(8, 0)
        assert board.occupant == (4, 4)

    def test_blocker_on_occupant_ignored(self) -> None:
        board = BoardState.centered()
        board.set_blocker(4, 4, BlockerKind.ALLY)
        assert board.blockers == {}

    def test_blocker_replaced(self) -> None:
        board = BoardState.centered()
        board.set_blocker(0, 0, BlockerKind.ALLY)
        board.set_blocker(0, 0, BlockerKind.ENEMY)
        assert board.blocker_at(0, 0) is BlockerKind.ENEMY

    def test_clear_square(self) -> None:
        board = BoardState.centered()
        board.set_blocker(0, 0, BlockerKind.ALLY)
        board.clear_square(0, 0)
        assert board.blocker_at(0, 0) is None
        board.clear_square(4, 4)
        assert board.occupant is None

    def test_reset_board(self) -> None:
        board = BoardState.centered(size=10)
        board.place_occupant(0, 0)
        board.set_blocker(3, 3, BlockerKind.ENEMY)
        board.reset_board()
        assert board.occupant == (5, 5)
        assert board.blockers == {}

    def test_reset_restores_missing_occupant(self) -> None:
        board = BoardState(size=8)
        board.reset_board()
        assert board.occupant == (4, 4)

    def test_clear_blockers_keeps_occupant(self) -> None:
        board = BoardState.centered()
        board.set_blocker(0, 0, BlockerKind.ALLY)
        board.clear_blockers()
        assert board.blockers == {}
        assert board.occupant == (4, 4)

    def test_color_and_first_move(self) -> None:
        board = BoardState.centered()
        board.set_active_color("black")
        board.set_first_move(True)
        assert board.active_color is Color.BLACK
        assert board.first_move is True
        board.set_active_color("purple")
        assert board.active_color is Color.WHITE


class TestResize:
    @pytest.mark.parametrize(
        ("requested", "expected"),
        [(10, 10), ("12", 12), (2, 4), (21, 20), (0, 8), (-5, 8), ("abc", 8), (None, 8)],
    )
    def test_requested_size(self, requested: object, expected: int) -> None:
        board = BoardState.centered()
        assert board.resize(requested) == expected
        assert board.size == expected

    def test_shrink_drops_out_of_range_blockers(self) -> None:
        board = BoardState.centered(size=10)
        board.place_occupant(1, 1)
        board.set_blocker(9, 9, BlockerKind.ENEMY)
        board.set_blocker(2, 2, BlockerKind.ALLY)
        board.resize(6)
        assert board.blockers == {(2, 2): BlockerKind.ALLY}
        assert board.occupant == (1, 1)
        _assert_invariants(board)

    def test_shrink_recentres_occupant(self) -> None:
        board = BoardState.centered(size=12)
        board.place_occupant(11, 0)
        board.resize(5)
        assert board.occupant == (2, 2)
        _assert_invariants(board)

    def test_recentred_occupant_evicts_blocker(self) -> None:
        board = BoardState.centered(size=12)
        board.place_occupant(11, 11)
        board.set_blocker(3, 3, BlockerKind.ENEMY)
        board.resize(6)
        assert board.occupant == (3, 3)
        assert board.blockers == {}

    def test_absent_occupant_stays_absent(self) -> None:
        board = BoardState(size=10)
        board.resize(4)
        assert board.occupant is None

    @pytest.mark.parametrize("n", [4, 5, 7, 8, 13, 20])
    def test_invariants_hold_for_every_size(self, n: int) -> None:
        board = BoardState.centered(size=20)
        for i in range(0, 20, 3):
            board.set_blocker(i, 19 - i, BlockerKind.ENEMY)
        board.place_occupant(19, 0)
        board.resize(n)
        _assert_invariants(board)


def test_copy_is_independent() -> None:
    board = BoardState.centered()
    board.set_blocker(0, 0, BlockerKind.ALLY)
    snapshot = board.copy()
    board.set_blocker(1, 1, BlockerKind.ENEMY)
    board.place_occupant(2, 2)
    assert snapshot.blockers == {(0, 0): BlockerKind.ALLY}
    assert snapshot.occupant == (4, 4)
