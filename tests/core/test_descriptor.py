"""Tests for MoveDescriptor construction and payload parsing."""

from __future__ import annotations

import logging

import pytest

from pieceforge.core.board_state import BoardState
from pieceforge.core.catalog import MovementCatalog
from pieceforge.core.descriptor import MoveDescriptor, descriptors_from_payload
from pieceforge.core.destinations import compute_destinations
from pieceforge.core.enums import ColorScope, MethodKind, MoveMode
from pieceforge.core.geometry import LeapGeometry, RayGeometry

KNIGHT_PAYLOAD = {
    "movement_method_id": 4,
    "name": "knight_leap",
    "kind": "leap",
    "vectors": {"leaps": [[1, 2], [2, 1]]},
    "ray_limit": None,
    "mode": "both",
    "color_scope": "any",
    "first_move_only": False,
}


class TestForMethod:
    def test_copies_method_geometry(self, catalog: MovementCatalog) -> None:
        method = catalog.by_key("orthogonal_ray_unlimited")
        desc = MoveDescriptor.for_method(method, mode=MoveMode.MOVE, ray_limit=3)
        assert desc.geometry is method.geometry
        assert desc.movement_method_id == 1
        assert desc.ray_limit == 3
        assert desc.name == "Orthogonal ray"
        assert desc.kind is MethodKind.RAY

    def test_limit_dropped_when_unsupported(self, catalog: MovementCatalog) -> None:
        desc = MoveDescriptor.for_method(catalog.by_key("knight_leap"), ray_limit=3)
        assert desc.ray_limit is None

    def test_non_positive_limit_dropped(self, catalog: MovementCatalog) -> None:
        desc = MoveDescriptor.for_method(catalog.get(2), ray_limit=0)
        assert desc.ray_limit is None


class TestFromPayload:
    def test_full_payload(self) -> None:
        desc = MoveDescriptor.from_payload(KNIGHT_PAYLOAD)
        assert desc.name == "knight_leap"
        assert desc.movement_method_id == 4
        assert desc.geometry == LeapGeometry(leaps=((1, 2), (2, 1)))
        assert desc.mode is MoveMode.BOTH
        assert desc.color_scope is ColorScope.ANY
        assert desc.first_move_only is False

    def test_camel_case_keys(self) -> None:
        desc = MoveDescriptor.from_payload(
            {
                "movementMethodId": 1,
                "kind": "ray",
                "vectors": {"rays": [[1, 0]]},
                "rayLimit": 2,
                "colorScope": "black",
                "firstMoveOnly": 1,
                "mode": "capture",
            }
        )
        assert desc.movement_method_id == 1
        assert desc.ray_limit == 2
        assert desc.color_scope is ColorScope.BLACK
        assert desc.first_move_only is True
        assert desc.mode is MoveMode.CAPTURE

    def test_lenient_defaults(self) -> None:
        desc = MoveDescriptor.from_payload(
            {
                "kind": "ray",
                "vectors": {"rays": [[0, 1]]},
                "mode": "fly",
                "color_scope": "red",
                "ray_limit": -1,
            }
        )
        assert desc.kind is MethodKind.RAY
        assert desc.mode is MoveMode.BOTH
        assert desc.color_scope is ColorScope.ANY
        assert desc.ray_limit is None
        assert desc.name == "Method ?"

    def test_missing_kind(self) -> None:
        with pytest.raises(ValueError, match="has no kind"):
            MoveDescriptor.from_payload({"vectors": {"rays": [[1, 0]]}, "mode": "both"})

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown movement kind"):
            MoveDescriptor.from_payload({"kind": "warp"})

    def test_non_mapping(self) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            MoveDescriptor.from_payload(["ray"])

    def test_payload_round_trip(self) -> None:
        desc = MoveDescriptor(
            name="Slide",
            geometry=RayGeometry(rays=((1, 1),), ray_limit=None),
            movement_method_id=2,
            ray_limit=5,
            mode=MoveMode.MOVE,
            color_scope=ColorScope.WHITE,
            first_move_only=True,
        )
        assert MoveDescriptor.from_payload(desc.to_payload()) == desc


def test_descriptors_from_payload_skips_bad_entries(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="pieceforge.core.descriptor"):
        descs = descriptors_from_payload([KNIGHT_PAYLOAD, "junk", {"kind": "warp"}])
    assert [d.name for d in descs] == ["knight_leap"]
    assert "Skipping move #1" in caplog.text
    assert "Skipping move #2" in caplog.text


def test_descriptors_from_payload_non_list() -> None:
    assert descriptors_from_payload({"moves": []}) == []


def test_move_without_kind_adds_no_destinations(
    caplog: pytest.LogCaptureFixture,
) -> None:
    board = BoardState.centered(8)
    with caplog.at_level(logging.WARNING, logger="pieceforge.core.descriptor"):
        descs = descriptors_from_payload(
            [{"vectors": {"rays": [[1, 0]]}, "mode": "both"}]
        )
    assert descs == []
    assert "Skipping move #0" in caplog.text
    assert len(compute_destinations(board, descs)) == 0
