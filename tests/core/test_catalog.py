"""Tests for the movement-method catalog."""

from __future__ import annotations

import json

import pytest

from pieceforge.core.catalog import (
    KNIGHT_OFFSETS,
    STANDARD_METHODS,
    MovementCatalog,
    MovementMethod,
)
from pieceforge.core.enums import MethodKind
from pieceforge.core.geometry import LeapGeometry, RayGeometry


class TestStandardCatalog:
    def test_five_methods_in_id_order(self, catalog: MovementCatalog) -> None:
        assert len(catalog) == 5
        assert [m.id for m in catalog] == [1, 2, 3, 4, 5]

    def test_kinds(self, catalog: MovementCatalog) -> None:
        kinds = [m.kind for m in catalog]
        assert kinds == [
            MethodKind.RAY,
            MethodKind.RAY,
            MethodKind.RAY,
            MethodKind.LEAP,
            MethodKind.RULE,
        ]

    def test_ray_limit_support(self, catalog: MovementCatalog) -> None:
        supported = {m.key for m in catalog if m.supports_ray_limit}
        assert supported == {
            "orthogonal_ray_unlimited",
            "diagonal_ray_unlimited",
            "king_step_any_direction",
        }

    def test_king_step_is_limited(self, catalog: MovementCatalog) -> None:
        king = catalog.by_key("king_step_any_direction")
        assert isinstance(king.geometry, RayGeometry)
        assert king.geometry.ray_limit == 1
        assert len(king.geometry.rays) == 8

    def test_knight_offsets(self, catalog: MovementCatalog) -> None:
        knight = catalog.get(4)
        assert isinstance(knight.geometry, LeapGeometry)
        assert set(knight.geometry.leaps) == set(KNIGHT_OFFSETS)

    def test_lookup_errors(self, catalog: MovementCatalog) -> None:
        assert 99 not in catalog
        with pytest.raises(KeyError):
            catalog.get(99)
        with pytest.raises(KeyError):
            catalog.by_key("nope")


class TestCatalogAdd:
    def test_duplicate_id(self) -> None:
        catalog = MovementCatalog(STANDARD_METHODS)
        clash = MovementMethod(id=1, key="other", name="Other", geometry=RayGeometry())
        with pytest.raises(ValueError, match="Duplicate movement method id"):
            catalog.add(clash)

    def test_duplicate_key(self) -> None:
        catalog = MovementCatalog(STANDARD_METHODS)
        clash = MovementMethod(
            id=42, key="knight_leap", name="Other", geometry=LeapGeometry()
        )
        with pytest.raises(ValueError, match="Duplicate movement method key"):
            catalog.add(clash)


class TestRecords:
    def test_record_round_trip(self) -> None:
        for method in STANDARD_METHODS:
            assert MovementMethod.from_record(method.to_record()) == method

    def test_sqlite_style_record(self) -> None:
        record = {
            "id": 7,
            "key": "camel_leap",
            "name": "Camel leap",
            "kind": "leap",
            "vectors_json": json.dumps({"leaps": [[1, 3], [3, 1]]}),
            "supports_ray_limit": 0,
        }
        method = MovementMethod.from_record(record)
        assert method.geometry == LeapGeometry(leaps=((1, 3), (3, 1)))
        assert method.supports_ray_limit is False

    def test_supports_flag_as_int(self) -> None:
        method = MovementMethod.from_record(
            {"id": 8, "key": "slide", "kind": "ray", "supports_ray_limit": 1}
        )
        assert method.supports_ray_limit is True
        assert method.name == "slide"

    def test_bad_json_vectors(self) -> None:
        method = MovementMethod.from_record(
            {"id": 9, "key": "broken", "kind": "ray", "vectors_json": "{nope"}
        )
        assert method.geometry == RayGeometry()

    def test_missing_id(self) -> None:
        with pytest.raises(ValueError, match="without id"):
            MovementMethod.from_record({"key": "x", "kind": "ray"})
