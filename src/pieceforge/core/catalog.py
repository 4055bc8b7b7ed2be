"""Movement-method catalog — the reusable shapes a piece's moves refer to."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pieceforge.core.enums import MethodKind
from pieceforge.core.geometry import (
    ColorRule,
    FirstMoveRule,
    Geometry,
    LeapGeometry,
    RayGeometry,
    RuleGeometry,
    geometry_from_payload,
    geometry_to_payload,
)
from pieceforge.core.types import Vector, as_int

ORTHOGONAL_DIRS: tuple[Vector, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_DIRS: tuple[Vector, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ALL_DIRS: tuple[Vector, ...] = ORTHOGONAL_DIRS + DIAGONAL_DIRS

KNIGHT_OFFSETS: tuple[Vector, ...] = (
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
)


@dataclass(frozen=True, slots=True)
class MovementMethod:
    """Immutable catalog entry describing one movement shape."""

    id: int
    key: str
    name: str
    geometry: Geometry
    supports_ray_limit: bool = False
    description: str = ""

    @property
    def kind(self) -> MethodKind:
        return self.geometry.kind

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> MovementMethod:
        """Build from a stored record (``vectors`` may be a dict or JSON text).

        Raises:
            ValueError: the record has no integer ``id`` or an unknown ``kind``.
        """
        method_id = as_int(record.get("id"))
        if method_id is None:
            raise ValueError(f"Movement method record without id: {record!r}")
        vectors = record.get("vectors")
        if vectors is None and "vectors_json" in record:
            try:
                vectors = json.loads(str(record["vectors_json"]))
            except json.JSONDecodeError:
                vectors = {}
        supports = record.get("supports_ray_limit")
        if not isinstance(supports, bool):
            supports = as_int(supports) == 1  # SQLite stores 0 / 1
        key = str(record.get("key") or record.get("name") or f"method_{method_id}")
        return cls(
            id=method_id,
            key=key,
            name=str(record.get("name") or key),
            geometry=geometry_from_payload(record.get("kind", "ray"), vectors),
            supports_ray_limit=supports,
            description=str(record.get("description") or ""),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "key": self.key,
            "name": self.name,
            "kind": self.kind.value,
            "vectors": geometry_to_payload(self.geometry),
            "supports_ray_limit": self.supports_ray_limit,
            "description": self.description,
        }


STANDARD_METHODS: tuple[MovementMethod, ...] = (
    MovementMethod(
        id=1,
        key="orthogonal_ray_unlimited",
        name="Orthogonal ray",
        geometry=RayGeometry(rays=ORTHOGONAL_DIRS),
        supports_ray_limit=True,
        description="Moves along rank/file rays with no fixed distance limit.",
    ),
    MovementMethod(
        id=2,
        key="diagonal_ray_unlimited",
        name="Diagonal ray",
        geometry=RayGeometry(rays=DIAGONAL_DIRS),
        supports_ray_limit=True,
        description="Moves along diagonal rays with no fixed distance limit.",
    ),
    MovementMethod(
        id=3,
        key="king_step_any_direction",
        name="King step",
        geometry=RayGeometry(rays=ALL_DIRS, ray_limit=1),
        supports_ray_limit=True,
        description="One-square step in any direction.",
    ),
    MovementMethod(
        id=4,
        key="knight_leap",
        name="Knight leap",
        geometry=LeapGeometry(leaps=KNIGHT_OFFSETS),
        description="L-shaped leap movement.",
    ),
    MovementMethod(
        id=5,
        key="pawn_core_directional",
        name="Pawn rules",
        geometry=RuleGeometry(
            white=ColorRule(
                move_only=((0, -1),),
                capture_only=((-1, -1), (1, -1)),
                first_move=FirstMoveRule(rays=((0, -1),), ray_limit=2),
            ),
            black=ColorRule(
                move_only=((0, 1),),
                capture_only=((-1, 1), (1, 1)),
                first_move=FirstMoveRule(rays=((0, 1),), ray_limit=2),
            ),
        ),
        description="Directional pawn movement and capture rules.",
    ),
)


class MovementCatalog:
    """Lookup of movement methods by id and by key."""

    __slots__ = ("_by_id", "_by_key")

    def __init__(self, methods: Iterable[MovementMethod] = ()) -> None:
        self._by_id: dict[int, MovementMethod] = {}
        self._by_key: dict[str, MovementMethod] = {}
        for method in methods:
            self.add(method)

    @classmethod
    def standard(cls) -> MovementCatalog:
        return cls(STANDARD_METHODS)

    def add(self, method: MovementMethod) -> None:
        if method.id in self._by_id:
            raise ValueError(f"Duplicate movement method id: {method.id}")
        if method.key in self._by_key:
            raise ValueError(f"Duplicate movement method key: {method.key!r}")
        self._by_id[method.id] = method
        self._by_key[method.key] = method

    def get(self, method_id: int) -> MovementMethod:
        """Method with *method_id*; raises ``KeyError`` if unknown."""
        return self._by_id[method_id]

    def by_key(self, key: str) -> MovementMethod:
        """Method with *key*; raises ``KeyError`` if unknown."""
        return self._by_key[key]

    def __contains__(self, method_id: object) -> bool:
        return method_id in self._by_id

    def __iter__(self) -> Iterator[MovementMethod]:
        return iter(sorted(self._by_id.values(), key=lambda m: m.id))

    def __len__(self) -> int:
        return len(self._by_id)
