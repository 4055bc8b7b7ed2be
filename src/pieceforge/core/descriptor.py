"""MoveDescriptor — one configured move a piece can perform."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pieceforge.core.catalog import MovementMethod
from pieceforge.core.enums import ColorScope, MethodKind, MoveMode
from pieceforge.core.geometry import Geometry, geometry_from_payload, geometry_to_payload
from pieceforge.core.types import as_int, positive_int

_LOGGER = logging.getLogger(__name__)


def _parse_flag(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return as_int(value) == 1


def _field(payload: Mapping[str, Any], snake: str, camel: str) -> Any:
    if snake in payload:
        return payload[snake]
    return payload.get(camel)


@dataclass(frozen=True, slots=True)
class MoveDescriptor:
    """Immutable move entry consumed by the destination engine.

    ``geometry`` is a copy of the movement method's geometry taken when the
    move was configured; ``movement_method_id`` is only a back-reference.
    Each descriptor is evaluated on its own; two descriptors sharing a method
    (split move / capture) need no special handling.
    """

    name: str
    geometry: Geometry
    movement_method_id: int | None = None
    ray_limit: int | None = None
    mode: MoveMode = MoveMode.BOTH
    color_scope: ColorScope = ColorScope.ANY
    first_move_only: bool = False

    @property
    def kind(self) -> MethodKind:
        return self.geometry.kind

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def for_method(
        cls,
        method: MovementMethod,
        *,
        mode: MoveMode = MoveMode.BOTH,
        color_scope: ColorScope = ColorScope.ANY,
        ray_limit: int | None = None,
        first_move_only: bool = False,
        name: str | None = None,
    ) -> MoveDescriptor:
        """Descriptor referencing *method*.

        *ray_limit* is dropped unless the method supports a distance cap.
        """
        return cls(
            name=name or method.name,
            geometry=method.geometry,
            movement_method_id=method.id,
            ray_limit=positive_int(ray_limit) if method.supports_ray_limit else None,
            mode=mode,
            color_scope=color_scope,
            first_move_only=first_move_only,
        )

    @classmethod
    def from_payload(cls, payload: object) -> MoveDescriptor:
        """Parse a descriptor from its JSON-like payload.

        Unknown modes / color scopes fall back to their defaults and a bad
        ray limit reads as unlimited.

        Raises:
            ValueError: *payload* is not a mapping, or its kind is missing or
                unknown.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Move payload must be an object: {payload!r}")
        kind = payload.get("kind")
        if not kind:
            raise ValueError(f"Move payload has no kind: {payload!r}")
        geometry = geometry_from_payload(kind, payload.get("vectors"))
        method_id = positive_int(_field(payload, "movement_method_id", "movementMethodId"))
        name = payload.get("name")
        return cls(
            name=str(name) if name else f"Method {method_id or '?'}",
            geometry=geometry,
            movement_method_id=method_id,
            ray_limit=positive_int(_field(payload, "ray_limit", "rayLimit")),
            mode=MoveMode.parse(payload.get("mode", MoveMode.BOTH.value)),
            color_scope=ColorScope.parse(
                _field(payload, "color_scope", "colorScope") or ColorScope.ANY.value
            ),
            first_move_only=_parse_flag(
                _field(payload, "first_move_only", "firstMoveOnly")
            ),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "movement_method_id": self.movement_method_id,
            "name": self.name,
            "kind": self.kind.value,
            "vectors": geometry_to_payload(self.geometry),
            "ray_limit": self.ray_limit,
            "mode": self.mode.value,
            "color_scope": self.color_scope.value,
            "first_move_only": self.first_move_only,
        }


def descriptors_from_payload(items: object) -> list[MoveDescriptor]:
    """Parse a list of move payloads, skipping entries that cannot be read."""
    if not isinstance(items, (list, tuple)):
        _LOGGER.warning("Expected a list of moves, got %s", type(items).__name__)
        return []
    descriptors: list[MoveDescriptor] = []
    for index, item in enumerate(items):
        try:
            descriptors.append(MoveDescriptor.from_payload(item))
        except ValueError as exc:
            _LOGGER.warning("Skipping move #%d: %s", index, exc)
    return descriptors
