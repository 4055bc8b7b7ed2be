"""Movement geometry variants — the payload a movement method carries.

Three shapes exist, each an immutable value object:

* :class:`RayGeometry` — directions walked square by square.
* :class:`LeapGeometry` — fixed offsets applied once.
* :class:`RuleGeometry` — per-color directional rules (pawn-style).

:func:`geometry_from_payload` turns the loosely-typed JSON payload stored by
the record layer into one of these.  Malformed entries are dropped rather
than rejected, so a method with no usable vectors simply reaches nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

from pieceforge.core.enums import Color, MethodKind
from pieceforge.core.types import Vector, parse_vector, positive_int

_LOGGER = logging.getLogger(__name__)

DEFAULT_FIRST_MOVE_LIMIT = 2


@dataclass(frozen=True, slots=True)
class RayGeometry:
    """Sliding directions with an optional intrinsic distance cap."""

    kind: ClassVar[MethodKind] = MethodKind.RAY

    rays: tuple[Vector, ...] = ()
    ray_limit: int | None = None


@dataclass(frozen=True, slots=True)
class LeapGeometry:
    """Single-jump offsets; nothing in between can block them."""

    kind: ClassVar[MethodKind] = MethodKind.LEAP

    leaps: tuple[Vector, ...] = ()


@dataclass(frozen=True, slots=True)
class FirstMoveRule:
    """Extra non-capturing ray reach available before the first move."""

    rays: tuple[Vector, ...] = ()
    ray_limit: int | None = None

    @property
    def effective_limit(self) -> int:
        return self.ray_limit or DEFAULT_FIRST_MOVE_LIMIT


@dataclass(frozen=True, slots=True)
class ColorRule:
    """Directional rule set for one color."""

    move_only: tuple[Vector, ...] = ()
    capture_only: tuple[Vector, ...] = ()
    first_move: FirstMoveRule | None = None


@dataclass(frozen=True, slots=True)
class RuleGeometry:
    """Color-dependent rules; a missing side contributes nothing."""

    kind: ClassVar[MethodKind] = MethodKind.RULE

    white: ColorRule | None = None
    black: ColorRule | None = None

    def rule_for(self, color: Color) -> ColorRule | None:
        return self.white if color is Color.WHITE else self.black


Geometry: TypeAlias = RayGeometry | LeapGeometry | RuleGeometry


# ── Payload parsing ──────────────────────────────────────────────────────────


def _field(payload: Mapping[str, Any], *names: str) -> Any:
    """First present key among *names* (snake_case first, then camelCase)."""
    for name in names:
        if name in payload:
            return payload[name]
    return None


def _vectors(raw: object) -> tuple[Vector, ...]:
    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            _LOGGER.debug("Ignoring non-list vector set: %r", raw)
        return ()
    vectors: list[Vector] = []
    for item in raw:
        vec = parse_vector(item)
        if vec is None:
            _LOGGER.debug("Ignoring malformed vector: %r", item)
            continue
        if vec == (0, 0):
            continue
        vectors.append(vec)
    return tuple(vectors)


def _first_move_rule(raw: object) -> FirstMoveRule | None:
    if not isinstance(raw, Mapping):
        return None
    rays = _field(raw, "rays")
    if not isinstance(rays, (list, tuple)):
        return None
    return FirstMoveRule(
        rays=_vectors(rays),
        ray_limit=positive_int(_field(raw, "ray_limit", "rayLimit")),
    )


def _color_rule(raw: object) -> ColorRule | None:
    if not isinstance(raw, Mapping):
        return None
    return ColorRule(
        move_only=_vectors(_field(raw, "move_only", "moveOnly")),
        capture_only=_vectors(_field(raw, "capture_only", "captureOnly")),
        first_move=_first_move_rule(_field(raw, "first_move", "firstMove")),
    )


def geometry_from_payload(kind: MethodKind | str, payload: object) -> Geometry:
    """Build the geometry for *kind* from a JSON-like *payload*.

    Raises:
        ValueError: *kind* is not one of ``ray``, ``leap``, ``rule``.
    """
    try:
        method_kind = MethodKind(kind)
    except ValueError:
        raise ValueError(f"Unknown movement kind: {kind!r}") from None

    data: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}

    if method_kind is MethodKind.RAY:
        return RayGeometry(
            rays=_vectors(_field(data, "rays")),
            ray_limit=positive_int(_field(data, "ray_limit", "rayLimit")),
        )
    if method_kind is MethodKind.LEAP:
        return LeapGeometry(leaps=_vectors(_field(data, "leaps")))
    return RuleGeometry(
        white=_color_rule(_field(data, "white")),
        black=_color_rule(_field(data, "black")),
    )


# ── Payload serialisation ────────────────────────────────────────────────────


def _vector_list(vectors: tuple[Vector, ...]) -> list[list[int]]:
    return [[dx, dy] for dx, dy in vectors]


def _color_rule_payload(rule: ColorRule) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if rule.move_only:
        out["move_only"] = _vector_list(rule.move_only)
    if rule.capture_only:
        out["capture_only"] = _vector_list(rule.capture_only)
    if rule.first_move is not None:
        out["first_move"] = {
            "rays": _vector_list(rule.first_move.rays),
            "ray_limit": rule.first_move.ray_limit,
        }
    return out


def geometry_to_payload(geometry: Geometry) -> dict[str, Any]:
    """JSON-ready payload; :func:`geometry_from_payload` reads it back."""
    if isinstance(geometry, RayGeometry):
        return {"rays": _vector_list(geometry.rays), "ray_limit": geometry.ray_limit}
    if isinstance(geometry, LeapGeometry):
        return {"leaps": _vector_list(geometry.leaps)}
    if isinstance(geometry, RuleGeometry):
        out: dict[str, Any] = {}
        if geometry.white is not None:
            out["white"] = _color_rule_payload(geometry.white)
        if geometry.black is not None:
            out["black"] = _color_rule_payload(geometry.black)
        return out
    raise TypeError(f"Unsupported geometry: {geometry!r}")
