"""Authoring helpers — turn per-method move settings into descriptors.

A piece can express split behaviour for one movement method (say, slide to
move but step to capture) by carrying two descriptors with complementary
modes.  That pairing lives here only; the destination engine never sees it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pieceforge.core.catalog import MovementMethod
from pieceforge.core.descriptor import MoveDescriptor
from pieceforge.core.enums import ColorScope, MoveMode
from pieceforge.core.types import positive_int

SECONDARY_SUFFIX = " (secondary)"


def parsed_ray_limit(method: MovementMethod, raw: object) -> int | None:
    """Ray limit from a form field, or ``None`` when unset / unsupported."""
    if not method.supports_ray_limit:
        return None
    return positive_int(raw)


@dataclass
class MoveConfig:
    """Settings a user picked for one movement method of a piece."""

    method: MovementMethod
    mode: MoveMode = MoveMode.BOTH
    color_scope: ColorScope = ColorScope.ANY
    ray_limit: int | None = None
    first_move_only: bool = False
    secondary_enabled: bool = False
    secondary_ray_limit: int | None = None

    @classmethod
    def from_form(cls, method: MovementMethod, fields: Mapping[str, Any]) -> MoveConfig:
        """Read raw form fields (strings, checkbox values of ``"1"``)."""
        return cls(
            method=method,
            mode=MoveMode.parse(fields.get("mode")),
            color_scope=ColorScope.parse(fields.get("color_scope")),
            ray_limit=parsed_ray_limit(method, fields.get("ray_limit")),
            first_move_only=str(fields.get("first_move_only", "")) == "1",
            secondary_enabled=str(fields.get("secondary_mode_enabled", "")) == "1",
            secondary_ray_limit=parsed_ray_limit(
                method, fields.get("secondary_ray_limit")
            ),
        )

    @property
    def has_secondary(self) -> bool:
        """Whether a complementary second descriptor will be emitted."""
        return (
            self.secondary_enabled
            and self.method.supports_ray_limit
            and self.mode.complement is not None
        )


def build_descriptors(config: MoveConfig) -> list[MoveDescriptor]:
    """Primary descriptor, plus the complementary one when enabled."""
    method = config.method
    primary = MoveDescriptor.for_method(
        method,
        mode=config.mode,
        color_scope=config.color_scope,
        ray_limit=config.ray_limit,
        first_move_only=config.first_move_only,
    )
    secondary_mode = config.mode.complement
    if not config.has_secondary or secondary_mode is None:
        return [primary]

    secondary = MoveDescriptor.for_method(
        method,
        mode=secondary_mode,
        color_scope=config.color_scope,
        ray_limit=config.secondary_ray_limit,
        first_move_only=config.first_move_only,
        name=method.name + SECONDARY_SUFFIX,
    )
    return [primary, secondary]


def build_piece_moves(configs: Iterable[MoveConfig]) -> list[MoveDescriptor]:
    """Descriptors for every configured method, in configuration order."""
    moves: list[MoveDescriptor] = []
    for config in configs:
        moves.extend(build_descriptors(config))
    return moves


def split_primary_secondary(
    descriptors: Iterable[MoveDescriptor],
) -> dict[int, tuple[MoveDescriptor, MoveDescriptor | None]]:
    """Regroup descriptors by method into ``(primary, secondary)`` pairs.

    The first descriptor of a method is its primary; a later descriptor is
    its secondary only when the two modes are the complementary
    move / capture pair.  Descriptors without a method id are skipped.
    """
    grouped: dict[int, list[MoveDescriptor]] = {}
    for descriptor in descriptors:
        if descriptor.movement_method_id is None:
            continue
        grouped.setdefault(descriptor.movement_method_id, []).append(descriptor)

    pairs: dict[int, tuple[MoveDescriptor, MoveDescriptor | None]] = {}
    for method_id, rows in grouped.items():
        primary = rows[0]
        wanted = primary.mode.complement
        secondary = None
        if wanted is not None:
            secondary = next((row for row in rows[1:] if row.mode is wanted), None)
        pairs[method_id] = (primary, secondary)
    return pairs
