"""Piece definitions — a named list of move descriptors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pieceforge.core.catalog import STANDARD_METHODS, MovementCatalog
from pieceforge.core.descriptor import MoveDescriptor, descriptors_from_payload


@dataclass(frozen=True)
class PieceDefinition:
    """A custom piece: its label and the moves it is built from."""

    name: str
    description: str = ""
    moves: tuple[MoveDescriptor, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: object) -> PieceDefinition:
        """Read ``{"name", "description", "moves": [...]}`` or a bare move list."""
        if isinstance(payload, Mapping):
            return cls(
                name=str(payload.get("name") or "Piece"),
                description=str(payload.get("description") or ""),
                moves=tuple(descriptors_from_payload(payload.get("moves", []))),
            )
        return cls(name="Piece", moves=tuple(descriptors_from_payload(payload)))

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "moves": [move.to_payload() for move in self.moves],
        }


def _standard_pieces() -> dict[str, PieceDefinition]:
    catalog = MovementCatalog(STANDARD_METHODS)
    orthogonal = MoveDescriptor.for_method(catalog.by_key("orthogonal_ray_unlimited"))
    diagonal = MoveDescriptor.for_method(catalog.by_key("diagonal_ray_unlimited"))
    king = MoveDescriptor.for_method(catalog.by_key("king_step_any_direction"))
    knight = MoveDescriptor.for_method(catalog.by_key("knight_leap"))
    pawn = MoveDescriptor.for_method(catalog.by_key("pawn_core_directional"))

    pieces = (
        PieceDefinition("King", "Moves one square in any direction.", (king,)),
        PieceDefinition(
            "Queen",
            "Moves any number of squares in any direction.",
            (orthogonal, diagonal),
        ),
        PieceDefinition("Rook", "Moves any number of squares orthogonally.", (orthogonal,)),
        PieceDefinition("Bishop", "Moves any number of squares diagonally.", (diagonal,)),
        PieceDefinition("Knight", "Moves in an L-shape, jumping over pieces.", (knight,)),
        PieceDefinition(
            "Pawn",
            "Moves forward, captures diagonally; direction depends on color.",
            (pawn,),
        ),
    )
    return {piece.name.lower(): piece for piece in pieces}


STANDARD_PIECES: dict[str, PieceDefinition] = _standard_pieces()


def standard_piece(name: str) -> PieceDefinition:
    """Preset piece by (case-insensitive) name; raises ``KeyError`` if unknown."""
    try:
        return STANDARD_PIECES[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown standard piece: {name!r}") from None
