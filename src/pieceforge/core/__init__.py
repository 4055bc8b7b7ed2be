"""Core domain layer — movement rules and reachability, no Qt dependency.

Quick start::

    from pieceforge.core import BoardState, compute_destinations, standard_piece

    board = BoardState.centered(8)
    rook = standard_piece("rook")
    for coord, dest in compute_destinations(board, rook.moves).items():
        print(coord, dest)
"""

from pieceforge.core.authoring import (
    MoveConfig,
    build_descriptors,
    build_piece_moves,
    split_primary_secondary,
)
from pieceforge.core.board_state import BoardState
from pieceforge.core.catalog import STANDARD_METHODS, MovementCatalog, MovementMethod
from pieceforge.core.descriptor import MoveDescriptor, descriptors_from_payload
from pieceforge.core.destinations import (
    Destination,
    DestinationMap,
    compute_destinations,
)
from pieceforge.core.enums import BlockerKind, Color, ColorScope, MethodKind, MoveMode
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
from pieceforge.core.pieces import STANDARD_PIECES, PieceDefinition, standard_piece
from pieceforge.core.types import (
    Coord,
    Vector,
    coord_key,
    in_bounds,
    parse_coord_key,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "BlockerKind",
    "Color",
    "ColorScope",
    "MethodKind",
    "MoveMode",
    # Types / helpers
    "Coord",
    "Vector",
    "coord_key",
    "in_bounds",
    "parse_coord_key",
    "parse_square",
    "square_name",
    # Geometry / catalog
    "ColorRule",
    "FirstMoveRule",
    "Geometry",
    "LeapGeometry",
    "MovementCatalog",
    "MovementMethod",
    "RayGeometry",
    "RuleGeometry",
    "STANDARD_METHODS",
    "geometry_from_payload",
    "geometry_to_payload",
    # Domain objects
    "BoardState",
    "Destination",
    "DestinationMap",
    "MoveDescriptor",
    "PieceDefinition",
    "STANDARD_PIECES",
    "compute_destinations",
    "descriptors_from_payload",
    "standard_piece",
    # Authoring
    "MoveConfig",
    "build_descriptors",
    "build_piece_moves",
    "split_primary_secondary",
]
