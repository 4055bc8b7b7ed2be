"""Coordinate type aliases and board geometry helpers.

Board layout (screen orientation, origin top-left)::

    (0, 0) (1, 0) ... (size-1, 0)        a8 b8 ... h8   (size 8)
    ...                            ==>   ...
    (0, size-1)   ... (size-1, size-1)   a1 b1 ... h1

``x`` grows to the right (files), ``y`` grows downwards, so the rank shown
to the user is ``size - y``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (x, y)
Vector: TypeAlias = tuple[int, int]  # (dx, dy)

MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 20
DEFAULT_BOARD_SIZE = 8


def in_bounds(x: int, y: int, size: int) -> bool:
    """Whether ``(x, y)`` lies on a ``size`` x ``size`` board."""
    return 0 <= x < size and 0 <= y < size


def clamp_board_size(size: int) -> int:
    return max(MIN_BOARD_SIZE, min(MAX_BOARD_SIZE, size))


# ── Serialisation ────────────────────────────────────────────────────────────


def coord_key(x: int, y: int) -> str:
    """Map key for a coordinate, e.g. ``(3, 5)`` → ``'3,5'``."""
    return f"{x},{y}"


def parse_coord_key(key: str) -> Coord:
    """Inverse of :func:`coord_key`."""
    parts = str(key).split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid coordinate key: {key!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid coordinate key: {key!r}") from None


def square_name(x: int, y: int, size: int) -> str:
    """Board notation, e.g. ``(4, 6)`` on an 8x8 board → ``'e2'``."""
    return chr(ord("a") + x) + str(size - y)


def parse_square(name: str, size: int) -> Coord:
    """Parse board notation, e.g. ``'e2'`` on an 8x8 board → ``(4, 6)``."""
    text = name.strip().lower()
    if len(text) < 2 or not text[0].isalpha() or not text[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    x = ord(text[0]) - ord("a")
    y = size - int(text[1:])
    if not in_bounds(x, y, size):
        raise ValueError(f"Square {name!r} is off a {size}x{size} board")
    return x, y


# ── Lenient numeric parsing ──────────────────────────────────────────────────


def as_int(value: object) -> int | None:
    """Integer value of *value*, or ``None`` when it is not integer-like."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def positive_int(value: object) -> int | None:
    """Integer > 0, or ``None``."""
    number = as_int(value)
    if number is None or number <= 0:
        return None
    return number


def parse_vector(value: object) -> Vector | None:
    """``[dx, dy]`` → ``(dx, dy)``; ``None`` for anything malformed."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return None
    if len(value) < 2:
        return None
    dx = as_int(value[0])
    dy = as_int(value[1])
    if dx is None or dy is None:
        return None
    return dx, dy
