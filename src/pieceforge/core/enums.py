"""Core enumerations for the movement domain."""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """Side color of the previewed piece."""

    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @classmethod
    def parse(cls, value: object) -> Color:
        """Anything other than ``"black"`` reads as white."""
        if isinstance(value, Color):
            return value
        return cls.BLACK if str(value).strip().lower() == "black" else cls.WHITE

    def __str__(self) -> str:
        return self.value


class BlockerKind(str, Enum):
    """Relation of a blocking piece to the previewed piece."""

    ALLY = "ally"
    ENEMY = "enemy"

    def __str__(self) -> str:
        return self.value


class MethodKind(str, Enum):
    """Geometry family of a movement method."""

    RAY = "ray"
    LEAP = "leap"
    RULE = "rule"

    def __str__(self) -> str:
        return self.value


class MoveMode(str, Enum):
    """Which destination classes a move descriptor may produce."""

    MOVE = "move"
    CAPTURE = "capture"
    BOTH = "both"

    @classmethod
    def parse(cls, value: object) -> MoveMode:
        """Unknown values fall back to ``both``."""
        try:
            return cls(str(value).strip())
        except ValueError:
            return cls.BOTH

    @property
    def allows_move(self) -> bool:
        return self is not MoveMode.CAPTURE

    @property
    def allows_capture(self) -> bool:
        return self is not MoveMode.MOVE

    @property
    def complement(self) -> MoveMode | None:
        """Opposite single mode; ``None`` for ``BOTH``."""
        if self is MoveMode.MOVE:
            return MoveMode.CAPTURE
        if self is MoveMode.CAPTURE:
            return MoveMode.MOVE
        return None

    def __str__(self) -> str:
        return self.value


class ColorScope(str, Enum):
    """Restricts a move descriptor to one side or both."""

    ANY = "any"
    WHITE = "white"
    BLACK = "black"

    @classmethod
    def parse(cls, value: object) -> ColorScope:
        """Unknown values fall back to ``any``."""
        try:
            return cls(str(value).strip())
        except ValueError:
            return cls.ANY

    def admits(self, color: Color) -> bool:
        if self is ColorScope.ANY:
            return True
        return self.value == color.value

    def __str__(self) -> str:
        return self.value
