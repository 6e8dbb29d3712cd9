"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from engine.errors import InvalidCoordinate

X_MIN = 0
X_MAX = 18
Y_MIN = 0
Y_MAX = 12

BOARD_COLS = X_MAX - X_MIN + 1
BOARD_ROWS = Y_MAX - Y_MIN + 1

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def in_bounds(x: int, y: int) -> bool:
    """Return whether raw coordinates fall inside the grid."""
    return X_MIN <= x <= X_MAX and Y_MIN <= y <= Y_MAX


@dataclass(frozen=True, order=True)
class Location:
    """An immutable, always-valid board coordinate."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not isinstance(self.x, int) or not isinstance(self.y, int) or not in_bounds(self.x, self.y):
            raise InvalidCoordinate(f"Coordinate outside the board: ({self.x},{self.y})")

    @classmethod
    def coerce(cls, value: object) -> "Location":
        """Accept a Location or an ``(x, y)`` pair."""
        if isinstance(value, Location):
            return value
        try:
            x, y = value  # type: ignore[misc]
        except (TypeError, ValueError):
            raise InvalidCoordinate(f"Not a coordinate: {value!r}") from None
        return cls(x, y)

    def is_near(self, other: "Location") -> bool:
        """Manhattan distance of exactly one."""
        return abs(self.x - other.x) + abs(self.y - other.y) == 1

    def is_aligned(self, other: "Location") -> bool:
        """Same row or same column."""
        return self.x == other.x or self.y == other.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

