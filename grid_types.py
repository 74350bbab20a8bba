"""
Coordinate and direction types shared by the grid and search modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Direction(Enum):
    """Compass direction for movement on a grid."""

    N = "N"  # Up (decreasing row)
    E = "E"  # Right (increasing col)
    S = "S"  # Down (increasing row)
    W = "W"  # Left (decreasing col)
    NE = "NE"
    SE = "SE"
    NW = "NW"
    SW = "SW"

    @property
    def delta(self) -> tuple[int, int]:
        """(row_delta, col_delta) for one step in this direction."""
        return _DELTAS[self]

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def turn_right(self) -> Direction:
        """Rotate 90 degrees clockwise."""
        return _RIGHT_TURNS[self]

    def turn_left(self) -> Direction:
        """Rotate 90 degrees counter-clockwise."""
        return _RIGHT_TURNS[_RIGHT_TURNS[_RIGHT_TURNS[self]]]

    def __lt__(self, other: object) -> bool:
        # Declaration order, so (Point, Direction) states can sit in a heap
        if not isinstance(other, Direction):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
    Direction.NE: (-1, 1),
    Direction.NW: (-1, -1),
    Direction.SE: (1, 1),
    Direction.SW: (1, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
    Direction.NE: Direction.SW,
    Direction.SW: Direction.NE,
    Direction.NW: Direction.SE,
    Direction.SE: Direction.NW,
}

_RIGHT_TURNS: dict[Direction, Direction] = {
    Direction.N: Direction.E,
    Direction.E: Direction.S,
    Direction.S: Direction.W,
    Direction.W: Direction.N,
    Direction.NE: Direction.SE,
    Direction.SE: Direction.SW,
    Direction.SW: Direction.NW,
    Direction.NW: Direction.NE,
}

_ORDER: dict[Direction, int] = {d: i for i, d in enumerate(Direction)}

CARDINAL_DIRECTIONS: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)

ALL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.N,
    Direction.E,
    Direction.S,
    Direction.W,
    Direction.NE,
    Direction.NW,
    Direction.SE,
    Direction.SW,
)


# =============================================================================
# Point
# =============================================================================


@dataclass(frozen=True, order=True)
class Point:
    """A grid coordinate. Ordering is row-major."""

    row: int
    col: int

    def add(self, other: Point) -> Point:
        return Point(self.row + other.row, self.col + other.col)

    def subtract(self, other: Point) -> Point:
        return Point(self.row - other.row, self.col - other.col)

    def move_direction(self, direction: Direction) -> Point:
        dr, dc = direction.delta
        return Point(self.row + dr, self.col + dc)

    def move_directions(self, directions: Iterable[Direction]) -> list[Point]:
        """
        Walk a sequence of directions, returning every point stepped on.

        Each step starts from the previous step's result, so
        ``Point(0, 0).move_directions([E, E, S])`` is
        ``[Point(0, 1), Point(0, 2), Point(1, 2)]``. The starting point is not
        included.
        """
        path: list[Point] = []
        current = self
        for direction in directions:
            current = current.move_direction(direction)
            path.append(current)
        return path

    def manhattan_distance(self, other: Point) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)
