"""Board position and compass directions."""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Compass directions used by Move (orthogonal only) and Pulse (all eight)."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"
    NORTH_EAST = "NE"
    NORTH_WEST = "NW"
    SOUTH_EAST = "SE"
    SOUTH_WEST = "SW"

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) for one step. North is towards y=0."""
        return _DELTAS[self]

    @property
    def is_diagonal(self) -> bool:
        return self in DIAGONAL_DIRECTIONS


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTH_EAST: (1, -1),
    Direction.NORTH_WEST: (-1, -1),
    Direction.SOUTH_EAST: (1, 1),
    Direction.SOUTH_WEST: (-1, 1),
}

ORTHOGONAL_DIRECTIONS = frozenset(
    {Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST}
)
DIAGONAL_DIRECTIONS = frozenset(
    {Direction.NORTH_EAST, Direction.NORTH_WEST, Direction.SOUTH_EAST, Direction.SOUTH_WEST}
)


@dataclass(frozen=True)
class Position:
    """A cell on the board.

    Positions are plain values. They are not bounds-checked on construction
    because resolution needs to represent the off-board cell a move or beam
    would reach; use ``is_in_bounds`` to test them.
    """

    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        """Return the neighbouring position one step in ``direction``."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
