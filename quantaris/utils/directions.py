"""Direction parsing and board geometry helpers."""

from typing import Optional

from ..models.position import DIAGONAL_DIRECTIONS, ORTHOGONAL_DIRECTIONS, Direction, Position
from .constants import BOARD_SIZE


def parse_direction(value) -> Optional[Direction]:
    """Coerce a Direction or its wire string ("N", "SE", ...) to a Direction.

    Args:
        value: Direction, string, or anything else

    Returns:
        The matching Direction, or None if ``value`` is not recognized

    Examples:
        >>> parse_direction("NE")
        <Direction.NORTH_EAST: 'NE'>
        >>> parse_direction("up") is None
        True
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction(value)
        except ValueError:
            return None
    return None


def is_valid_direction(value) -> bool:
    """True if ``value`` is one of the four movement directions."""
    return parse_direction(value) in ORTHOGONAL_DIRECTIONS


def is_valid_pulse_direction(value) -> bool:
    """True if ``value`` is any of the eight pulse directions."""
    return parse_direction(value) is not None


def is_diagonal_pulse(value) -> bool:
    return parse_direction(value) in DIAGONAL_DIRECTIONS


def get_direction_delta(direction) -> tuple[int, int]:
    """Return (dx, dy) for ``direction``.

    Raises:
        ValueError: If ``direction`` is not recognized
    """
    parsed = parse_direction(direction)
    if parsed is None:
        raise ValueError(f"Invalid direction: {direction}")
    return parsed.delta


def apply_direction(position: Position, direction) -> Position:
    """Return the position one step from ``position`` in ``direction``."""
    dx, dy = get_direction_delta(direction)
    return Position(position.x + dx, position.y + dy)


def is_in_bounds(position: Position) -> bool:
    """True iff 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE."""
    return 0 <= position.x < BOARD_SIZE and 0 <= position.y < BOARD_SIZE


def positions_equal(a: Position, b: Position) -> bool:
    return a.x == b.x and a.y == b.y
