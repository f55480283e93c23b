"""Phase 1: Simultaneous Quantar movement.

This module handles:
1. Computing each mover's destination from its pre-move position
2. Blocking moves that leave the board or enter a Core's cell
3. Blocking every contender when two or more moves share a destination
4. Blocking moves into cells whose occupant stays put, and 2-cycle swaps
5. Applying all surviving moves at once

Moves are evaluated against pre-move positions only, so the order in which
actions were submitted never changes where anyone ends up; it only fixes
the order of the emitted events.
"""

import logging
from collections import Counter
from dataclasses import dataclass

from ..models.action import MoveAction
from ..models.event import BlockReason, MoveBlocked, MoveEvent
from ..models.position import Direction, Position
from ..utils.directions import is_in_bounds, parse_direction
from .board import ResolutionBoard, UnitState

logger = logging.getLogger(__name__)


@dataclass
class PlannedMove:
    """A move that is still in contention.

    Attributes:
        unit: Moving Quantar (working copy)
        origin: Position before the move
        destination: Cell it wants to enter
        direction: Direction of travel
    """

    unit: UnitState
    origin: Position
    destination: Position
    direction: Direction


def process_moves(board: ResolutionBoard, actions: list[MoveAction]) -> ResolutionBoard:
    """Execute Phase 1: Movement.

    Args:
        board: Working copy for this turn
        actions: Admitted move actions in combined (A then B) order

    Returns:
        The same board, with positions updated and Move/MoveBlocked events appended
    """
    planned = _plan_moves(board, actions)
    planned = _block_core_cells(board, planned)
    planned = _block_contested_cells(board, planned)
    planned = _block_held_cells(board, planned)

    # All survivors move at once
    for move in planned:
        move.unit.position = move.destination
        board.emit(
            MoveEvent(quantar_id=move.unit.id, origin=move.origin, destination=move.destination)
        )

    logger.debug(f"Movement: {len(planned)} of {len(actions)} moves applied")
    return board


def _block(board: ResolutionBoard, move: PlannedMove, reason: str) -> None:
    board.emit(
        MoveBlocked(
            quantar_id=move.unit.id,
            origin=move.origin,
            direction=move.direction,
            reason=reason,
        )
    )


def _plan_moves(board: ResolutionBoard, actions: list[MoveAction]) -> list[PlannedMove]:
    """Turn actions into planned moves, dropping those that leave the board."""
    planned = []
    for action in actions:
        unit = board.live_unit(action.quantar_id)
        direction = parse_direction(action.direction)
        if unit is None or direction is None:
            continue

        move = PlannedMove(
            unit=unit,
            origin=unit.position,
            destination=unit.position.step(direction),
            direction=direction,
        )
        if not is_in_bounds(move.destination):
            _block(board, move, BlockReason.OUT_OF_BOUNDS)
            continue
        planned.append(move)
    return planned


def _block_core_cells(board: ResolutionBoard, planned: list[PlannedMove]) -> list[PlannedMove]:
    core_cells = board.core_positions()
    surviving = []
    for move in planned:
        if move.destination in core_cells:
            _block(board, move, BlockReason.CORE)
        else:
            surviving.append(move)
    return surviving


def _block_contested_cells(
    board: ResolutionBoard, planned: list[PlannedMove]
) -> list[PlannedMove]:
    """Resolve shared destinations, stationary occupants and head-on swaps.

    Each move is judged independently against the full candidate set, so
    both halves of a swap are blocked and every contender for a shared cell
    is blocked.
    """
    destination_counts = Counter(move.destination for move in planned)
    moves_by_unit = {move.unit.id: move for move in planned}

    surviving = []
    for move in planned:
        if destination_counts[move.destination] > 1:
            _block(board, move, BlockReason.COLLISION)
            continue

        occupant = board.unit_at(move.destination, exclude=move.unit.id)
        if occupant is not None:
            occupant_move = moves_by_unit.get(occupant.id)
            if occupant_move is None:
                _block(board, move, BlockReason.STATIONARY)
                continue
            if occupant_move.destination == move.origin:
                _block(board, move, BlockReason.SWAP)
                continue

        surviving.append(move)
    return surviving


def _block_held_cells(board: ResolutionBoard, planned: list[PlannedMove]) -> list[PlannedMove]:
    """Block moves into cells whose occupant ended up not moving.

    A mover may follow an occupant out of its cell only if the occupant's
    own move survived. Blocking one move can strand the unit behind it, so
    this repeats until no further move is affected. Closed rotations of
    three or more units pass untouched because every occupant leaves.
    """
    while True:
        moving_ids = {move.unit.id for move in planned}
        held_cells = {
            unit.position for unit in board.live_units() if unit.id not in moving_ids
        }
        stalled = [move for move in planned if move.destination in held_cells]
        if not stalled:
            return planned
        for move in stalled:
            _block(board, move, BlockReason.STATIONARY)
        planned = [move for move in planned if move.destination not in held_cells]
