"""Phases 2-5: Shields, pulses, damage and cleanup.

This module handles:
1. Raising shields on live Quantars (Phase 2)
2. Tracing pulses from post-move positions and tallying pending damage (Phase 3)
3. Applying all pending damage at once, reduced by shields (Phase 4)
4. Reporting and removing destroyed entities (Phase 5)

Damage is accumulated before any hp changes, so every hit landed this turn
counts no matter the order pulses were fired in.
"""

import logging
from typing import Optional

from ..models.action import PulseAction, ShieldAction
from ..models.event import (
    DamageApplied,
    EntityDestroyed,
    EntityType,
    PulseFired,
    PulseHit,
    PulseMiss,
    ShieldActivated,
)
from ..models.position import Direction, Position
from ..utils.constants import PLAYERS, PULSE_DAMAGE, SHIELD_REDUCTION
from ..utils.directions import is_in_bounds, parse_direction
from .board import Occupant, ResolutionBoard

logger = logging.getLogger(__name__)


def process_shields(board: ResolutionBoard, actions: list[ShieldAction]) -> ResolutionBoard:
    """Execute Phase 2: Shields.

    Shielding does not stop a unit from being hit; it only reduces the
    damage it takes in Phase 4.
    """
    for action in actions:
        unit = board.live_unit(action.quantar_id)
        if unit is None:
            continue
        unit.shielded = True
        board.emit(ShieldActivated(quantar_id=unit.id))
    return board


def trace_pulse(
    board: ResolutionBoard, origin: Position, direction: Direction
) -> Optional[Occupant]:
    """Find the entity a pulse fired from ``origin`` would strike.

    Diagonal pulses are melee and only inspect the adjacent cell. Orthogonal
    pulses travel cell by cell until they leave the board or meet the first
    live Quantar or Core; beams never pass through a target.

    Args:
        board: Working copy (post-move positions)
        origin: Cell the pulse is fired from
        direction: Direction of fire

    Returns:
        The struck occupant, or None if the pulse fizzles
    """
    position = origin.step(direction)
    if direction.is_diagonal:
        return board.occupant_at(position) if is_in_bounds(position) else None

    while is_in_bounds(position):
        occupant = board.occupant_at(position)
        if occupant is not None:
            return occupant
        position = position.step(direction)
    return None


def process_pulses(board: ResolutionBoard, actions: list[PulseAction]) -> ResolutionBoard:
    """Execute Phase 3: Pulses.

    Every pulse from a live Quantar is fired from its post-move position.
    A hit adds PULSE_DAMAGE to the target's pending damage; nothing is
    subtracted from hp until Phase 4.
    """
    for action in actions:
        unit = board.live_unit(action.quantar_id)
        direction = parse_direction(action.direction)
        if unit is None or direction is None:
            continue

        board.emit(PulseFired(quantar_id=unit.id, origin=unit.position, direction=direction))

        target = trace_pulse(board, unit.position, direction)
        if target is None:
            board.emit(PulseMiss(quantar_id=unit.id))
            continue

        target.pending_damage += PULSE_DAMAGE
        board.emit(
            PulseHit(
                quantar_id=unit.id,
                target_id=target.entity_id,
                target_type=target.entity_type,
                damage=PULSE_DAMAGE,
            )
        )
    return board


def apply_damage(board: ResolutionBoard) -> ResolutionBoard:
    """Execute Phase 4: Damage.

    Quantars are processed first, in board order, then Core A and Core B.
    Shielded Quantars take SHIELD_REDUCTION less damage, floored at 0.
    Remaining hp is floored at 0 as well.
    """
    for unit in board.units:
        if unit.pending_damage <= 0:
            continue
        damage = unit.pending_damage
        if unit.shielded:
            damage = max(0, damage - SHIELD_REDUCTION)
        unit.hp = max(0, unit.hp - damage)
        unit.pending_damage = 0
        board.emit(DamageApplied(target_id=unit.id, damage=damage, remaining_hp=unit.hp))

    for owner in PLAYERS:
        core = board.cores[owner]
        if core.pending_damage <= 0:
            continue
        damage = core.pending_damage
        core.hp = max(0, core.hp - damage)
        core.pending_damage = 0
        board.emit(DamageApplied(target_id=core.entity_id, damage=damage, remaining_hp=core.hp))

    return board


def remove_destroyed(board: ResolutionBoard) -> ResolutionBoard:
    """Execute Phase 5: Cleanup.

    Quantars at 0 hp are reported and dropped from the board. Destroyed
    Cores are reported but stay on the board; only their hp matters for
    victory checks.
    """
    destroyed = [unit for unit in board.units if not unit.is_alive]
    for unit in destroyed:
        board.emit(EntityDestroyed(entity_id=unit.id, entity_type=EntityType.QUANTAR))
    board.units = [unit for unit in board.units if unit.is_alive]

    for owner in PLAYERS:
        core = board.cores[owner]
        if core.is_destroyed:
            board.emit(EntityDestroyed(entity_id=core.entity_id, entity_type=EntityType.CORE))

    if destroyed:
        logger.debug(f"Cleanup: removed {[unit.id for unit in destroyed]}")
    return board
