"""Initial game setup and read-only queries over GameState.

Every helper here is a total function over a well-formed state: lookups
return None for unknown ids or empty cells instead of raising.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..models.core import Core
from ..models.event import EntityType
from ..models.game import GamePhase, GameState
from ..models.position import Position
from ..models.quantar import Quantar
from ..utils.constants import (
    CORE_HP,
    CORE_POSITIONS,
    PLAYER_A,
    PLAYER_B,
    PLAYERS,
    QUANTAR_HP,
    QUANTAR_POSITIONS,
)
from ..utils.directions import is_in_bounds, positions_equal

__all__ = [
    "EntityAt",
    "create_initial_state",
    "get_entity_at",
    "get_opponent",
    "get_player_core",
    "get_player_quantars",
    "get_quantar",
    "is_in_bounds",
    "positions_equal",
]


@dataclass(frozen=True)
class EntityAt:
    """Occupant of a cell, tagged with its kind."""

    entity_type: EntityType
    entity: Union[Quantar, Core]


def _create_quantar(owner: str, slot: int, x: int, y: int) -> Quantar:
    return Quantar(id=f"{owner}{slot}", owner=owner, position=Position(x, y), hp=QUANTAR_HP)


def create_initial_state() -> GameState:
    """Create the starting position for a new game.

    Both Cores sit on the vertical centerline (A at the south edge, B at the
    north edge) and each side's three Quantars stand in a row two cells in
    front of their Core.

    Returns:
        A fresh GameState at turn 1, phase Playing, with no winner
    """
    quantars = []
    for owner in PLAYERS:
        for slot, (x, y) in enumerate(QUANTAR_POSITIONS[owner], start=1):
            quantars.append(_create_quantar(owner, slot, x, y))

    cores = {
        owner: Core(owner=owner, position=Position(*CORE_POSITIONS[owner]), hp=CORE_HP)
        for owner in PLAYERS
    }

    return GameState(
        turn=1,
        phase=GamePhase.PLAYING,
        quantars=tuple(quantars),
        cores=cores,
        winner=None,
    )


def get_quantar(state: GameState, quantar_id: str) -> Optional[Quantar]:
    """Return the Quantar with ``quantar_id``, or None if it is not on the board."""
    for quantar in state.quantars:
        if quantar.id == quantar_id:
            return quantar
    return None


def get_player_quantars(state: GameState, player_id: str) -> list[Quantar]:
    return [quantar for quantar in state.quantars if quantar.owner == player_id]


def get_player_core(state: GameState, player_id: str) -> Core:
    return state.cores[player_id]


def get_entity_at(state: GameState, position: Position) -> Optional[EntityAt]:
    """Return whatever occupies ``position``.

    Quantars are checked before Cores; a well-formed state never has both
    on the same cell.
    """
    for quantar in state.quantars:
        if positions_equal(quantar.position, position):
            return EntityAt(EntityType.QUANTAR, quantar)
    for owner in PLAYERS:
        core = state.cores[owner]
        if positions_equal(core.position, position):
            return EntityAt(EntityType.CORE, core)
    return None


def get_opponent(player_id: str) -> str:
    return PLAYER_B if player_id == PLAYER_A else PLAYER_A
