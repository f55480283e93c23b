"""Mutable working copy used while a single turn is resolved.

``ResolutionBoard.from_state`` copies every entity out of the immutable
GameState, the phase functions mutate the copy and append events, and
``freeze`` builds the next GameState. The caller's state is never touched.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from ..models.core import Core, core_id
from ..models.event import EntityType, TurnEvent
from ..models.game import GamePhase, GameState
from ..models.position import Position
from ..models.quantar import Quantar
from ..utils.constants import PLAYERS


@dataclass
class UnitState:
    """A Quantar during resolution, with per-turn combat flags."""

    id: str
    owner: str
    position: Position
    hp: int
    shielded: bool = False
    pending_damage: int = 0

    entity_type = EntityType.QUANTAR

    @property
    def entity_id(self) -> str:
        return self.id

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @classmethod
    def from_quantar(cls, quantar: Quantar) -> "UnitState":
        return cls(id=quantar.id, owner=quantar.owner, position=quantar.position, hp=quantar.hp)

    def freeze(self) -> Quantar:
        return Quantar(id=self.id, owner=self.owner, position=self.position, hp=self.hp)


@dataclass
class CoreState:
    """A Core during resolution. Cores never move and cannot shield."""

    owner: str
    position: Position
    hp: int
    pending_damage: int = 0

    entity_type = EntityType.CORE

    @property
    def entity_id(self) -> str:
        return core_id(self.owner)

    @property
    def is_destroyed(self) -> bool:
        return self.hp <= 0

    @classmethod
    def from_core(cls, core: Core) -> "CoreState":
        return cls(owner=core.owner, position=core.position, hp=core.hp)

    def freeze(self) -> Core:
        return Core(owner=self.owner, position=self.position, hp=max(0, self.hp))


Occupant = Union[UnitState, CoreState]


@dataclass
class ResolutionBoard:
    """Private, mutable copy of the entities plus the growing event list."""

    units: list[UnitState]
    cores: dict[str, CoreState]
    events: list[TurnEvent] = field(default_factory=list)

    @classmethod
    def from_state(cls, state: GameState) -> "ResolutionBoard":
        return cls(
            units=[UnitState.from_quantar(quantar) for quantar in state.quantars],
            cores={owner: CoreState.from_core(state.cores[owner]) for owner in PLAYERS},
        )

    def emit(self, event: TurnEvent) -> None:
        self.events.append(event)

    def live_unit(self, quantar_id: str) -> Optional[UnitState]:
        """Return the live unit with ``quantar_id``; dead or unknown ids give None."""
        for unit in self.units:
            if unit.id == quantar_id and unit.is_alive:
                return unit
        return None

    def live_units(self, owner: Optional[str] = None) -> list[UnitState]:
        return [
            unit
            for unit in self.units
            if unit.is_alive and (owner is None or unit.owner == owner)
        ]

    def unit_at(self, position: Position, exclude: Optional[str] = None) -> Optional[UnitState]:
        for unit in self.units:
            if unit.is_alive and unit.id != exclude and unit.position == position:
                return unit
        return None

    def core_positions(self) -> set[Position]:
        return {core.position for core in self.cores.values()}

    def occupant_at(self, position: Position) -> Optional[Occupant]:
        """Return the live Quantar or Core on ``position``, Quantars first."""
        unit = self.unit_at(position)
        if unit is not None:
            return unit
        for owner in PLAYERS:
            if self.cores[owner].position == position:
                return self.cores[owner]
        return None

    def freeze(self, turn: int, phase: GamePhase, winner: Optional[str]) -> GameState:
        """Build the next immutable GameState from the surviving entities."""
        return GameState(
            turn=turn,
            phase=phase,
            quantars=tuple(unit.freeze() for unit in self.units if unit.is_alive),
            cores={owner: self.cores[owner].freeze() for owner in PLAYERS},
            winner=winner,
        )
