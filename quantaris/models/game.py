"""Game state container and turn resolution records."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from ..utils.constants import PLAYERS
from .action import Action
from .core import Core
from .event import EventType, TurnEvent
from .quantar import Quantar


class GamePhase(Enum):
    """Engine-level game phase. Ended is terminal."""

    PLAYING = "playing"
    ENDED = "ended"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a game between turns.

    Every resolved turn produces a brand new GameState; nothing in the
    engine mutates an existing one. Quantars are stored in insertion order
    and sorted by id whenever the state is canonicalized.
    """

    turn: int  # Starts at 1, +1 per resolved turn
    phase: GamePhase
    quantars: tuple[Quantar, ...]  # Live Quantars only
    cores: Mapping[str, Core] = field(hash=False)  # One Core per player, keyed by owner
    winner: Optional[str] = None  # "A", "B", or None (undecided or drawn)

    def __post_init__(self):
        """Validate game state after initialization."""
        if self.turn < 1:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 1)")
        if self.winner not in (None, *PLAYERS):
            raise ValueError(f"Invalid winner: {self.winner} (must be None, 'A', or 'B')")
        if set(self.cores) != set(PLAYERS):
            raise ValueError(f"Cores must be keyed by {PLAYERS}, got {sorted(self.cores)}")
        for owner, core in self.cores.items():
            if core.owner != owner:
                raise ValueError(f"Core keyed under {owner} is owned by {core.owner}")
        ids = [quantar.id for quantar in self.quantars]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate Quantar ids: {ids}")
        # Accept lists and plain dicts for convenience but store read-only copies
        if not isinstance(self.quantars, tuple):
            object.__setattr__(self, "quantars", tuple(self.quantars))
        object.__setattr__(self, "cores", MappingProxyType(dict(self.cores)))

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.ENDED


@dataclass(frozen=True)
class TurnInput:
    """Both players' submissions for a single turn."""

    state: GameState
    actions_a: tuple[Action, ...] = ()
    actions_b: tuple[Action, ...] = ()


@dataclass(frozen=True)
class TurnLog:
    """Everything that happened while resolving one turn.

    ``turn`` is the number of the turn that was resolved, i.e. the input
    state's turn, not the incremented one.
    """

    turn: int
    events: tuple[TurnEvent, ...] = field(default_factory=tuple)

    def of_type(self, event_type: EventType) -> list[TurnEvent]:
        """Return the events of ``event_type`` in log order."""
        return [event for event in self.events if event.type == event_type]

    def first(self, event_type: EventType) -> Optional[TurnEvent]:
        """Return the first event of ``event_type``, or None."""
        for event in self.events:
            if event.type == event_type:
                return event
        return None


@dataclass(frozen=True)
class TurnResult:
    """New state plus the log of the turn that produced it."""

    state: GameState
    log: TurnLog
