"""Turn events - the auditable trace of a resolved turn.

Events are appended in the order phases execute and, within a phase, in
the order actions are processed (player A's actions first, then B's).
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .position import Direction, Position


class EventType(Enum):
    """Event type tags (wire values match the canonical encoding)."""

    MOVE = "MOVE"
    MOVE_BLOCKED = "MOVE_BLOCKED"
    PULSE_FIRED = "PULSE_FIRED"
    PULSE_HIT = "PULSE_HIT"
    PULSE_MISS = "PULSE_MISS"
    SHIELD_ACTIVATED = "SHIELD_ACTIVATED"
    DAMAGE_APPLIED = "DAMAGE_APPLIED"
    ENTITY_DESTROYED = "ENTITY_DESTROYED"
    TERMINAL_LOSS = "TERMINAL_LOSS"
    GAME_OVER = "GAME_OVER"
    DRAW = "DRAW"


class EntityType(Enum):
    """Kinds of entity a pulse can hit or cleanup can destroy."""

    QUANTAR = "quantar"
    CORE = "core"


class BlockReason:
    """Reason strings carried by MoveBlocked events."""

    OUT_OF_BOUNDS = "out of bounds"
    CORE = "blocked by Core"
    COLLISION = "collision with another Quantar"
    STATIONARY = "blocked by stationary Quantar"
    SWAP = "swap collision"


class DrawReason:
    """Reason strings carried by Draw events."""

    MUTUAL_DESTRUCTION = "mutual_destruction"
    MAX_TURNS = "max_turns"


TERMINAL_LOSS_NO_QUANTARS = "no_quantars"


@dataclass(frozen=True)
class MoveEvent:
    """A Quantar moved from ``origin`` to ``destination``."""

    type: ClassVar[EventType] = EventType.MOVE

    quantar_id: str
    origin: Position
    destination: Position


@dataclass(frozen=True)
class MoveBlocked:
    """A move was rejected during Phase 1.

    Attributes:
        quantar_id: Quantar whose move was blocked
        origin: Where the Quantar stays
        direction: Direction it tried to move
        reason: One of the ``BlockReason`` strings
    """

    type: ClassVar[EventType] = EventType.MOVE_BLOCKED

    quantar_id: str
    origin: Position
    direction: Direction
    reason: str


@dataclass(frozen=True)
class PulseFired:
    type: ClassVar[EventType] = EventType.PULSE_FIRED

    quantar_id: str
    origin: Position
    direction: Direction


@dataclass(frozen=True)
class PulseHit:
    """A pulse struck its first target.

    Attributes:
        quantar_id: Quantar that fired the pulse
        target_id: Quantar id, or ``core_<owner>`` for a Core
        target_type: Quantar or Core
        damage: Pending damage added to the target (before shields)
    """

    type: ClassVar[EventType] = EventType.PULSE_HIT

    quantar_id: str
    target_id: str
    target_type: EntityType
    damage: int


@dataclass(frozen=True)
class PulseMiss:
    type: ClassVar[EventType] = EventType.PULSE_MISS

    quantar_id: str


@dataclass(frozen=True)
class ShieldActivated:
    type: ClassVar[EventType] = EventType.SHIELD_ACTIVATED

    quantar_id: str


@dataclass(frozen=True)
class DamageApplied:
    """Damage landed in Phase 4.

    ``damage`` is the amount after shield reduction (may be 0) and
    ``remaining_hp`` is the target's hp afterwards, floored at 0.
    """

    type: ClassVar[EventType] = EventType.DAMAGE_APPLIED

    target_id: str
    damage: int
    remaining_hp: int


@dataclass(frozen=True)
class EntityDestroyed:
    type: ClassVar[EventType] = EventType.ENTITY_DESTROYED

    entity_id: str
    entity_type: EntityType


@dataclass(frozen=True)
class TerminalLoss:
    """A player lost because they have no surviving Quantars."""

    type: ClassVar[EventType] = EventType.TERMINAL_LOSS

    loser: str
    reason: str = TERMINAL_LOSS_NO_QUANTARS


@dataclass(frozen=True)
class GameOver:
    type: ClassVar[EventType] = EventType.GAME_OVER

    winner: str


@dataclass(frozen=True)
class Draw:
    type: ClassVar[EventType] = EventType.DRAW

    reason: str  # One of the ``DrawReason`` strings


TurnEvent = Union[
    MoveEvent,
    MoveBlocked,
    PulseFired,
    PulseHit,
    PulseMiss,
    ShieldActivated,
    DamageApplied,
    EntityDestroyed,
    TerminalLoss,
    GameOver,
    Draw,
]