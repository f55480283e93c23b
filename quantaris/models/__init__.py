"""Data models for Quantaris."""

from .action import ACTION_CLASSES, Action, ActionType, MoveAction, PulseAction, ShieldAction
from .core import Core, core_id
from .event import (
    BlockReason,
    DamageApplied,
    Draw,
    DrawReason,
    EntityDestroyed,
    EntityType,
    EventType,
    GameOver,
    MoveBlocked,
    MoveEvent,
    PulseFired,
    PulseHit,
    PulseMiss,
    ShieldActivated,
    TerminalLoss,
    TurnEvent,
)
from .game import GamePhase, GameState, TurnInput, TurnLog, TurnResult
from .position import DIAGONAL_DIRECTIONS, ORTHOGONAL_DIRECTIONS, Direction, Position
from .quantar import Quantar
from .replay import Replay, ReplayTurn

__all__ = [
    "ACTION_CLASSES",
    "Action",
    "ActionType",
    "MoveAction",
    "PulseAction",
    "ShieldAction",
    "Core",
    "core_id",
    "BlockReason",
    "DamageApplied",
    "Draw",
    "DrawReason",
    "EntityDestroyed",
    "EntityType",
    "EventType",
    "GameOver",
    "MoveBlocked",
    "MoveEvent",
    "PulseFired",
    "PulseHit",
    "PulseMiss",
    "ShieldActivated",
    "TerminalLoss",
    "TurnEvent",
    "GamePhase",
    "GameState",
    "TurnInput",
    "TurnLog",
    "TurnResult",
    "DIAGONAL_DIRECTIONS",
    "ORTHOGONAL_DIRECTIONS",
    "Direction",
    "Position",
    "Quantar",
    "Replay",
    "ReplayTurn",
]
