"""Quantaris - deterministic rules engine for a simultaneous-turn tactics game.

Two players each control three Quantars and a Core on a 9x9 board. Both
submit one action per Quantar, and the engine resolves the turn into a new
immutable state plus an ordered event log. Same inputs, same outputs.

Example:
    >>> from quantaris import create_initial_state, resolve_turn, TurnInput
    >>> state = create_initial_state()
    >>> result = resolve_turn(TurnInput(state, actions_a, actions_b))
    >>> result.state.turn
    2
"""

from .engine import (
    EntityAt,
    GameOverError,
    TurnResolver,
    ValidationErrorCode,
    ValidationResult,
    create_initial_state,
    get_entity_at,
    get_opponent,
    get_player_core,
    get_player_quantars,
    get_quantar,
    play_replay,
    resolve_turn,
    validate_action,
    validate_player_actions,
    verify_replay,
)
from .models import (
    Action,
    ActionType,
    Core,
    Direction,
    EntityType,
    EventType,
    GamePhase,
    GameState,
    MoveAction,
    Position,
    PulseAction,
    Quantar,
    Replay,
    ReplayTurn,
    ShieldAction,
    TurnEvent,
    TurnInput,
    TurnLog,
    TurnResult,
)
from .utils.directions import (
    apply_direction,
    get_direction_delta,
    is_diagonal_pulse,
    is_in_bounds,
    is_valid_direction,
    is_valid_pulse_direction,
    positions_equal,
)
from .utils.hashing import (
    canonicalize_actions,
    canonicalize_state,
    create_replay_turn,
    hash_actions,
    hash_state,
    hash_turn,
    states_equal,
)

__version__ = "0.1.0"

__all__ = [
    "EntityAt",
    "GameOverError",
    "TurnResolver",
    "ValidationErrorCode",
    "ValidationResult",
    "create_initial_state",
    "get_entity_at",
    "get_opponent",
    "get_player_core",
    "get_player_quantars",
    "get_quantar",
    "play_replay",
    "resolve_turn",
    "validate_action",
    "validate_player_actions",
    "verify_replay",
    "Action",
    "ActionType",
    "Core",
    "Direction",
    "EntityType",
    "EventType",
    "GamePhase",
    "GameState",
    "MoveAction",
    "Position",
    "PulseAction",
    "Quantar",
    "Replay",
    "ReplayTurn",
    "ShieldAction",
    "TurnEvent",
    "TurnInput",
    "TurnLog",
    "TurnResult",
    "apply_direction",
    "get_direction_delta",
    "is_diagonal_pulse",
    "is_in_bounds",
    "is_valid_direction",
    "is_valid_pulse_direction",
    "positions_equal",
    "canonicalize_actions",
    "canonicalize_state",
    "create_replay_turn",
    "hash_actions",
    "hash_state",
    "hash_turn",
    "states_equal",
]
