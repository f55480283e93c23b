"""Game engine components."""

from .board import ResolutionBoard
from .replay import play_replay, verify_replay
from .state import (
    EntityAt,
    create_initial_state,
    get_entity_at,
    get_opponent,
    get_player_core,
    get_player_quantars,
    get_quantar,
)
from .turn_resolver import GameOverError, TurnResolver, resolve_turn
from .validation import (
    ValidationErrorCode,
    ValidationResult,
    validate_action,
    validate_player_actions,
)

__all__ = [
    "ResolutionBoard",
    "play_replay",
    "verify_replay",
    "EntityAt",
    "create_initial_state",
    "get_entity_at",
    "get_opponent",
    "get_player_core",
    "get_player_quantars",
    "get_quantar",
    "GameOverError",
    "TurnResolver",
    "resolve_turn",
    "ValidationErrorCode",
    "ValidationResult",
    "validate_action",
    "validate_player_actions",
]
