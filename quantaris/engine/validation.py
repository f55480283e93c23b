"""Action validation against a state snapshot.

Validation never raises for bad input and never touches the state: every
problem is reported as a ValidationResult carrying a stable error code
that callers can hand back to the submitting player. The first failing
check wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.action import ACTION_CLASSES, MoveAction, PulseAction
from ..models.game import GamePhase, GameState
from ..utils.directions import (
    apply_direction,
    is_in_bounds,
    is_valid_direction,
    is_valid_pulse_direction,
    parse_direction,
)
from .state import get_player_quantars, get_quantar


class ValidationErrorCode(Enum):
    """Machine-readable classification of rejected submissions."""

    INVALID_ACTION_TYPE = "INVALID_ACTION_TYPE"
    INVALID_DIRECTION = "INVALID_DIRECTION"
    QUANTAR_NOT_FOUND = "QUANTAR_NOT_FOUND"
    QUANTAR_NOT_OWNED = "QUANTAR_NOT_OWNED"
    QUANTAR_DEAD = "QUANTAR_DEAD"
    MOVE_OUT_OF_BOUNDS = "MOVE_OUT_OF_BOUNDS"
    DUPLICATE_QUANTAR_ACTION = "DUPLICATE_QUANTAR_ACTION"
    MISSING_QUANTAR_ACTION = "MISSING_QUANTAR_ACTION"
    GAME_NOT_IN_ACTION_PHASE = "GAME_NOT_IN_ACTION_PHASE"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating an action or a whole submission.

    Attributes:
        valid: True if every check passed
        code: Error code when invalid, None otherwise
        message: Human-readable explanation when invalid
    """

    valid: bool
    code: Optional[ValidationErrorCode] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, code: ValidationErrorCode, message: str) -> "ValidationResult":
        """Create a failure result."""
        return cls(valid=False, code=code, message=message)

    def __bool__(self) -> bool:
        return self.valid


def validate_action(state: GameState, action, player_id: str) -> ValidationResult:
    """Validate a single action for ``player_id``.

    Checks, in order: the action is one of the known action types, the
    Quantar exists, is owned by the player, is alive, and then the
    type-specific rules. Move needs an orthogonal direction and an
    in-bounds destination; Pulse accepts any of the eight directions and
    is not range-checked here; Shield has no parameters.

    Args:
        state: Snapshot to validate against
        action: Candidate action (any object is accepted)
        player_id: Player submitting the action

    Returns:
        ValidationResult describing the first failed check, or success
    """
    if not isinstance(action, ACTION_CLASSES):
        return ValidationResult.failure(
            ValidationErrorCode.INVALID_ACTION_TYPE,
            f"Unknown action type: {type(action).__name__}",
        )

    quantar = get_quantar(state, action.quantar_id)
    if quantar is None:
        return ValidationResult.failure(
            ValidationErrorCode.QUANTAR_NOT_FOUND,
            f"Quantar {action.quantar_id} not found",
        )

    if quantar.owner != player_id:
        return ValidationResult.failure(
            ValidationErrorCode.QUANTAR_NOT_OWNED,
            f"Quantar {action.quantar_id} is not owned by player {player_id}",
        )

    if quantar.hp <= 0:
        return ValidationResult.failure(
            ValidationErrorCode.QUANTAR_DEAD,
            f"Quantar {action.quantar_id} is dead",
        )

    if isinstance(action, MoveAction):
        if not is_valid_direction(action.direction):
            return ValidationResult.failure(
                ValidationErrorCode.INVALID_DIRECTION,
                f"Invalid direction: {action.direction}",
            )
        if not is_in_bounds(apply_direction(quantar.position, action.direction)):
            return ValidationResult.failure(
                ValidationErrorCode.MOVE_OUT_OF_BOUNDS,
                f"Move {parse_direction(action.direction).value} from {quantar.position} "
                "would go out of bounds",
            )

    elif isinstance(action, PulseAction):
        if not is_valid_pulse_direction(action.direction):
            return ValidationResult.failure(
                ValidationErrorCode.INVALID_DIRECTION,
                f"Invalid pulse direction: {action.direction}",
            )

    return ValidationResult.ok()


def validate_player_actions(state: GameState, actions, player_id: str) -> ValidationResult:
    """Validate a player's full submission for the turn.

    Rules:
    - The game must still be in the Playing phase
    - No two actions may reference the same Quantar
    - Every action must pass ``validate_action``
    - Every live Quantar the player owns must have exactly one action

    Args:
        state: Snapshot to validate against
        actions: Submitted actions in input order
        player_id: Player submitting them

    Returns:
        ValidationResult for the first problem found, or success
    """
    if state.phase != GamePhase.PLAYING:
        return ValidationResult.failure(
            ValidationErrorCode.GAME_NOT_IN_ACTION_PHASE,
            "Game is not in playing phase",
        )

    seen: set[str] = set()
    for action in actions:
        quantar_id = getattr(action, "quantar_id", None)
        if quantar_id is not None and quantar_id in seen:
            return ValidationResult.failure(
                ValidationErrorCode.DUPLICATE_QUANTAR_ACTION,
                f"Duplicate action for Quantar {quantar_id}",
            )
        seen.add(quantar_id)

        result = validate_action(state, action, player_id)
        if not result.valid:
            return result

    for quantar in get_player_quantars(state, player_id):
        if quantar.hp > 0 and quantar.id not in seen:
            return ValidationResult.failure(
                ValidationErrorCode.MISSING_QUANTAR_ACTION,
                f"Missing action for Quantar {quantar.id}",
            )

    return ValidationResult.ok()
