"""Conversion of engine values to and from JSON-compatible dictionaries.

Collaborators (API servers, clients, replay stores) marshal GameState,
actions and turn logs through these helpers. Keys are camelCase and enum
values use their wire strings ("N", "MOVE", "playing", ...). Incoming data
is checked with the pydantic schemas in ``quantaris.schemas``.
"""

from dataclasses import fields
from enum import Enum
from typing import Any

from ..models.action import MoveAction, PulseAction, ShieldAction
from ..models.core import Core
from ..models.event import (
    DamageApplied,
    Draw,
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
)
from ..models.game import GamePhase, GameState, TurnLog
from ..models.position import Direction, Position
from ..models.quantar import Quantar
from ..models.replay import Replay, ReplayTurn
from ..schemas.requests import ActionRequest, SubmitActionsRequest
from ..schemas.state import GameStateModel
from .constants import PLAYERS
from .directions import parse_direction

EVENT_CLASSES = {
    cls.type: cls
    for cls in (
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
    )
}

# Field names that differ from the camelCase conversion on the wire
_WIRE_NAMES = {"origin": "from", "destination": "to"}
_FIELD_NAMES = {wire: name for name, wire in _WIRE_NAMES.items()}

# Event fields that need converting back from wire values
_FIELD_TYPES = {
    "origin": Position,
    "destination": Position,
    "direction": Direction,
    "target_type": EntityType,
    "entity_type": EntityType,
}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _snake(name: str) -> str:
    return "".join(f"_{char.lower()}" if char.isupper() else char for char in name)


def _position_to_dict(position: Position) -> dict[str, int]:
    return {"x": position.x, "y": position.y}


def _to_wire(value: Any) -> Any:
    if isinstance(value, Position):
        return _position_to_dict(value)
    if isinstance(value, Enum):
        return value.value
    return value


# ============================================================================
# Game state
# ============================================================================


def state_to_dict(state: GameState) -> dict[str, Any]:
    """Convert a GameState to a JSON-compatible dictionary.

    Quantars are emitted sorted by id so equal states give equal dicts.
    """
    return {
        "turn": state.turn,
        "phase": state.phase.value,
        "quantars": [
            {
                "id": quantar.id,
                "owner": quantar.owner,
                "position": _position_to_dict(quantar.position),
                "hp": quantar.hp,
            }
            for quantar in sorted(state.quantars, key=lambda q: q.id)
        ],
        "cores": {
            owner: {
                "owner": state.cores[owner].owner,
                "position": _position_to_dict(state.cores[owner].position),
                "hp": state.cores[owner].hp,
            }
            for owner in PLAYERS
        },
        "winner": state.winner,
    }


def state_from_dict(data: dict[str, Any]) -> GameState:
    """Reconstruct a GameState from a dictionary.

    Raises:
        pydantic.ValidationError: If the data does not match the schema
        ValueError: If the data violates a GameState invariant
    """
    model = GameStateModel.model_validate(data)
    return GameState(
        turn=model.turn,
        phase=GamePhase(model.phase),
        quantars=tuple(
            Quantar(
                id=quantar.id,
                owner=quantar.owner,
                position=Position(quantar.position.x, quantar.position.y),
                hp=quantar.hp,
            )
            for quantar in model.quantars
        ),
        cores={
            owner: Core(
                owner=core.owner,
                position=Position(core.position.x, core.position.y),
                hp=core.hp,
            )
            for owner, core in model.cores.items()
        },
        winner=model.winner,
    )


# ============================================================================
# Actions
# ============================================================================


def action_to_dict(action) -> dict[str, Any]:
    """Convert an action to its wire dictionary."""
    data = {"type": action.type.value, "quantarId": action.quantar_id}
    if isinstance(action, (MoveAction, PulseAction)):
        parsed = parse_direction(action.direction)
        data["direction"] = parsed.value if parsed is not None else action.direction
    return data


def action_from_dict(data: dict[str, Any]):
    """Build an action from its wire dictionary.

    Directions are passed through unchecked so that ``validate_action`` can
    report INVALID_DIRECTION for them.

    Raises:
        pydantic.ValidationError: If required keys are missing
        ValueError: If the action type is unknown
    """
    return _action_from_request(ActionRequest.model_validate(data))


def _action_from_request(request: ActionRequest):
    direction = parse_direction(request.direction) or request.direction

    if request.type == MoveAction.type.value:
        return MoveAction(quantar_id=request.quantar_id, direction=direction)
    if request.type == PulseAction.type.value:
        return PulseAction(quantar_id=request.quantar_id, direction=direction)
    if request.type == ShieldAction.type.value:
        return ShieldAction(quantar_id=request.quantar_id)
    raise ValueError(f"Unknown action type: {request.type}")


def actions_from_list(items: list[dict[str, Any]]) -> list:
    return [action_from_dict(item) for item in items]


def submission_from_dict(data: dict[str, Any]) -> tuple[str, list]:
    """Parse a ``{"playerId": ..., "actions": [...]}`` submission.

    Returns:
        Tuple of (player id, actions in submitted order)
    """
    request = SubmitActionsRequest.model_validate(data)
    return request.player_id, [_action_from_request(action) for action in request.actions]


# ============================================================================
# Events and logs
# ============================================================================


def event_to_dict(event) -> dict[str, Any]:
    """Convert a turn event to ``{"type": ..., <camelCase fields>}``."""
    data = {"type": event.type.value}
    for f in fields(event):
        key = _WIRE_NAMES.get(f.name, _camel(f.name))
        data[key] = _to_wire(getattr(event, f.name))
    return data


def event_from_dict(data: dict[str, Any]):
    """Rebuild a turn event from ``event_to_dict`` output.

    Raises:
        ValueError: If the event type is unknown
    """
    event_cls = EVENT_CLASSES[EventType(data["type"])]
    kwargs = {}
    for key, value in data.items():
        if key == "type":
            continue
        name = _FIELD_NAMES.get(key, _snake(key))
        field_type = _FIELD_TYPES.get(name)
        if field_type is Position:
            value = Position(value["x"], value["y"])
        elif field_type is not None:
            value = field_type(value)
        kwargs[name] = value
    return event_cls(**kwargs)


def turn_log_to_dict(log: TurnLog) -> dict[str, Any]:
    return {"turn": log.turn, "events": [event_to_dict(event) for event in log.events]}


def turn_log_from_dict(data: dict[str, Any]) -> TurnLog:
    return TurnLog(turn=data["turn"], events=tuple(event_from_dict(e) for e in data["events"]))


# ============================================================================
# Replays
# ============================================================================


def replay_turn_to_dict(replay_turn: ReplayTurn) -> dict[str, Any]:
    return {
        "turn": replay_turn.turn,
        "stateHash": replay_turn.state_hash,
        "actionsA": [action_to_dict(action) for action in replay_turn.actions_a],
        "actionsB": [action_to_dict(action) for action in replay_turn.actions_b],
        "log": turn_log_to_dict(replay_turn.log),
    }


def replay_turn_from_dict(data: dict[str, Any]) -> ReplayTurn:
    return ReplayTurn(
        turn=data["turn"],
        state_hash=data["stateHash"],
        actions_a=tuple(actions_from_list(data["actionsA"])),
        actions_b=tuple(actions_from_list(data["actionsB"])),
        log=turn_log_from_dict(data["log"]),
    )


def replay_to_dict(replay: Replay) -> dict[str, Any]:
    """Convert a whole Replay to a dictionary (e.g. for a replay store)."""
    return {
        "initialState": state_to_dict(replay.initial_state),
        "turns": [replay_turn_to_dict(turn) for turn in replay.turns],
        "finalState": state_to_dict(replay.final_state),
        "winner": replay.winner,
    }


def replay_from_dict(data: dict[str, Any]) -> Replay:
    return Replay(
        initial_state=state_from_dict(data["initialState"]),
        turns=tuple(replay_turn_from_dict(turn) for turn in data["turns"]),
        final_state=state_from_dict(data["finalState"]),
        winner=data.get("winner"),
    )
