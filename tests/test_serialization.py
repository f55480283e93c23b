"""Tests for JSON-compatible serialization of states, actions, logs and replays."""

import json

import pytest
from pydantic import ValidationError

from quantaris.engine.replay import play_replay, verify_replay
from quantaris.engine.state import create_initial_state
from quantaris.engine.turn_resolver import resolve_turn
from quantaris.engine.validation import ValidationErrorCode, validate_action
from quantaris.models import (
    Direction,
    EntityType,
    GamePhase,
    MoveAction,
    Position,
    PulseAction,
    ShieldAction,
    TurnInput,
)
from quantaris.models.event import MoveEvent, PulseHit, TerminalLoss
from quantaris.utils.serialization import (
    action_from_dict,
    action_to_dict,
    actions_from_list,
    event_from_dict,
    event_to_dict,
    replay_from_dict,
    replay_to_dict,
    state_from_dict,
    state_to_dict,
    submission_from_dict,
    turn_log_from_dict,
    turn_log_to_dict,
)


def test_state_to_dict_shape():
    data = state_to_dict(create_initial_state())

    assert data["turn"] == 1
    assert data["phase"] == "playing"
    assert data["winner"] is None
    assert data["cores"]["B"] == {"owner": "B", "position": {"x": 4, "y": 0}, "hp": 5}
    assert data["quantars"][0] == {
        "id": "A1",
        "owner": "A",
        "position": {"x": 3, "y": 6},
        "hp": 2,
    }


def test_state_round_trip_through_json():
    """Test that a resolved state survives a JSON round trip."""
    state = create_initial_state()
    result = resolve_turn(
        TurnInput(
            state=state,
            actions_a=(MoveAction("A1", Direction.NORTH),),
            actions_b=(PulseAction("B1", Direction.SOUTH),),
        )
    )

    restored = state_from_dict(json.loads(json.dumps(state_to_dict(result.state))))

    assert restored == result.state


def test_state_from_dict_rejects_unknown_keys():
    data = state_to_dict(create_initial_state())
    data["fog"] = True

    with pytest.raises(ValidationError):
        state_from_dict(data)


def test_state_from_dict_rejects_bad_turn():
    data = state_to_dict(create_initial_state())
    data["turn"] = 0

    with pytest.raises(ValidationError):
        state_from_dict(data)


def test_state_from_dict_rejects_bad_phase():
    data = state_to_dict(create_initial_state())
    data["phase"] = "paused"

    with pytest.raises(ValueError):
        state_from_dict(data)


def test_state_from_dict_ended_game():
    data = state_to_dict(create_initial_state())
    data["phase"] = "ended"
    data["winner"] = "A"

    state = state_from_dict(data)

    assert state.phase == GamePhase.ENDED
    assert state.winner == "A"


def test_action_to_dict():
    assert action_to_dict(MoveAction("A1", Direction.NORTH)) == {
        "type": "MOVE",
        "quantarId": "A1",
        "direction": "N",
    }
    assert action_to_dict(ShieldAction("B2")) == {"type": "SHIELD", "quantarId": "B2"}


def test_action_from_dict_normalizes_case():
    action = action_from_dict({"type": "pulse", "quantarId": "B3", "direction": "sw"})

    assert action == PulseAction("B3", Direction.SOUTH_WEST)


def test_action_from_dict_accepts_snake_case_keys():
    action = action_from_dict({"type": "SHIELD", "quantar_id": "A2"})

    assert action == ShieldAction("A2")


def test_action_from_dict_unknown_type():
    with pytest.raises(ValueError, match="Unknown action type"):
        action_from_dict({"type": "JUMP", "quantarId": "A1"})


def test_action_from_dict_missing_quantar():
    with pytest.raises(ValidationError):
        action_from_dict({"type": "SHIELD"})


def test_action_from_dict_keeps_invalid_direction_for_validation():
    """Test that bad directions reach validation instead of failing to parse."""
    action = action_from_dict({"type": "MOVE", "quantarId": "A1", "direction": "up"})

    assert action.direction == "UP"
    result = validate_action(create_initial_state(), action, "A")
    assert result.code == ValidationErrorCode.INVALID_DIRECTION


def test_actions_from_list():
    actions = actions_from_list(
        [
            {"type": "MOVE", "quantarId": "A1", "direction": "N"},
            {"type": "SHIELD", "quantarId": "A2"},
        ]
    )

    assert actions == [MoveAction("A1", Direction.NORTH), ShieldAction("A2")]


def test_submission_from_dict():
    player_id, actions = submission_from_dict(
        {
            "playerId": "B",
            "actions": [{"type": "PULSE", "quantarId": "B1", "direction": "S"}],
        }
    )

    assert player_id == "B"
    assert actions == [PulseAction("B1", Direction.SOUTH)]


def test_event_to_dict_uses_from_and_to():
    event = MoveEvent(quantar_id="A1", origin=Position(3, 6), destination=Position(3, 5))

    assert event_to_dict(event) == {
        "type": "MOVE",
        "quantarId": "A1",
        "from": {"x": 3, "y": 6},
        "to": {"x": 3, "y": 5},
    }


def test_event_to_dict_camel_case_and_enums():
    event = PulseHit(quantar_id="A1", target_id="core_B", target_type=EntityType.CORE, damage=1)

    assert event_to_dict(event) == {
        "type": "PULSE_HIT",
        "quantarId": "A1",
        "targetId": "core_B",
        "targetType": "core",
        "damage": 1,
    }


def test_terminal_loss_to_dict():
    assert event_to_dict(TerminalLoss(loser="B")) == {
        "type": "TERMINAL_LOSS",
        "loser": "B",
        "reason": "no_quantars",
    }


def test_event_from_dict_unknown_type():
    with pytest.raises(ValueError):
        event_from_dict({"type": "TELEPORT", "quantarId": "A1"})


def test_turn_log_round_trip():
    """Test that a real turn log survives serialization unchanged."""
    state = create_initial_state()
    result = resolve_turn(
        TurnInput(
            state=state,
            actions_a=(MoveAction("A1", "N"), ShieldAction("A2"), PulseAction("A3", "N")),
            actions_b=(PulseAction("B1", "S"), MoveAction("B2", "W"), ShieldAction("B3")),
        )
    )

    data = json.loads(json.dumps(turn_log_to_dict(result.log)))

    assert data["turn"] == 1
    assert turn_log_from_dict(data) == result.log


def test_replay_round_trip_still_verifies():
    replay = play_replay(
        create_initial_state(),
        [
            ([MoveAction("A2", Direction.NORTH)], [ShieldAction("B2")]),
            ([PulseAction("A2", Direction.NORTH)], [PulseAction("B2", Direction.SOUTH)]),
        ],
    )

    restored = replay_from_dict(json.loads(json.dumps(replay_to_dict(replay))))

    assert restored == replay
    assert verify_replay(restored)
