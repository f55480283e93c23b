"""Tests for Phase 1: Simultaneous Movement."""

from quantaris.engine.turn_resolver import resolve_turn
from quantaris.models import (
    Core,
    Direction,
    EventType,
    GamePhase,
    GameState,
    MoveAction,
    Position,
    Quantar,
    ShieldAction,
    TurnInput,
)
from quantaris.models.event import BlockReason, MoveBlocked, MoveEvent


def create_state(*quantars):
    """Create a Playing state from (id, x, y) tuples; the owner is the id's first letter."""
    return GameState(
        turn=1,
        phase=GamePhase.PLAYING,
        quantars=tuple(
            Quantar(id=qid, owner=qid[0], position=Position(x, y), hp=2) for qid, x, y in quantars
        ),
        cores={
            "A": Core(owner="A", position=Position(4, 8), hp=5),
            "B": Core(owner="B", position=Position(4, 0), hp=5),
        },
    )


def resolve(state, actions_a=(), actions_b=()):
    turn_input = TurnInput(state=state, actions_a=tuple(actions_a), actions_b=tuple(actions_b))
    return resolve_turn(turn_input)


def positions(state):
    return {quantar.id: quantar.position for quantar in state.quantars}


def test_simple_move():
    """Test that a move into an empty cell succeeds."""
    state = create_state(("A1", 3, 6), ("B1", 3, 2))

    result = resolve(state, [MoveAction("A1", Direction.NORTH)])

    assert positions(result.state)["A1"] == Position(3, 5)
    assert result.log.events == (
        MoveEvent(quantar_id="A1", origin=Position(3, 6), destination=Position(3, 5)),
    )


def test_move_out_of_bounds_is_blocked():
    """Test that a move off the board is reported, not silently dropped."""
    state = create_state(("A1", 0, 4), ("B1", 8, 4))

    result = resolve(state, [MoveAction("A1", Direction.WEST)], [MoveAction("B1", Direction.EAST)])

    assert positions(result.state) == {"A1": Position(0, 4), "B1": Position(8, 4)}
    blocked = result.log.of_type(EventType.MOVE_BLOCKED)
    assert [event.quantar_id for event in blocked] == ["A1", "B1"]
    assert all(event.reason == BlockReason.OUT_OF_BOUNDS for event in blocked)


def test_move_into_core_is_blocked():
    state = create_state(("A1", 4, 7), ("B1", 4, 1))

    result = resolve(
        state, [MoveAction("A1", Direction.SOUTH)], [MoveAction("B1", Direction.NORTH)]
    )

    assert positions(result.state) == {"A1": Position(4, 7), "B1": Position(4, 1)}
    assert result.log.events == (
        MoveBlocked(
            quantar_id="A1",
            origin=Position(4, 7),
            direction=Direction.SOUTH,
            reason=BlockReason.CORE,
        ),
        MoveBlocked(
            quantar_id="B1",
            origin=Position(4, 1),
            direction=Direction.NORTH,
            reason=BlockReason.CORE,
        ),
    )


def test_move_into_enemy_core_is_blocked():
    state = create_state(("A1", 4, 1), ("B1", 0, 0))

    result = resolve(state, [MoveAction("A1", Direction.NORTH)])

    assert positions(result.state)["A1"] == Position(4, 1)
    assert result.log.first(EventType.MOVE_BLOCKED).reason == BlockReason.CORE


def test_collision_blocks_all_contenders():
    """Test that two Quantars moving into the same cell both stay put."""
    state = create_state(("A1", 3, 4), ("B1", 5, 4))

    result = resolve(state, [MoveAction("A1", Direction.EAST)], [MoveAction("B1", Direction.WEST)])

    assert positions(result.state) == {"A1": Position(3, 4), "B1": Position(5, 4)}
    blocked = result.log.of_type(EventType.MOVE_BLOCKED)
    assert len(blocked) == 2
    assert all(event.reason == BlockReason.COLLISION for event in blocked)


def test_collision_between_friendly_quantars():
    state = create_state(("A1", 3, 4), ("A2", 4, 5), ("B1", 0, 0))

    result = resolve(state, [MoveAction("A1", Direction.EAST), MoveAction("A2", Direction.NORTH)])

    assert positions(result.state)["A1"] == Position(3, 4)
    assert positions(result.state)["A2"] == Position(4, 5)
    assert len(result.log.of_type(EventType.MOVE_BLOCKED)) == 2


def test_swap_is_blocked():
    """Test that two adjacent Quantars cannot trade places."""
    state = create_state(("A1", 3, 4), ("B1", 4, 4))

    result = resolve(state, [MoveAction("A1", Direction.EAST)], [MoveAction("B1", Direction.WEST)])

    assert positions(result.state) == {"A1": Position(3, 4), "B1": Position(4, 4)}
    blocked = result.log.of_type(EventType.MOVE_BLOCKED)
    assert [event.quantar_id for event in blocked] == ["A1", "B1"]
    assert all(event.reason == BlockReason.SWAP for event in blocked)


def test_move_into_stationary_quantar_is_blocked():
    state = create_state(("A1", 3, 4), ("B1", 4, 4))

    result = resolve(state, [MoveAction("A1", Direction.EAST)], [ShieldAction("B1")])

    assert positions(result.state)["A1"] == Position(3, 4)
    assert result.log.first(EventType.MOVE_BLOCKED).reason == BlockReason.STATIONARY


def test_follow_the_leader():
    """Test that a Quantar may move into a cell its occupant is vacating."""
    state = create_state(("A1", 3, 4), ("A2", 4, 4), ("B1", 0, 0))

    result = resolve(state, [MoveAction("A1", Direction.EAST), MoveAction("A2", Direction.EAST)])

    assert positions(result.state)["A1"] == Position(4, 4)
    assert positions(result.state)["A2"] == Position(5, 4)
    assert [event.quantar_id for event in result.log.of_type(EventType.MOVE)] == ["A1", "A2"]


def test_blocked_leader_blocks_follower():
    """Test that a chain behind a blocked Quantar stays put."""
    state = create_state(("A1", 3, 4), ("A2", 4, 4), ("B1", 5, 4))

    result = resolve(
        state,
        [MoveAction("A1", Direction.EAST), MoveAction("A2", Direction.EAST)],
        [ShieldAction("B1")],
    )

    assert positions(result.state) == {
        "A1": Position(3, 4),
        "A2": Position(4, 4),
        "B1": Position(5, 4),
    }
    blocked = result.log.of_type(EventType.MOVE_BLOCKED)
    assert [event.quantar_id for event in blocked] == ["A2", "A1"]
    assert all(event.reason == BlockReason.STATIONARY for event in blocked)
    assert result.log.of_type(EventType.MOVE) == []


def test_follower_blocked_when_leader_collides():
    state = create_state(("A1", 2, 4), ("A2", 3, 4), ("B1", 5, 4))

    result = resolve(
        state,
        [MoveAction("A1", Direction.EAST), MoveAction("A2", Direction.EAST)],
        [MoveAction("B1", Direction.WEST)],
    )

    assert positions(result.state) == {
        "A1": Position(2, 4),
        "A2": Position(3, 4),
        "B1": Position(5, 4),
    }
    blocked = result.log.of_type(EventType.MOVE_BLOCKED)
    reasons = {event.quantar_id: event.reason for event in blocked}
    assert reasons == {
        "A2": BlockReason.COLLISION,
        "B1": BlockReason.COLLISION,
        "A1": BlockReason.STATIONARY,
    }


def test_rotation_of_four_succeeds():
    """Test that a closed loop of moves resolves with every Quantar moving."""
    state = create_state(("A1", 3, 3), ("A2", 4, 3), ("A3", 4, 4), ("B1", 3, 4))

    result = resolve(
        state,
        [
            MoveAction("A1", Direction.EAST),
            MoveAction("A2", Direction.SOUTH),
            MoveAction("A3", Direction.WEST),
        ],
        [MoveAction("B1", Direction.NORTH)],
    )

    assert positions(result.state) == {
        "A1": Position(4, 3),
        "A2": Position(4, 4),
        "A3": Position(3, 4),
        "B1": Position(3, 3),
    }
    assert len(result.log.of_type(EventType.MOVE)) == 4


def test_submission_order_does_not_change_positions():
    """Test that movement outcome is independent of action order."""
    state = create_state(("A1", 3, 4), ("A2", 4, 4), ("A3", 6, 4), ("B1", 0, 0))
    actions = [
        MoveAction("A1", Direction.EAST),
        MoveAction("A2", Direction.EAST),
        MoveAction("A3", Direction.WEST),
    ]

    forward = resolve(state, actions)
    backward = resolve(state, list(reversed(actions)))

    assert positions(forward.state) == positions(backward.state)


def test_diagonal_move_is_skipped():
    """Test that an invalid move direction produces no event at all."""
    state = create_state(("A1", 3, 6), ("B1", 3, 2))

    result = resolve(state, [MoveAction("A1", Direction.NORTH_EAST)])

    assert positions(result.state)["A1"] == Position(3, 6)
    assert result.log.events == ()


def test_no_two_quantars_share_a_cell():
    state = create_state(("A1", 3, 4), ("A2", 4, 5), ("B1", 5, 4), ("B2", 4, 3))

    result = resolve(
        state,
        [MoveAction("A1", Direction.EAST), MoveAction("A2", Direction.NORTH)],
        [MoveAction("B1", Direction.WEST), MoveAction("B2", Direction.SOUTH)],
    )

    cells = [quantar.position for quantar in result.state.quantars]
    assert len(cells) == len(set(cells))
