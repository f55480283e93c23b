"""Replay recording and verification.

A Replay stores the initial state, every turn's submissions and logs, and
the final state. Because resolution is deterministic, re-running the
recorded actions from the initial state must reproduce every pre-turn hash
and the final state exactly; ``verify_replay`` checks that.
"""

import logging
from typing import Iterable

from ..models.game import GameState, TurnInput
from ..models.replay import Replay
from ..utils.hashing import canonicalize_state, create_replay_turn, hash_state
from .turn_resolver import resolve_turn

logger = logging.getLogger(__name__)


def play_replay(initial_state: GameState, turn_actions: Iterable) -> Replay:
    """Resolve a sequence of turns and record them.

    Stops early once the game ends; remaining submissions are ignored.

    Args:
        initial_state: State to start from
        turn_actions: Iterable of (actions_a, actions_b) pairs, one per turn

    Returns:
        Replay covering every resolved turn
    """
    state = initial_state
    turns = []

    for actions_a, actions_b in turn_actions:
        if state.is_over:
            break
        # Submissions may be one-shot iterators; materialize them once
        actions_a, actions_b = tuple(actions_a), tuple(actions_b)
        result = resolve_turn(TurnInput(state=state, actions_a=actions_a, actions_b=actions_b))
        turns.append(create_replay_turn(state, actions_a, actions_b, result.log))
        state = result.state

    return Replay(
        initial_state=initial_state,
        turns=tuple(turns),
        final_state=state,
        winner=state.winner,
    )


def verify_replay(replay: Replay) -> bool:
    """Re-resolve a replay from its initial state and compare.

    Checks every turn number and pre-turn state hash, every event log and
    the final state's canonical form. The first divergence is logged.

    Returns:
        True if the replay reproduces exactly
    """
    state = replay.initial_state

    for recorded in replay.turns:
        if state.turn != recorded.turn or hash_state(state) != recorded.state_hash:
            logger.warning(
                f"Replay diverged before turn {recorded.turn}: "
                f"expected hash {recorded.state_hash}, got {hash_state(state)} at turn {state.turn}"
            )
            return False
        if state.is_over:
            logger.warning(f"Replay records turn {recorded.turn} after the game ended")
            return False

        result = resolve_turn(
            TurnInput(state=state, actions_a=recorded.actions_a, actions_b=recorded.actions_b)
        )
        if result.log != recorded.log:
            logger.warning(f"Replay diverged at turn {recorded.turn}: event logs differ")
            return False
        state = result.state

    if canonicalize_state(state) != canonicalize_state(replay.final_state):
        logger.warning("Replay diverged: final state does not match")
        return False
    return True
