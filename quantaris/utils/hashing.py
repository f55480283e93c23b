"""Canonical serialization and hashing of game states and actions.

The canonical form is a deterministic, pipe-delimited string: the same
state always produces the same string, and two states are equal exactly
when their canonical forms are. The 32-bit hash on top of it is for cheap
triage (e.g. spotting divergence between a client's predicted state and
the server's authoritative one); collisions are possible, so use
``states_equal`` when an exact answer matters.

Example:
    >>> canonicalize_state(create_initial_state())
    'T:1|P:playing|W:null|C:A:4,8:5|C:B:4,0:5|Q:A1:A:3,6:2|...'
"""

from ..models.action import MoveAction, PulseAction, ShieldAction
from ..models.core import Core
from ..models.game import GameState, TurnLog
from ..models.quantar import Quantar
from ..models.replay import ReplayTurn
from .constants import PLAYERS
from .directions import parse_direction

HASH_SEED = 5381
HASH_MASK = 0xFFFFFFFF


# ============================================================================
# Canonical serialization
# ============================================================================


def _serialize_quantar(quantar: Quantar) -> str:
    return f"Q:{quantar.id}:{quantar.owner}:{quantar.position.x},{quantar.position.y}:{quantar.hp}"


def _serialize_core(core: Core) -> str:
    return f"C:{core.owner}:{core.position.x},{core.position.y}:{core.hp}"


def _direction_code(direction) -> str:
    parsed = parse_direction(direction)
    return parsed.value if parsed is not None else str(direction)


def _serialize_action(action) -> str:
    if isinstance(action, MoveAction):
        return f"M:{action.quantar_id}:{_direction_code(action.direction)}"
    if isinstance(action, PulseAction):
        return f"P:{action.quantar_id}:{_direction_code(action.direction)}"
    if isinstance(action, ShieldAction):
        return f"S:{action.quantar_id}"
    raise ValueError(f"Cannot canonicalize unknown action type: {type(action).__name__}")


def canonicalize_state(state: GameState) -> str:
    """Convert a GameState to its canonical string.

    Layout: turn, phase, winner (or "null"), Core A, Core B, then every
    live Quantar sorted by id, all joined with "|".
    """
    parts = [
        f"T:{state.turn}",
        f"P:{state.phase.value}",
        f"W:{state.winner if state.winner is not None else 'null'}",
    ]
    parts.extend(_serialize_core(state.cores[owner]) for owner in PLAYERS)
    parts.extend(
        _serialize_quantar(quantar) for quantar in sorted(state.quantars, key=lambda q: q.id)
    )
    return "|".join(parts)


def canonicalize_actions(actions) -> str:
    """Convert an action list to its canonical string, sorted by Quantar id."""
    ordered = sorted(actions, key=lambda action: action.quantar_id)
    return "|".join(_serialize_action(action) for action in ordered)


# ============================================================================
# Hashing
# ============================================================================


def hash_string(text: str) -> int:
    """djb2-xor hash of ``text`` as an unsigned 32-bit integer.

    Not cryptographic; suitable for quick comparisons only.
    """
    value = HASH_SEED
    for char in text:
        value = (((value << 5) + value) & HASH_MASK) ^ ord(char)
    return value


def hash_to_hex(text: str) -> str:
    """Hash ``text`` and render it as 8 lowercase hex digits."""
    return f"{hash_string(text):08x}"


def hash_state(state: GameState) -> str:
    return hash_to_hex(canonicalize_state(state))


def hash_actions(actions) -> str:
    return hash_to_hex(canonicalize_actions(actions))


def hash_turn(state: GameState, actions_a, actions_b) -> str:
    """Combined hash of a pre-turn state and both submissions.

    Two independent engines that agree on this hash are resolving the same
    turn from the same inputs.
    """
    combined = "||".join(
        [
            canonicalize_state(state),
            canonicalize_actions(actions_a),
            canonicalize_actions(actions_b),
        ]
    )
    return hash_to_hex(combined)


def states_equal(a: GameState, b: GameState) -> bool:
    """Exact equality by canonical form (not by hash)."""
    return canonicalize_state(a) == canonicalize_state(b)


def create_replay_turn(state: GameState, actions_a, actions_b, log: TurnLog) -> ReplayTurn:
    """Package one resolved turn for audit or replay.

    Args:
        state: State the turn was resolved from
        actions_a: Player A's submission
        actions_b: Player B's submission
        log: Log returned by resolution

    Returns:
        ReplayTurn holding the pre-state hash, copies of both action lists and the log
    """
    return ReplayTurn(
        turn=state.turn,
        state_hash=hash_state(state),
        actions_a=tuple(actions_a),
        actions_b=tuple(actions_b),
        log=log,
    )
