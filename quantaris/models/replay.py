"""Replay records for audit and deterministic reconstruction."""

from dataclasses import dataclass
from typing import Optional

from .action import Action
from .game import GameState, TurnLog


@dataclass(frozen=True)
class ReplayTurn:
    """One resolved turn: the pre-state hash, both submissions and the log."""

    turn: int
    state_hash: str  # hash_state() of the state *before* the turn
    actions_a: tuple[Action, ...]
    actions_b: tuple[Action, ...]
    log: TurnLog


@dataclass(frozen=True)
class Replay:
    """A whole game: where it started, every turn, and where it ended."""

    initial_state: GameState
    turns: tuple[ReplayTurn, ...]
    final_state: GameState
    winner: Optional[str] = None
