"""Main turn resolution orchestrator.

This module coordinates the turn phases in the correct order:
1. Movement (Phase 1)
2. Shields (Phase 2)
3. Pulses (Phase 3)
4. Damage (Phase 4)
5. Cleanup (Phase 5)
6. Victory Assessment (Phase 6)

Resolution works on a private ResolutionBoard copied from the input state
and freezes it into a new GameState at the end, so the caller's state is
never mutated and the same inputs always give the same result and log.

Architecture:
Each phase is an independent, composable method. ``resolve`` composes
them in order, which makes it easy to test a single phase in isolation.
"""

import logging

from ..models.action import MoveAction, PulseAction, ShieldAction
from ..models.game import GamePhase, GameState, TurnInput, TurnLog, TurnResult
from ..utils.constants import PLAYER_A, PLAYER_B
from .board import ResolutionBoard
from .combat import apply_damage, process_pulses, process_shields, remove_destroyed
from .movement import process_moves
from .validation import ValidationErrorCode, validate_action
from .victory import VictoryResult, check_victory

logger = logging.getLogger(__name__)


class GameOverError(ValueError):
    """Raised when asked to resolve a turn on a game that has already ended."""

    def __init__(self, state: GameState):
        self.state = state
        super().__init__(
            f"Cannot resolve turn {state.turn}: game has ended (winner: {state.winner})"
        )


class TurnResolver:
    """Orchestrates the six resolution phases in the correct order.

    Each phase is an independent method that can be tested separately.
    """

    # =========================================================================
    # INDEPENDENT PHASE METHODS
    # Each method handles ONE phase on the shared working copy
    # =========================================================================

    def execute_phase_movement(self, board: ResolutionBoard, actions: list) -> ResolutionBoard:
        """Execute Phase 1: all Move actions, applied simultaneously."""
        return process_moves(board, [a for a in actions if isinstance(a, MoveAction)])

    def execute_phase_shields(self, board: ResolutionBoard, actions: list) -> ResolutionBoard:
        """Execute Phase 2: raise shields on Quantars still alive after movement."""
        return process_shields(board, [a for a in actions if isinstance(a, ShieldAction)])

    def execute_phase_pulses(self, board: ResolutionBoard, actions: list) -> ResolutionBoard:
        """Execute Phase 3: fire pulses from post-move positions."""
        return process_pulses(board, [a for a in actions if isinstance(a, PulseAction)])

    def execute_phase_damage(self, board: ResolutionBoard) -> ResolutionBoard:
        """Execute Phase 4: apply all pending damage at once."""
        return apply_damage(board)

    def execute_phase_cleanup(self, board: ResolutionBoard) -> ResolutionBoard:
        """Execute Phase 5: report and remove destroyed entities."""
        return remove_destroyed(board)

    def execute_phase_victory_check(self, board: ResolutionBoard, turn: int) -> VictoryResult:
        """Execute Phase 6: decide win, terminal loss or draw."""
        return check_victory(board, turn)

    # =========================================================================
    # ORCHESTRATION
    # =========================================================================

    def resolve(self, state: GameState, actions_a, actions_b) -> TurnResult:
        """Resolve one turn from both players' submissions.

        Args:
            state: Current state (must still be in the Playing phase)
            actions_a: Player A's actions
            actions_b: Player B's actions

        Returns:
            TurnResult with the new state (turn + 1) and the log for ``state.turn``

        Raises:
            GameOverError: If ``state`` is already Ended
        """
        if state.phase == GamePhase.ENDED:
            raise GameOverError(state)

        board = ResolutionBoard.from_state(state)
        actions = self.admit_actions(state, actions_a, actions_b)

        board = self.execute_phase_movement(board, actions)
        board = self.execute_phase_shields(board, actions)
        board = self.execute_phase_pulses(board, actions)
        board = self.execute_phase_damage(board)
        board = self.execute_phase_cleanup(board)
        outcome = self.execute_phase_victory_check(board, state.turn)

        new_state = board.freeze(
            turn=state.turn + 1,
            phase=GamePhase.ENDED if outcome.game_ended else GamePhase.PLAYING,
            winner=outcome.winner,
        )
        log = TurnLog(turn=state.turn, events=tuple(board.events))

        logger.debug(f"Turn {state.turn} resolved with {len(log.events)} events")
        return TurnResult(state=new_state, log=log)

    # =========================================================================
    # INTERNAL HELPER METHODS
    # =========================================================================

    def admit_actions(self, state: GameState, actions_a, actions_b) -> list:
        """Merge both submissions into one list, dropping actions that can't apply.

        Player A's actions come first, then B's; this order decides event
        order within each phase. An action is admitted if it passes
        ``validate_action`` for the submitting player, or fails only because
        the move leaves the board (the movement phase reports that as a
        blocked move). Only the first admitted action per Quantar is kept.
        Everything else is skipped rather than raised, so unvalidated input
        can never crash resolution.
        """
        admitted = []
        claimed: set[str] = set()

        for player_id, actions in ((PLAYER_A, actions_a), (PLAYER_B, actions_b)):
            for action in actions:
                result = validate_action(state, action, player_id)
                if not result.valid and result.code != ValidationErrorCode.MOVE_OUT_OF_BOUNDS:
                    logger.debug(
                        f"Player {player_id}: skipping action {action!r}: {result.message}"
                    )
                    continue
                if action.quantar_id in claimed:
                    logger.debug(
                        f"Player {player_id}: skipping extra action for Quantar {action.quantar_id}"
                    )
                    continue
                claimed.add(action.quantar_id)
                admitted.append(action)

        return admitted


def resolve_turn(turn_input: TurnInput) -> TurnResult:
    """Resolve a single turn.

    Pure and deterministic: the same ``turn_input`` always produces an equal
    state and an identical event log, and the input is never modified.

    Args:
        turn_input: State plus both players' actions

    Returns:
        TurnResult with the new state and this turn's log

    Raises:
        GameOverError: If the input state has already ended
    """
    return TurnResolver().resolve(turn_input.state, turn_input.actions_a, turn_input.actions_b)
