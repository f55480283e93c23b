"""Phase 6: Victory and draw detection.

This module handles:
1. Core destruction (both -> draw, one -> its owner's opponent wins)
2. Terminal loss when a player has no Quantars left
3. The turn limit draw
4. Emitting TerminalLoss / GameOver / Draw events in that order
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..models.event import Draw, DrawReason, GameOver, TerminalLoss
from ..utils.constants import MAX_TURNS, PLAYER_A, PLAYER_B
from .board import ResolutionBoard
from .state import get_opponent

logger = logging.getLogger(__name__)


@dataclass
class VictoryResult:
    """Outcome of the end-of-turn victory assessment.

    Attributes:
        winner: "A", "B", or None
        terminal_loss: Player who lost by having no Quantars, if any
        draw_reason: DrawReason string if the game ended drawn, else None
    """

    winner: Optional[str] = None
    terminal_loss: Optional[str] = None
    draw_reason: Optional[str] = None

    @property
    def is_draw(self) -> bool:
        return self.draw_reason is not None

    @property
    def game_ended(self) -> bool:
        return self.winner is not None or self.is_draw


def assess_victory(board: ResolutionBoard) -> VictoryResult:
    """Decide the outcome from the post-cleanup board, ignoring the turn limit.

    Precedence:
    1. Both Cores destroyed -> draw
    2. One Core destroyed -> its owner's opponent wins
    3. Both sides without Quantars -> draw
    4. One side without Quantars -> terminal loss for that side
    """
    core_a_destroyed = board.cores[PLAYER_A].is_destroyed
    core_b_destroyed = board.cores[PLAYER_B].is_destroyed

    if core_a_destroyed and core_b_destroyed:
        return VictoryResult(draw_reason=DrawReason.MUTUAL_DESTRUCTION)
    if core_a_destroyed:
        return VictoryResult(winner=PLAYER_B)
    if core_b_destroyed:
        return VictoryResult(winner=PLAYER_A)

    a_out = not board.live_units(PLAYER_A)
    b_out = not board.live_units(PLAYER_B)

    if a_out and b_out:
        return VictoryResult(draw_reason=DrawReason.MUTUAL_DESTRUCTION)
    if a_out or b_out:
        loser = PLAYER_A if a_out else PLAYER_B
        return VictoryResult(winner=get_opponent(loser), terminal_loss=loser)

    return VictoryResult()


def check_victory(board: ResolutionBoard, turn: int) -> VictoryResult:
    """Execute Phase 6: Victory Assessment.

    Applies ``assess_victory`` and then the turn limit: if nothing was
    decided and the next turn number reaches MAX_TURNS, the game is drawn.

    Args:
        board: Working copy after cleanup
        turn: Number of the turn being resolved

    Returns:
        VictoryResult; the matching events are appended to the board
    """
    result = assess_victory(board)

    if not result.game_ended and turn + 1 >= MAX_TURNS:
        result.draw_reason = DrawReason.MAX_TURNS

    if result.terminal_loss is not None:
        board.emit(TerminalLoss(loser=result.terminal_loss))
    if result.winner is not None:
        board.emit(GameOver(winner=result.winner))
        logger.info(f"Turn {turn}: player {result.winner} wins")
    if result.is_draw:
        board.emit(Draw(reason=result.draw_reason))
        logger.info(f"Turn {turn}: game drawn ({result.draw_reason})")

    return result
