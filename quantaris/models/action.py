"""Action data models for per-Quantar player commands.

Each player submits one action per live Quantar every turn. Actions are
plain values: they are deliberately not validated on construction so that
``validate_action`` can report a machine-readable error code for a bad
direction instead of the constructor raising.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .position import Direction


class ActionType(Enum):
    """Types of per-Quantar actions."""

    MOVE = "MOVE"
    PULSE = "PULSE"
    SHIELD = "SHIELD"


@dataclass(frozen=True)
class MoveAction:
    """Move one cell north, east, south or west."""

    type: ClassVar[ActionType] = ActionType.MOVE

    quantar_id: str
    direction: Union[Direction, str]


@dataclass(frozen=True)
class PulseAction:
    """Fire a pulse.

    Orthogonal pulses are ranged beams that stop at the first occupant;
    diagonal pulses are melee and only reach the adjacent cell.
    """

    type: ClassVar[ActionType] = ActionType.PULSE

    quantar_id: str
    direction: Union[Direction, str]


@dataclass(frozen=True)
class ShieldAction:
    """Reduce incoming damage this turn by SHIELD_REDUCTION."""

    type: ClassVar[ActionType] = ActionType.SHIELD

    quantar_id: str


Action = Union[MoveAction, PulseAction, ShieldAction]

ACTION_CLASSES = (MoveAction, PulseAction, ShieldAction)
