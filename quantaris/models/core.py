"""Core data model - a player's stationary objective."""

from dataclasses import dataclass

from ..utils.constants import PLAYERS
from .position import Position


@dataclass(frozen=True)
class Core:
    """A player's Core.

    Cores never move and cannot shield. A Core reduced to 0 hp loses the
    game for its owner.
    """

    owner: str  # "A" or "B"
    position: Position
    hp: int

    def __post_init__(self):
        """Validate core data after initialization."""
        if self.owner not in PLAYERS:
            raise ValueError(f"Invalid owner: {self.owner} (must be 'A' or 'B')")
        if self.hp < 0:
            raise ValueError(f"Invalid hp: {self.hp} (must be >= 0)")

    @property
    def id(self) -> str:
        """Identifier used for Cores in event logs."""
        return core_id(self.owner)

    @property
    def is_destroyed(self) -> bool:
        return self.hp <= 0


def core_id(owner: str) -> str:
    """Return the synthesized event id for ``owner``'s Core."""
    return f"core_{owner}"
