"""Quantar data model - a player's mobile unit."""

from dataclasses import dataclass

from ..utils.constants import PLAYERS
from .position import Position


@dataclass(frozen=True)
class Quantar:
    """A mobile unit on the board.

    Each player starts with three Quantars. Live Quantars always have
    hp > 0 in a resolved state; destroyed units are removed from the state
    rather than kept with non-positive hp.
    """

    id: str  # "{owner}{slot}", e.g. "A1"
    owner: str  # "A" or "B"
    position: Position
    hp: int

    def __post_init__(self):
        """Validate quantar data after initialization."""
        if self.owner not in PLAYERS:
            raise ValueError(f"Invalid owner: {self.owner} (must be 'A' or 'B')")
        if not self.id:
            raise ValueError("Quantar id cannot be empty")
