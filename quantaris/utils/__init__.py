"""Utility functions and constants for Quantaris."""

from .constants import (
    BOARD_SIZE,
    CORE_HP,
    CORE_POSITIONS,
    MAX_TURNS,
    PLAYER_A,
    PLAYER_B,
    PLAYERS,
    PULSE_DAMAGE,
    QUANTAR_HP,
    QUANTAR_POSITIONS,
    QUANTARS_PER_PLAYER,
    SHIELD_REDUCTION,
)

__all__ = [
    "BOARD_SIZE",
    "CORE_HP",
    "CORE_POSITIONS",
    "MAX_TURNS",
    "PLAYER_A",
    "PLAYER_B",
    "PLAYERS",
    "PULSE_DAMAGE",
    "QUANTAR_HP",
    "QUANTAR_POSITIONS",
    "QUANTARS_PER_PLAYER",
    "SHIELD_REDUCTION",
]
