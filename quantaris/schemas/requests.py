"""Pydantic request schemas for action submissions."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActionRequest(BaseModel):
    """Single per-Quantar action as sent over the wire."""

    type: str = Field(description="Action type: MOVE, PULSE or SHIELD")
    quantar_id: str = Field(alias="quantarId", description="Quantar the action is for")
    direction: Optional[str] = Field(
        default=None, description="N/E/S/W for MOVE, N/E/S/W/NE/NW/SE/SW for PULSE"
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("type", "direction")
    @classmethod
    def uppercase(cls, v: Optional[str]) -> Optional[str]:
        """Normalize action types and directions to upper case."""
        return v.upper() if v is not None else v


class SubmitActionsRequest(BaseModel):
    """One player's submission for a turn."""

    player_id: str = Field(alias="playerId", description="'A' or 'B'")
    actions: list[ActionRequest] = Field(description="One action per live Quantar")

    model_config = ConfigDict(populate_by_name=True)
