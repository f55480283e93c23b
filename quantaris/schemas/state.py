"""Pydantic schemas for game state snapshots."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PositionModel(BaseModel):
    x: int
    y: int


class QuantarModel(BaseModel):
    """Live Quantar in a state snapshot."""

    id: str
    owner: str
    position: PositionModel
    hp: int


class CoreModel(BaseModel):
    owner: str
    position: PositionModel
    hp: int = Field(ge=0)


class GameStateModel(BaseModel):
    """Complete game state as exchanged with collaborators."""

    turn: int = Field(ge=1)
    phase: str = Field(description="'playing' or 'ended'")
    quantars: list[QuantarModel]
    cores: dict[str, CoreModel]
    winner: Optional[str] = None

    model_config = ConfigDict(extra="forbid")
