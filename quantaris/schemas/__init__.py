"""Pydantic wire-format schemas for Quantaris collaborators."""

from .requests import ActionRequest, SubmitActionsRequest
from .state import CoreModel, GameStateModel, PositionModel, QuantarModel

__all__ = [
    "ActionRequest",
    "SubmitActionsRequest",
    "CoreModel",
    "GameStateModel",
    "PositionModel",
    "QuantarModel",
]
