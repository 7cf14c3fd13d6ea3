"""Pydantic schemas for API responses."""

from pydantic import BaseModel

from .events import Action


class EventResponse(BaseModel):
    """One entry of the recent events list."""

    name: str
    action: Action
    value: int
    timestamp: str

    model_config = {"from_attributes": True}


class StateResponse(BaseModel):
    """Counter value together with the recent events, newest first."""

    value: int
    events: list[EventResponse]


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
