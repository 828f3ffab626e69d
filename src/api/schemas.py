"""Request/response models for the watering API."""

from typing import Literal

from pydantic import BaseModel, Field


class WaterRequest(BaseModel):
    """Start a watering run."""
    action: Literal["start"]


class StatusResponse(BaseModel):
    """Controller status snapshot."""
    status: str
    message: str
    server_mode: str
    controlled_pin: int = Field(ge=0)


class WaterResponse(BaseModel):
    """Result of a completed watering run."""
    status: str
    message: str
    gpio_result: str


class ErrorResponse(BaseModel):
    error: str
