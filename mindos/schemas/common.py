"""Common schema module."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorMessage(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str
    version: str
    ai_enabled: bool
