"""Health endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mindos.core.config import Config
from mindos.core.dependencies import get_settings
from mindos.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(settings: Config = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(service=settings.APP_NAME, version=settings.APP_VERSION, ai_enabled=settings.ai_enabled)
