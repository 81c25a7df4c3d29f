"""Root API router."""

from __future__ import annotations

from fastapi import APIRouter

from mindos.api.v1 import ai, health, notes
from mindos.core.config import get_config


def get_api_router() -> APIRouter:
    api_router = APIRouter(prefix=get_config().API_PREFIX)
    api_router.include_router(health.router)
    api_router.include_router(notes.router)
    api_router.include_router(ai.router)
    return api_router
