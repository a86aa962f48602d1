"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import get_supabase_client

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    auth: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether the profile store answers and token validation is
    configured. Always 200; the body carries the verdict.
    """
    settings = get_settings()
    auth = "configured" if settings.supabase_jwt_secret else "not_configured"

    try:
        get_supabase_client().table(settings.profiles_table).select("id").limit(1).execute()
        database = "connected"
    except Exception as e:
        logger.warning(f"Readiness probe could not reach the profile store: {e}")
        database = "unavailable"

    ready = database == "connected" and auth == "configured"
    return ReadinessResponse(
        status="ready" if ready else "not_ready",
        database=database,
        auth=auth,
    )
