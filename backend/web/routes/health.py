"""
Health check endpoint for monitoring.
"""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from backend.web.models.auth import HealthResponse

health_router = APIRouter(tags=["health"])


@health_router.get("/health", response_model=HealthResponse)
async def liveness_check():
    """Liveness probe: 200 while the process serves requests.

    The service is stateless, so the identity provider is not probed here.
    """
    return HealthResponse(status="alive", timestamp=datetime.now(timezone.utc).isoformat())
