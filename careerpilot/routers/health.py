"""Health check routes for the CareerPilot API.

This module provides health check endpoints for monitoring the application
and its dependencies.
"""

from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter
from pydantic import BaseModel

from careerpilot.core.config import get_settings
from careerpilot.database.mongodb import MongoDB
from careerpilot.database.redis_client import RedisClient
from careerpilot.utils.datetime_utils import utc_now
from careerpilot.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)
settings = get_settings()


class HealthStatus(BaseModel):
    """Health check status response."""
    status: str
    timestamp: datetime
    version: str
    environment: str
    services: Dict[str, Dict[str, Any]]


@router.get("", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    """Basic health check endpoint."""
    return HealthStatus(
        status="healthy",
        timestamp=utc_now(),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        services={}
    )


@router.get("/detailed", response_model=HealthStatus)
async def detailed_health_check() -> HealthStatus:
    """Health including MongoDB and the optional Redis cache.

    MongoDB down makes the service unhealthy; Redis down only degrades it,
    since every read falls back to the database.
    """
    services: Dict[str, Dict[str, Any]] = {}
    overall_status = "healthy"

    if await MongoDB.ping():
        services["database"] = {"status": "healthy", "type": "mongodb"}
    else:
        logger.error("Database health check failed")
        services["database"] = {"status": "unhealthy", "type": "mongodb"}
        overall_status = "unhealthy"

    if not settings.ENABLE_CACHE:
        services["cache"] = {"status": "disabled", "type": "redis"}
    elif await RedisClient.ping():
        services["cache"] = {"status": "healthy", "type": "redis"}
    else:
        logger.warning("Redis health check failed")
        services["cache"] = {"status": "unhealthy", "type": "redis"}
        if overall_status == "healthy":
            overall_status = "degraded"

    return HealthStatus(
        status=overall_status,
        timestamp=utc_now(),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        services=services
    )
