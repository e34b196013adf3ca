# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import DatabaseDep, SettingsDep
from lib.mongo_client import MongoClientError

router = APIRouter()

API_VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    database: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.APP_ENV,
        version=API_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(database: DatabaseDep):
    """
    Readiness check endpoint.

    Pings MongoDB and reports "degraded" when it does not answer.
    """
    try:
        database.ping()
        database_status = "healthy"
    except MongoClientError as e:
        database_status = f"unhealthy: {e.message[:50]}"

    return ReadinessResponse(
        status="ready" if database_status == "healthy" else "degraded",
        database=database_status,
        timestamp=_now(),
    )
