"""Health check and directory status endpoints."""

from datetime import datetime

import structlog
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.v1.dependencies import get_profile_service
from domain.services.profile_service import ProfileService
from infrastructure.database.session import get_async_session

API_VERSION = "1.0.0"

logger = structlog.get_logger()

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None


class DatabaseStatus(BaseModel):
    """Store connectivity summary."""

    connected: bool
    dialect: str


class StatsResponse(BaseModel):
    """Aggregate figures over all profiles."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    total_profiles: int = Field(alias="totalProfiles")
    available_profiles: int = Field(alias="availableProfiles")
    unavailable_profiles: int = Field(alias="unavailableProfiles")
    average_experience: float = Field(alias="averageExperience")
    min_experience: int = Field(alias="minExperience")
    max_experience: int = Field(alias="maxExperience")
    average_rate: float = Field(alias="averageRate")
    min_rate: float = Field(alias="minRate")
    max_rate: float = Field(alias="maxRate")


class StatusResponse(BaseModel):
    """Directory status: server, store and statistics."""

    server: str
    database: DatabaseStatus
    stats: StatsResponse
    timestamp: str


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check(request: Request) -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        timestamp=datetime.utcnow().isoformat(),
        environment=request.app.state.settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Detailed health check including database connectivity.

    Use for monitoring dashboards that need to verify all dependencies.
    """
    try:
        await db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.warning("health_check_database_failed", error=str(e))
        db_status = "unhealthy"

    overall_status = "healthy" if db_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=API_VERSION,
        timestamp=datetime.utcnow().isoformat(),
        environment=request.app.state.settings.app_env,
        database=db_status,
    )


@router.get("/status", response_model=StatusResponse, summary="Directory status")
async def directory_status(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> StatusResponse:
    """
    Store connectivity plus profile statistics.

    Counts, average/min/max experience and hourly rate across all profiles.
    An unreachable store yields 503.
    """
    stats = await service.get_stats()
    return StatusResponse(
        server="running",
        database=DatabaseStatus(
            connected=True,
            dialect=request.app.state.engine.dialect.name,
        ),
        stats=StatsResponse.model_validate(stats),
        timestamp=datetime.utcnow().isoformat(),
    )
