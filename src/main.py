"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import Settings, settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler
from domain.services.profile_service import ProfileService
from infrastructure.database.models import Base
from infrastructure.database.seed import seed_if_empty
from infrastructure.database.session import build_engine, build_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""
    app_settings: Settings = app.state.settings
    engine: AsyncEngine = app.state.engine

    # SQLite is the zero-setup development store; server databases use migrations
    if app_settings.is_sqlite:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    if app_settings.seed_sample_data:
        session_factory = app.state.session_factory
        await seed_if_empty(ProfileService(lambda: SQLAlchemyUnitOfWork(session_factory)))

    logger.info("app_started", environment=app_settings.app_env, dialect=engine.dialect.name)
    yield

    if app.state.owns_engine:
        await engine.dispose()
    logger.info("app_stopped")


def create_app(
    app_settings: Settings | None = None,
    engine: AsyncEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The store handle is built here from settings unless an engine is passed in,
    which lets tests run each app against its own database.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=app_settings.app_name,
        description=(
            "## Developer Directory\n\n"
            "Store developer profiles (contact info, skills, hourly rate, "
            "availability) and find them again.\n\n"
            "### Features\n"
            "- **Profiles**: create, read, partially update and delete\n"
            "- **Search**: filter by location, skills (any of), availability, "
            "minimum experience and maximum hourly rate\n"
            "- **Pagination**: every listing is paged, newest first\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 30 requests/minute\n"
            "- POST/PUT/DELETE: 10 requests/minute"
        ),
        version="1.0.0",
        debug=app_settings.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check and status endpoints",
            },
            {
                "name": "profiles",
                "description": "Developer profile operations",
            },
        ],
    )

    # Store handle
    app.state.settings = app_settings
    app.state.engine = engine or build_engine(app_settings)
    app.state.owns_engine = engine is None
    app.state.session_factory = build_session_factory(app.state.engine)

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, is_production=app_settings.is_production)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
