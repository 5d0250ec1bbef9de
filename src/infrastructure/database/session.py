"""Database engine and session management."""

from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine with a bounded connection pool.

    SQLite keeps SQLAlchemy's default pooling for its driver; server databases
    get a fixed-size pool with an acquire timeout.
    """
    engine_kwargs: dict[str, Any] = {
        "echo": settings.debug,
        "pool_pre_ping": True,
    }
    connect_args: dict[str, Any] = {}

    if not settings.is_sqlite:
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
        )

    # Transaction-mode poolers (pgbouncer, Supavisor) break asyncpg's
    # prepared statement cache.
    if "pooler" in settings.database_url:
        connect_args["statement_cache_size"] = 0

    return create_async_engine(
        settings.async_database_url,
        connect_args=connect_args,
        **engine_kwargs,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the async session factory bound to an engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Dependency returning the session factory built at app creation."""
    return request.app.state.session_factory  # type: ignore[no-any-return]


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with get_session_factory(request)() as session:
        try:
            yield session
        finally:
            await session.close()
