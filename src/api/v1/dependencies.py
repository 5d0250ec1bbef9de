"""Dependency injection factories for API v1."""

from typing import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.services.profile_service import ProfileService
from infrastructure.database.session import get_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances on the app's store."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


def get_profile_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(uow_factory)
