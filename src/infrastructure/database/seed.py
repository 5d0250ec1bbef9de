"""Sample profile data for development databases.

Run directly to seed the configured database::

    python -m infrastructure.database.seed
"""

import asyncio
from decimal import Decimal
from typing import Any

import structlog

from domain.entities.pagination import PageRequest
from domain.services.profile_service import ProfileService

logger = structlog.get_logger()

SAMPLE_PROFILES: list[dict[str, Any]] = [
    {
        "name": "Alice Johnson",
        "email": "alice.johnson@email.com",
        "location": "San Francisco, CA",
        "skills": ["React", "Node.js", "TypeScript", "MongoDB"],
        "experience_years": 5,
        "available_for_work": True,
        "hourly_rate": Decimal("85"),
    },
    {
        "name": "Bob Smith",
        "email": "bob.smith@email.com",
        "location": "New York, NY",
        "skills": ["Python", "Django", "PostgreSQL", "AWS"],
        "experience_years": 7,
        "available_for_work": False,
        "hourly_rate": Decimal("95"),
    },
    {
        "name": "Carol Davis",
        "email": "carol.davis@email.com",
        "location": "Austin, TX",
        "skills": ["JavaScript", "Vue.js", "Express", "MySQL"],
        "experience_years": 3,
        "available_for_work": True,
        "hourly_rate": Decimal("65"),
    },
    {
        "name": "David Wilson",
        "email": "david.wilson@email.com",
        "location": "Seattle, WA",
        "skills": ["Java", "Spring Boot", "React", "Docker"],
        "experience_years": 8,
        "available_for_work": True,
        "hourly_rate": Decimal("105"),
    },
    {
        "name": "Eva Martinez",
        "email": "eva.martinez@email.com",
        "location": "Miami, FL",
        "skills": ["Angular", "C#", ".NET", "SQL Server"],
        "experience_years": 4,
        "available_for_work": True,
        "hourly_rate": Decimal("75"),
    },
    {
        "name": "Frank Brown",
        "email": "frank.brown@email.com",
        "location": "Chicago, IL",
        "skills": ["PHP", "Laravel", "Vue.js", "Redis"],
        "experience_years": 6,
        "available_for_work": False,
        "hourly_rate": Decimal("80"),
    },
    {
        "name": "Grace Lee",
        "email": "grace.lee@email.com",
        "location": "Boston, MA",
        "skills": ["React Native", "Firebase", "GraphQL", "JavaScript"],
        "experience_years": 4,
        "available_for_work": True,
        "hourly_rate": Decimal("90"),
    },
]


async def seed_if_empty(service: ProfileService) -> int:
    """Create the sample profiles unless the directory already has profiles.

    Returns the number of profiles created.
    """
    existing = await service.list_profiles(PageRequest(page=1, limit=1))
    if existing.pagination.total_items:
        logger.info("seed_skipped", existing_profiles=existing.pagination.total_items)
        return 0

    for data in SAMPLE_PROFILES:
        await service.create(**data)

    logger.info("seed_completed", created_profiles=len(SAMPLE_PROFILES))
    return len(SAMPLE_PROFILES)


async def _main() -> None:
    from core.config import settings
    from core.logging import setup_logging
    from infrastructure.database.models import Base
    from infrastructure.database.session import build_engine, build_session_factory
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

    setup_logging()
    engine = build_engine(settings)
    try:
        if settings.is_sqlite:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        session_factory = build_session_factory(engine)
        await seed_if_empty(ProfileService(lambda: SQLAlchemyUnitOfWork(session_factory)))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
