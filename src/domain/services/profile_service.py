"""Profile service layer with business logic."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, List, Optional

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import DuplicateEmailError, ProfileNotFoundError
from domain.entities.pagination import Page, PageRequest
from domain.entities.profile import Profile, ProfileFilters, ProfileStats, normalize_email
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

# PostgreSQL reports the constraint name, SQLite the table.column
_EMAIL_CONSTRAINT_MARKERS = ("uq_profiles_email", "profiles.email")


def _is_email_conflict(exc: IntegrityError) -> bool:
    orig = str(exc.orig).lower() if exc.orig else ""
    return any(marker in orig for marker in _EMAIL_CONSTRAINT_MARKERS)


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_profiles(self, page: PageRequest) -> Page[Profile]:
        """Get one page of all profiles, newest first."""
        return await self.search(ProfileFilters(), page)

    async def search(self, filters: ProfileFilters, page: PageRequest) -> Page[Profile]:
        """Get one page of the profiles matching every supplied filter."""
        async with self._uow_factory() as uow:
            return await uow.profiles.find_page(filters, page)  # type: ignore[no-any-return]

    async def get_by_id(self, profile_id: int) -> Profile:
        """Get a specific profile."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(profile_id)
            return profile

    async def create(
        self,
        name: str,
        email: str,
        location: str,
        skills: List[str],
        experience_years: int,
        hourly_rate: Decimal,
        available_for_work: bool = True,
    ) -> Profile:
        """Create a new profile. Emails are unique, compared case-insensitively."""
        now = datetime.utcnow()
        profile = Profile(
            name=name,
            email=email,
            location=location,
            skills=skills,
            experience_years=experience_years,
            hourly_rate=hourly_rate,
            available_for_work=available_for_work,
            created_at=now,
            updated_at=now,
        )

        async with self._uow_factory() as uow:
            if await uow.profiles.get_by_email(profile.email):
                raise DuplicateEmailError(profile.email)

            try:
                created = await uow.profiles.create(profile)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # A concurrent write took the email between check and insert
                if _is_email_conflict(exc):
                    raise DuplicateEmailError(profile.email) from exc
                raise

        logger.info("profile_created", profile_id=created.id)
        return created  # type: ignore[no-any-return]

    async def update(
        self,
        profile_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
        location: Optional[str] = None,
        skills: Optional[List[str]] = None,
        experience_years: Optional[int] = None,
        hourly_rate: Optional[Decimal] = None,
        available_for_work: Optional[bool] = None,
    ) -> Profile:
        """Apply a partial update. Only non-None fields change."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(profile_id)

            changes: dict[str, Any] = {
                "name": name,
                "location": location,
                "skills": skills,
                "experience_years": experience_years,
                "hourly_rate": hourly_rate,
                "available_for_work": available_for_work,
            }

            if email is not None:
                email = normalize_email(email)
                if email != profile.email:
                    if await uow.profiles.get_by_email(email):
                        raise DuplicateEmailError(email)
                    changes["email"] = email

            changes = {field: value for field, value in changes.items() if value is not None}
            profile = replace(profile, **changes, updated_at=datetime.utcnow())

            try:
                updated = await uow.profiles.update(profile)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                if _is_email_conflict(exc):
                    raise DuplicateEmailError(profile.email) from exc
                raise

        logger.info("profile_updated", profile_id=profile_id, fields=sorted(changes))
        return updated  # type: ignore[no-any-return]

    async def delete(self, profile_id: int) -> None:
        """Delete a profile permanently."""
        async with self._uow_factory() as uow:
            if not await uow.profiles.get(profile_id):
                raise ProfileNotFoundError(profile_id)

            await uow.profiles.delete(profile_id)
            await uow.commit()

        logger.info("profile_deleted", profile_id=profile_id)

    async def get_stats(self) -> ProfileStats:
        """Aggregate figures over the whole directory."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_stats()  # type: ignore[no-any-return]
