"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.pagination import Page, PageRequest, Pagination
from domain.entities.profile import Profile, ProfileFilters, ProfileStats, normalize_email
from infrastructure.database.models import ProfileModel, ProfileSkillModel
from infrastructure.database.profile_query import count_statement, page_statement


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: int) -> Profile | None:
        """Get a profile by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Profile | None:
        """Get a profile by its normalized email."""
        stmt = select(ProfileModel).where(ProfileModel.email == normalize_email(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_page(self, filters: ProfileFilters, page: PageRequest) -> Page[Profile]:
        """Get one window of matching profiles plus the total match count."""
        total = (await self._session.execute(count_statement(filters))).scalar() or 0

        result = await self._session.execute(page_statement(filters, page))
        items = [self._to_entity(model) for model in result.scalars()]

        return Page(items=items, pagination=Pagination.build(page, total))

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile, rewriting its skill list in place."""
        model = await self._get_model(profile.id)  # type: ignore[arg-type]

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.name = profile.name
        model.email = profile.email
        model.location = profile.location
        model.experience_years = profile.experience_years
        model.available_for_work = profile.available_for_work
        model.hourly_rate = profile.hourly_rate
        model.updated_at = profile.updated_at
        self._sync_skills(model, profile.skills)

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: int) -> bool:
        """Delete a profile together with its skills."""
        model = await self._get_model(id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def get_stats(self) -> ProfileStats:
        """Aggregate counts and experience/rate figures in a single query."""
        stmt = select(
            func.count(ProfileModel.id).label("total"),
            func.sum(
                case((ProfileModel.available_for_work == True, 1), else_=0)  # noqa: E712
            ).label("available"),
            func.avg(ProfileModel.experience_years).label("avg_experience"),
            func.min(ProfileModel.experience_years).label("min_experience"),
            func.max(ProfileModel.experience_years).label("max_experience"),
            func.avg(ProfileModel.hourly_rate).label("avg_rate"),
            func.min(ProfileModel.hourly_rate).label("min_rate"),
            func.max(ProfileModel.hourly_rate).label("max_rate"),
        )
        row = (await self._session.execute(stmt)).one()

        if not row.total:
            return ProfileStats()

        return ProfileStats(
            total_profiles=row.total,
            available_profiles=int(row.available or 0),
            average_experience=round(float(row.avg_experience), 1),
            min_experience=int(row.min_experience),
            max_experience=int(row.max_experience),
            average_rate=round(float(row.avg_rate), 2),
            min_rate=float(row.min_rate),
            max_rate=float(row.max_rate),
        )

    async def _get_model(self, id: int) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _sync_skills(self, model: ProfileModel, skills: list[str]) -> None:
        """Reuse existing (profile_id, position) rows so the composite key never collides."""
        for position, name in enumerate(skills):
            if position < len(model.skills):
                model.skills[position].name = name
            else:
                model.skills.append(ProfileSkillModel(position=position, name=name))
        del model.skills[len(skills):]

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            name=model.name,
            email=model.email,
            location=model.location,
            skills=[skill.name for skill in model.skills],
            experience_years=model.experience_years,
            available_for_work=model.available_for_work,
            hourly_rate=model.hourly_rate,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            location=entity.location,
            experience_years=entity.experience_years,
            available_for_work=entity.available_for_work,
            hourly_rate=entity.hourly_rate,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            skills=[
                ProfileSkillModel(position=position, name=name)
                for position, name in enumerate(entity.skills)
            ],
        )
