"""Query construction for profile listing and search.

Filters become SQLAlchemy expressions combined with AND. Results are ordered
newest first, with the primary key breaking ties between equal timestamps.
"""

from sqlalchemy import ColumnElement, Select, func, select

from domain.entities.pagination import PageRequest
from domain.entities.profile import ProfileFilters
from infrastructure.database.models import ProfileModel, ProfileSkillModel


def filter_clauses(filters: ProfileFilters) -> list[ColumnElement[bool]]:
    """Translate supplied filters into WHERE clauses."""
    clauses: list[ColumnElement[bool]] = []

    if filters.location is not None:
        clauses.append(ProfileModel.location.contains(filters.location, autoescape=True))

    if filters.available_for_work is not None:
        clauses.append(ProfileModel.available_for_work == filters.available_for_work)

    if filters.min_experience is not None:
        clauses.append(ProfileModel.experience_years >= filters.min_experience)

    if filters.max_hourly_rate is not None:
        clauses.append(ProfileModel.hourly_rate <= filters.max_hourly_rate)

    if filters.skills:
        # Any requested skill, exact name, case-insensitive
        wanted = sorted({skill.lower() for skill in filters.skills})
        matching_ids = select(ProfileSkillModel.profile_id).where(
            func.lower(ProfileSkillModel.name).in_(wanted)
        )
        clauses.append(ProfileModel.id.in_(matching_ids))

    return clauses


def count_statement(filters: ProfileFilters) -> Select[tuple[int]]:
    """Count every profile matching the filters."""
    return select(func.count()).select_from(ProfileModel).where(*filter_clauses(filters))


def page_statement(filters: ProfileFilters, page: PageRequest) -> Select[tuple[ProfileModel]]:
    """Select one ordered window of matching profiles."""
    return (
        select(ProfileModel)
        .where(*filter_clauses(filters))
        .order_by(ProfileModel.created_at.desc(), ProfileModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )
