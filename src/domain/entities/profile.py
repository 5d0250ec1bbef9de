"""Profile domain entity and query value objects."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

RATE_PRECISION = Decimal("0.01")


def normalize_email(email: str) -> str:
    """Canonical form used for storage and uniqueness checks."""
    return email.strip().lower()


def to_rate(value: Decimal | float | int | str) -> Decimal:
    """Convert an hourly rate to a two-decimal ``Decimal``."""
    return Decimal(str(value)).quantize(RATE_PRECISION)


@dataclass
class Profile:
    """Domain entity for a developer profile."""

    name: str
    email: str
    location: str
    skills: list[str]
    experience_years: int
    hourly_rate: Decimal
    available_for_work: bool = True
    id: int | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Normalize email, skills and rate; a profile always has skills."""
        self.email = normalize_email(self.email)
        self.skills = [skill.strip() for skill in self.skills if skill.strip()]
        if not self.skills:
            raise ValueError("A profile requires at least one skill")
        self.hourly_rate = to_rate(self.hourly_rate)
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass(frozen=True, slots=True)
class ProfileFilters:
    """Optional search constraints. ``None`` (or no skills) means not supplied.

    All supplied constraints must hold. ``skills`` matches profiles having
    any of the listed skills.
    """

    location: str | None = None
    skills: tuple[str, ...] = ()
    available_for_work: bool | None = None
    min_experience: int | None = None
    max_hourly_rate: Decimal | None = None

    @property
    def is_empty(self) -> bool:
        return self == ProfileFilters()

    def to_criteria(self) -> dict[str, Any]:
        """The supplied filters keyed by their query parameter names."""
        criteria: dict[str, Any] = {}
        if self.location is not None:
            criteria["location"] = self.location
        if self.skills:
            criteria["skills"] = list(self.skills)
        if self.available_for_work is not None:
            criteria["availableForWork"] = self.available_for_work
        if self.min_experience is not None:
            criteria["minExperience"] = self.min_experience
        if self.max_hourly_rate is not None:
            criteria["maxHourlyRate"] = float(self.max_hourly_rate)
        return criteria


@dataclass(frozen=True, slots=True)
class ProfileStats:
    """Read-only aggregate over all stored profiles."""

    total_profiles: int = 0
    available_profiles: int = 0
    average_experience: float = 0.0
    min_experience: int = 0
    max_experience: int = 0
    average_rate: float = 0.0
    min_rate: float = 0.0
    max_rate: float = 0.0

    @property
    def unavailable_profiles(self) -> int:
        return self.total_profiles - self.available_profiles
