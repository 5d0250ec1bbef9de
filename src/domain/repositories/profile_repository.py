"""Profile repository protocol."""

from typing import Protocol

from domain.entities.pagination import Page, PageRequest
from domain.entities.profile import Profile, ProfileFilters, ProfileStats


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: int) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_by_email(self, email: str) -> Profile | None:
        """Get a profile by its normalized email."""
        ...

    async def find_page(self, filters: ProfileFilters, page: PageRequest) -> Page[Profile]:
        """Get one window of profiles matching the filters, newest first."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile and return it with its assigned ID."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        ...

    async def delete(self, id: int) -> bool:
        """Delete a profile and return success status."""
        ...

    async def get_stats(self) -> ProfileStats:
        """Aggregate counts and experience/rate figures over all profiles."""
        ...
