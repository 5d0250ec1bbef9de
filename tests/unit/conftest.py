"""Shared fixtures for unit tests."""

from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.profile import Profile


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked profile repository for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


def make_profile(**overrides: Any) -> Profile:
    """Build a valid Profile, overriding any field."""
    fields: dict[str, Any] = {
        "id": 1,
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "location": "London, UK",
        "skills": ["Python", "SQL"],
        "experience_years": 6,
        "hourly_rate": Decimal("90"),
        "available_for_work": True,
    }
    fields.update(overrides)
    return Profile(**fields)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()
