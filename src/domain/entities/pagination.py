"""Pagination value objects."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True, slots=True)
class PageRequest:
    """A 1-based page number and page size.

    ``page`` values below 1 are clamped to 1. ``limit`` must be positive and
    has no upper bound.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be a positive integer, got {self.limit}")
        if self.page < 1:
            object.__setattr__(self, "page", 1)

    @property
    def offset(self) -> int:
        """Number of rows to skip before this page."""
        return (self.page - 1) * self.limit


@dataclass(frozen=True, slots=True)
class Pagination:
    """Pagination metadata for a result window."""

    current_page: int
    total_pages: int
    total_items: int
    has_next: bool
    has_prev: bool
    items_per_page: int

    @classmethod
    def build(cls, request: PageRequest, total_items: int) -> "Pagination":
        """Derive page counts and navigation flags from a total row count."""
        total_pages = -(-total_items // request.limit)  # ceil
        return cls(
            current_page=request.page,
            total_pages=total_pages,
            total_items=total_items,
            has_next=request.page < total_pages,
            has_prev=request.page > 1,
            items_per_page=request.limit,
        )


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One window of an ordered result set."""

    items: list[T]
    pagination: Pagination
