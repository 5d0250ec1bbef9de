"""Pydantic schemas for Profile API."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    model_validator,
)

SkillName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class ProfileBase(BaseModel):
    """Base schema for Profile."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    location: str = Field(..., min_length=2, max_length=100)
    skills: list[SkillName] = Field(..., min_length=1)
    experience_years: int = Field(..., alias="experienceYears", ge=0, le=50)
    hourly_rate: Decimal = Field(..., alias="hourlyRate", ge=0, le=1000)


class ProfileCreate(ProfileBase):
    """Schema for creating a Profile."""

    available_for_work: bool = Field(True, alias="availableForWork")


class ProfileUpdate(BaseModel):
    """Schema for updating a Profile (any non-empty subset of fields)."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str | None = Field(None, min_length=2, max_length=100)
    email: EmailStr | None = None
    location: str | None = Field(None, min_length=2, max_length=100)
    skills: list[SkillName] | None = Field(None, min_length=1)
    experience_years: int | None = Field(None, alias="experienceYears", ge=0, le=50)
    hourly_rate: Decimal | None = Field(None, alias="hourlyRate", ge=0, le=1000)
    available_for_work: bool | None = Field(None, alias="availableForWork")

    @model_validator(mode="after")
    def validate_fields_present(self) -> "ProfileUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        nulls = sorted(f for f in self.model_fields_set if getattr(self, f) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Alice Johnson",
                "email": "alice.johnson@email.com",
                "location": "San Francisco, CA",
                "skills": ["React", "Node.js", "TypeScript"],
                "experienceYears": 5,
                "availableForWork": True,
                "hourlyRate": 85.0,
                "createdAt": "2026-01-28T10:00:00",
                "updatedAt": "2026-01-28T10:00:00",
            }
        },
    )

    id: int
    name: str
    email: str
    location: str
    skills: list[str]
    experience_years: int = Field(alias="experienceYears")
    available_for_work: bool = Field(alias="availableForWork")
    hourly_rate: float = Field(alias="hourlyRate")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class PaginationResponse(BaseModel):
    """Pagination metadata for list responses."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_items: int = Field(alias="totalItems")
    has_next: bool = Field(alias="hasNext")
    has_prev: bool = Field(alias="hasPrev")
    items_per_page: int = Field(alias="itemsPerPage")


class ProfileListResponse(BaseModel):
    """Schema for a page of Profiles."""

    data: list[ProfileResponse]
    pagination: PaginationResponse


class ProfileSearchResponse(ProfileListResponse):
    """Schema for a page of search results, echoing the applied criteria."""

    criteria: dict[str, Any] = Field(default_factory=dict)


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileMutationResponse(ProfileDetailResponse):
    """Schema for a created or updated Profile."""

    message: str
