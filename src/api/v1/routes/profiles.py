"""Profile API routes."""

from decimal import Decimal

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Path, Query, Request, status

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse, MessageResponse, ValidationErrorResponse
from api.v1.schemas.profile import (
    PaginationResponse,
    ProfileCreate,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileMutationResponse,
    ProfileResponse,
    ProfileSearchResponse,
    ProfileUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, Page, PageRequest
from domain.entities.profile import Profile, ProfileFilters
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])

_VALIDATION = {400: {"model": ValidationErrorResponse, "description": "Invalid input"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Profile not found"}}
_CONFLICT = {409: {"model": ErrorResponse, "description": "Email already in use"}}

# Bounds of the store's INTEGER columns; larger values cannot be bound in a query
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

ProfileId = Annotated[int, Path(ge=INT_MIN, le=INT_MAX, description="Profile ID")]


def get_page_request(
    page: int = Query(
        DEFAULT_PAGE,
        le=INT_MAX,
        description="1-based page number; values below 1 mean page 1",
    ),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=INT_MAX, description="Items per page"),
) -> PageRequest:
    """Pagination window from query parameters."""
    return PageRequest(page=page, limit=limit)


def get_search_filters(
    location: str | None = Query(None, description="Substring of the profile location"),
    skills: list[str] | None = Query(
        None,
        description="Skill names; repeat the parameter or separate names with commas. "
        "Matches profiles having any of them.",
    ),
    available_for_work: Literal["true", "false"] | None = Query(None, alias="availableForWork"),
    min_experience: int | None = Query(
        None,
        alias="minExperience",
        ge=INT_MIN,
        le=INT_MAX,
        description="Minimum years of experience",
    ),
    max_hourly_rate: Decimal | None = Query(
        None, alias="maxHourlyRate", description="Maximum hourly rate"
    ),
) -> ProfileFilters:
    """Normalize search query parameters into a filter value."""
    if location is not None:
        location = location.strip() or None
    names = [part.strip() for value in skills or [] for part in value.split(",")]
    return ProfileFilters(
        location=location,
        skills=tuple(dict.fromkeys(name for name in names if name)),
        available_for_work=None if available_for_work is None else available_for_work == "true",
        min_experience=min_experience,
        max_hourly_rate=max_hourly_rate,
    )


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List profiles",
    responses={**_VALIDATION},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    page: PageRequest = Depends(get_page_request),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get all profiles, most recently created first."""
    result = await service.list_profiles(page)
    return ProfileListResponse(
        data=[_build_profile_response(p) for p in result.items],
        pagination=_build_pagination(result),
    )


@router.get(
    "/search",
    response_model=ProfileSearchResponse,
    summary="Search profiles",
    responses={**_VALIDATION},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def search_profiles(
    request: Request,
    page: PageRequest = Depends(get_page_request),
    filters: ProfileFilters = Depends(get_search_filters),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileSearchResponse:
    """
    Filter profiles by location, skills, availability, experience and rate.

    All supplied filters must match. The applied filters are echoed back as `criteria`.
    """
    result = await service.search(filters, page)
    return ProfileSearchResponse(
        data=[_build_profile_response(p) for p in result.items],
        pagination=_build_pagination(result),
        criteria=filters.to_criteria(),
    )


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={**_NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: ProfileId,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a specific profile by ID."""
    profile = await service.get_by_id(profile_id)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.post(
    "",
    response_model=ProfileMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={**_VALIDATION, **_CONFLICT},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfileCreate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileMutationResponse:
    """Create a new profile. Emails must be unique (case-insensitive)."""
    profile = await service.create(
        name=body.name,
        email=body.email,
        location=body.location,
        skills=body.skills,
        experience_years=body.experience_years,
        hourly_rate=body.hourly_rate,
        available_for_work=body.available_for_work,
    )
    return ProfileMutationResponse(
        data=_build_profile_response(profile),
        message="Profile created successfully",
    )


@router.put(
    "/{profile_id}",
    response_model=ProfileMutationResponse,
    summary="Update a profile",
    responses={**_VALIDATION, **_NOT_FOUND, **_CONFLICT},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_id: ProfileId,
    body: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileMutationResponse:
    """Partially update a profile. Only the supplied fields change."""
    profile = await service.update(
        profile_id,
        name=body.name,
        email=body.email,
        location=body.location,
        skills=body.skills,
        experience_years=body.experience_years,
        hourly_rate=body.hourly_rate,
        available_for_work=body.available_for_work,
    )
    return ProfileMutationResponse(
        data=_build_profile_response(profile),
        message="Profile updated successfully",
    )


@router.delete(
    "/{profile_id}",
    response_model=MessageResponse,
    summary="Delete a profile",
    responses={**_NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    profile_id: ProfileId,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete a profile permanently."""
    await service.delete(profile_id)
    return MessageResponse(message=f"Profile {profile_id} deleted successfully")


def _build_profile_response(profile: Profile) -> ProfileResponse:
    """Build a ProfileResponse from a domain entity."""
    return ProfileResponse.model_validate(profile)


def _build_pagination(page: Page[Profile]) -> PaginationResponse:
    return PaginationResponse.model_validate(page.pagination)
