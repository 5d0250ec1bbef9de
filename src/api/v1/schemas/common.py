"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error envelope returned for every failure."""

    error_code: str
    message: str
    details: Any | None = None


class FieldError(BaseModel):
    """One itemized validation failure."""

    field: str
    message: str
    type: str


class ValidationErrorResponse(ErrorResponse):
    """Error envelope for rejected input."""

    details: list[FieldError]


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str
