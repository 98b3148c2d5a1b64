"""Common response wrapper schemas for API responses."""

from typing import Any

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Error kind: validation, not_found, conflict or unexpected")
    detail: str = Field(..., description="Human readable message")
    context: dict[str, Any] = Field(
        default_factory=dict, description="Offending field or id, when there is one"
    )


class HealthResponse(BaseModel):
    """Liveness plus database reachability."""

    status: str
    db: str
