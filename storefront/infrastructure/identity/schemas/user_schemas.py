"""Pydantic schemas for User API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    """Schema for creating a user."""

    email: str = Field(..., description="Email address, unique across users")
    name: str = Field(..., description="Display name")


class UserUpdateRequest(BaseModel):
    """Schema for updating a user. Omitted fields are left unchanged."""

    email: str | None = Field(None, description="New email address")
    name: str | None = Field(None, description="New display name")


class UserResponse(BaseModel):
    """Schema for User response."""

    id: UUID
    email: str
    name: str
    created_at: datetime
    updated_at: datetime


class UsersListResponse(BaseModel):
    """Schema for list of users response."""

    users: list[UserResponse] = Field(..., description="All users, oldest first")
