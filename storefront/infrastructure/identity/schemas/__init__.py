"""Identity context schemas."""

from storefront.infrastructure.identity.schemas.user_schemas import (
    UserCreateRequest,
    UserResponse,
    UsersListResponse,
    UserUpdateRequest,
)

__all__ = [
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
    "UsersListResponse",
]
