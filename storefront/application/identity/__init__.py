"""Identity application layer."""

from storefront.application.identity.dtos import NewUser, UserChanges
from storefront.application.identity.services.user_service import UserService

__all__ = [
    "NewUser",
    "UserChanges",
    "UserService",
]
