"""Identity infrastructure layer."""

from storefront.infrastructure.identity.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
]
