"""Identity domain layer."""

from storefront.domain.identity.entities.user import User
from storefront.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    UserHasOrdersError,
    UserNotFoundError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserHasOrdersError",
    "UserNotFoundError",
]
