"""Identity domain exceptions."""

from storefront.domain.common.exceptions import ConflictError, EntityNotFoundError
from storefront.domain.common.value_objects.ids import UserId


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: UserId) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(ConflictError):
    """Raised when a user would share an email with another user."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"Email {email} is already registered", {"field": "email", "value": email}
        )
        self.email = email


class UserHasOrdersError(ConflictError):
    """Raised when deleting a user that is still referenced by orders."""

    def __init__(self, user_id: UserId) -> None:
        super().__init__(
            f"User {user_id} still has orders and cannot be deleted",
            {"entity_type": "User", "entity_id": str(user_id)},
        )
        self.user_id = user_id
