"""Protocol for User repository in identity context."""

from typing import Protocol

from storefront.application.identity.dtos import NewUser, UserChanges
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    """
    Storage operations a user service may invoke.

    Implementations raise only domain errors: EmailAlreadyExistsError,
    UserNotFoundError, UserHasOrdersError or UnexpectedError.
    """

    def create(self, new_user: NewUser) -> User:
        """
        Persist a new user. Id and timestamps are assigned by storage.

        Raises:
            EmailAlreadyExistsError: If the email is already taken
        """
        ...

    def get_by_id(self, user_id: UserId) -> User:
        """
        Fetch a user by id.

        Raises:
            UserNotFoundError: If no user has this id
        """
        ...

    def list_all(self) -> list[User]:
        """Return every user, oldest first."""
        ...

    def update(self, user_id: UserId, changes: UserChanges) -> User:
        """
        Apply a partial update and refresh updated_at.

        Raises:
            UserNotFoundError: If no user has this id
            EmailAlreadyExistsError: If the new email is already taken
        """
        ...

    def delete(self, user_id: UserId) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no user has this id
            UserHasOrdersError: If orders still reference the user
        """
        ...
