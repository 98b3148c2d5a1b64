"""Application service for user CRUD."""

import structlog

from storefront.application.identity.dtos import NewUser, UserChanges
from storefront.application.identity.protocols.user_repository import UserRepositoryProtocol
from storefront.domain.common.validation import require_text
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class UserService:
    """Use cases for users. Depends only on the user repository port."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize service with repository protocol."""
        self.user_repository = user_repository

    def create(self, new_user: NewUser) -> User:
        """
        Create a user.

        Raises:
            ValidationError: If email or name is blank
            EmailAlreadyExistsError: If the email is already registered
        """
        require_text(new_user.email, "email")
        require_text(new_user.name, "name")

        user = self.user_repository.create(new_user)
        logger.info("user_created", user_id=str(user.id))
        return user

    def get_by_id(self, user_id: UserId) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return self.user_repository.get_by_id(user_id)

    def list_all(self) -> list[User]:
        """List all users."""
        return self.user_repository.list_all()

    def update(self, user_id: UserId, changes: UserChanges) -> User:
        """
        Update a user's email and/or name.

        Raises:
            ValidationError: If a provided field is blank
            UserNotFoundError: If the user does not exist
            EmailAlreadyExistsError: If the new email is already registered
        """
        if changes.email is not None:
            require_text(changes.email, "email")
        if changes.name is not None:
            require_text(changes.name, "name")

        user = self.user_repository.update(user_id, changes)
        logger.info("user_updated", user_id=str(user_id))
        return user

    def delete(self, user_id: UserId) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If the user does not exist
            UserHasOrdersError: If the user still has orders
        """
        self.user_repository.delete(user_id)
        logger.info("user_deleted", user_id=str(user_id))
