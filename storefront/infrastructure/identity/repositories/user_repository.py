"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.application.identity.dtos import NewUser, UserChanges
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import User
from storefront.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    UserHasOrdersError,
    UserNotFoundError,
)
from storefront.infrastructure.common.db_errors import classified_errors
from storefront.infrastructure.common.timestamps import next_updated_at
from storefront.infrastructure.identity.mappers.user_mapper import UserMapper
from storefront.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """SQLAlchemy implementation of UserRepositoryProtocol."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def create(self, new_user: NewUser) -> User:
        """
        Insert a user.

        Raises:
            EmailAlreadyExistsError: If the email is already registered
            UnexpectedError: On any other storage failure
        """
        with classified_errors(
            self.db,
            "users.create",
            on_unique=lambda: EmailAlreadyExistsError(new_user.email),
        ):
            orm_model = self.mapper.to_orm(new_user)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Created user with email: {new_user.email} (id={orm_model.id})")
            return self.mapper.to_domain(orm_model)

    def get_by_id(self, user_id: UserId) -> User:
        """
        Find a user by ID.

        Raises:
            UserNotFoundError: If no user has this id
        """
        with classified_errors(self.db, "users.get_by_id"):
            orm_model = self.db.get(UserORM, user_id.value)
            if orm_model is None:
                raise UserNotFoundError(user_id)
            return self.mapper.to_domain(orm_model)

    def list_all(self) -> list[User]:
        """Get all users in insertion order."""
        with classified_errors(self.db, "users.list_all"):
            stmt = select(UserORM).order_by(UserORM.created_at, UserORM.id)
            orm_models = self.db.execute(stmt).scalars().all()
            return [self.mapper.to_domain(orm) for orm in orm_models]

    def update(self, user_id: UserId, changes: UserChanges) -> User:
        """
        Apply a partial update.

        Raises:
            UserNotFoundError: If no user has this id
            EmailAlreadyExistsError: If the new email is already registered
        """
        with classified_errors(
            self.db,
            "users.update",
            on_unique=lambda: EmailAlreadyExistsError(changes.email or ""),
        ):
            orm_model = self.db.get(UserORM, user_id.value)
            if orm_model is None:
                raise UserNotFoundError(user_id)

            if changes.email is not None:
                orm_model.email = changes.email
            if changes.name is not None:
                orm_model.name = changes.name
            orm_model.updated_at = next_updated_at(orm_model.updated_at)

            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Updated user {user_id}")
            return self.mapper.to_domain(orm_model)

    def delete(self, user_id: UserId) -> None:
        """
        Delete a user. Orders are never cascaded.

        Raises:
            UserNotFoundError: If no user has this id
            UserHasOrdersError: If orders still reference the user
        """
        with classified_errors(
            self.db,
            "users.delete",
            on_foreign_key=lambda: UserHasOrdersError(user_id),
        ):
            orm_model = self.db.get(UserORM, user_id.value)
            if orm_model is None:
                raise UserNotFoundError(user_id)

            self.db.delete(orm_model)
            self.db.commit()
        logger.info(f"Deleted user {user_id}")
