"""Mapper for User ORM ↔ Domain conversion."""

from storefront.application.identity.dtos import NewUser
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import User
from storefront.infrastructure.common.timestamps import as_utc, utc_now
from storefront.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=UserId(orm_model.id),
            email=orm_model.email,
            name=orm_model.name,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, new_user: NewUser) -> UserORM:
        """Build a new ORM row; created_at and updated_at start equal."""
        now = utc_now()
        return UserORM(
            email=new_user.email,
            name=new_user.name,
            created_at=now,
            updated_at=now,
        )
