"""
Base classes for Entities and their identifiers.

Entities have an identity that runs through time. Two entities are equal if
they have the same identity, regardless of their attributes. Identities are
assigned by the storage layer, so a domain object only ever exists with a
real id once it has been persisted.

Example:
    @dataclass
    class Product(Entity[ProductId]):
        id: ProductId
        sku: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Wraps a UUID so that ids of different entities cannot be mixed up:

        user_id = UserId(uuid4())
        order_id = OrderId(user_id.value)  # different type, not equal
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, raw: str | UUID) -> Self:
        """Build an id from a UUID or its string form."""
        return cls(raw if isinstance(raw, UUID) else UUID(raw))

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
