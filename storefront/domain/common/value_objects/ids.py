from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class ProductId(EntityId):
    """Strongly-typed product identifier."""


@dataclass(frozen=True)
class OrderId(EntityId):
    """Strongly-typed order identifier."""
