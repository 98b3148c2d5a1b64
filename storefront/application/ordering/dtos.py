"""DTOs for order operations."""

from dataclasses import dataclass

from storefront.domain.common.value_objects.ids import UserId


@dataclass(frozen=True)
class NewOrder:
    """
    Fields needed to create an order.

    status is raw caller input until the service has parsed it into an OrderStatus.
    """

    user_id: UserId
    status: str
    total_cents: int


@dataclass(frozen=True)
class OrderChanges:
    """
    Partial update for an order. None means "leave unchanged".

    The owning user is fixed at creation and cannot be changed.
    """

    status: str | None = None
    total_cents: int | None = None
