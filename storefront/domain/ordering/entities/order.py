"""Order entity and its status vocabulary."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from storefront.domain.common.entity import Entity
from storefront.domain.common.exceptions import ValidationError
from storefront.domain.common.validation import require_non_negative_amount
from storefront.domain.common.value_objects.ids import OrderId, UserId


class OrderStatus(StrEnum):
    """Statuses an order may be in. Anything else is rejected."""

    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: object) -> "OrderStatus":
        """
        Convert raw input into an OrderStatus.

        Raises:
            ValidationError: If the value is not one of the known statuses
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(status.value for status in cls)
            raise ValidationError(
                f"status must be one of: {allowed}", field="status", value=value
            ) from None


@dataclass(eq=False)
class Order(Entity[OrderId]):
    """
    Order entity.

    Business Rules:
    - user_id must reference an existing user when the order is created
    - status is drawn from OrderStatus
    - total is stored in cents and is never negative
    """

    id: OrderId
    user_id: UserId
    status: OrderStatus
    total_cents: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.status = OrderStatus.parse(self.status)
        require_non_negative_amount(self.total_cents, "total_cents")
