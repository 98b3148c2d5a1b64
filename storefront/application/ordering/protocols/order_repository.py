"""Protocol for Order repository in ordering context."""

from typing import Protocol

from storefront.application.ordering.dtos import NewOrder, OrderChanges
from storefront.domain.common.value_objects.ids import OrderId
from storefront.domain.ordering.entities.order import Order


class OrderRepositoryProtocol(Protocol):
    """Storage operations an order service may invoke."""

    def create(self, new_order: NewOrder) -> Order:
        """
        Persist a new order.

        Raises:
            OrderUserNotFoundError: If storage rejects the user reference
        """
        ...

    def get_by_id(self, order_id: OrderId) -> Order:
        """
        Fetch an order by id.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        ...

    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""
        ...

    def update(self, order_id: OrderId, changes: OrderChanges) -> Order:
        """
        Apply a partial update and refresh updated_at.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        ...

    def delete(self, order_id: OrderId) -> None:
        """
        Delete an order.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        ...
