"""Application service for order CRUD."""

from dataclasses import replace

import structlog

from storefront.application.identity.protocols.user_repository import UserRepositoryProtocol
from storefront.application.ordering.dtos import NewOrder, OrderChanges
from storefront.application.ordering.protocols.order_repository import OrderRepositoryProtocol
from storefront.domain.common.validation import require_non_negative_amount
from storefront.domain.common.value_objects.ids import OrderId
from storefront.domain.identity.exceptions import UserNotFoundError
from storefront.domain.ordering.entities.order import Order, OrderStatus
from storefront.domain.ordering.exceptions import OrderUserNotFoundError

logger = structlog.get_logger(__name__)


class OrderService:
    """
    Use cases for orders.

    Creating an order checks that the referenced user exists through the
    user repository port, so a bad reference is reported as a validation
    problem regardless of how the order table enforces its foreign key.
    """

    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize service with repository protocols."""
        self.order_repository = order_repository
        self.user_repository = user_repository

    def create(self, new_order: NewOrder) -> Order:
        """
        Create an order for an existing user.

        Args:
            new_order: Owning user, status and total of the order

        Returns:
            Created order domain entity

        Raises:
            ValidationError: If the status is unknown or the total is negative
            OrderUserNotFoundError: If the referenced user does not exist
        """
        status = OrderStatus.parse(new_order.status)
        require_non_negative_amount(new_order.total_cents, "total_cents")

        try:
            self.user_repository.get_by_id(new_order.user_id)
        except UserNotFoundError:
            raise OrderUserNotFoundError(new_order.user_id) from None

        order = self.order_repository.create(replace(new_order, status=status))
        logger.info(
            "order_created",
            order_id=str(order.id),
            user_id=str(order.user_id),
            status=order.status.value,
        )
        return order

    def get_by_id(self, order_id: OrderId) -> Order:
        """
        Get an order by id.

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        return self.order_repository.get_by_id(order_id)

    def list_all(self) -> list[Order]:
        """List all orders."""
        return self.order_repository.list_all()

    def update(self, order_id: OrderId, changes: OrderChanges) -> Order:
        """
        Update an order's status and/or total.

        Raises:
            ValidationError: If the status is unknown or the total is negative
            OrderNotFoundError: If the order does not exist
        """
        if changes.status is not None:
            changes = replace(changes, status=OrderStatus.parse(changes.status))
        if changes.total_cents is not None:
            require_non_negative_amount(changes.total_cents, "total_cents")

        order = self.order_repository.update(order_id, changes)
        logger.info("order_updated", order_id=str(order_id), status=order.status.value)
        return order

    def delete(self, order_id: OrderId) -> None:
        """
        Delete an order.

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        self.order_repository.delete(order_id)
        logger.info("order_deleted", order_id=str(order_id))
