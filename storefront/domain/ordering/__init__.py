"""Ordering domain layer."""

from storefront.domain.ordering.entities.order import Order, OrderStatus
from storefront.domain.ordering.exceptions import OrderNotFoundError, OrderUserNotFoundError

__all__ = [
    "Order",
    "OrderNotFoundError",
    "OrderStatus",
    "OrderUserNotFoundError",
]
