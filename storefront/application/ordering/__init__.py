"""Ordering application layer."""

from storefront.application.ordering.dtos import NewOrder, OrderChanges
from storefront.application.ordering.services.order_service import OrderService

__all__ = [
    "NewOrder",
    "OrderChanges",
    "OrderService",
]
