"""Ordering context schemas."""

from storefront.infrastructure.ordering.schemas.order_schemas import (
    OrderCreateRequest,
    OrderResponse,
    OrdersListResponse,
    OrderUpdateRequest,
)

__all__ = [
    "OrderCreateRequest",
    "OrderResponse",
    "OrderUpdateRequest",
    "OrdersListResponse",
]
