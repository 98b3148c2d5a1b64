"""Catalog context schemas."""

from storefront.infrastructure.catalog.schemas.product_schemas import (
    ProductCreateRequest,
    ProductResponse,
    ProductsListResponse,
    ProductUpdateRequest,
)

__all__ = [
    "ProductCreateRequest",
    "ProductResponse",
    "ProductUpdateRequest",
    "ProductsListResponse",
]
