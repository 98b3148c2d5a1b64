"""Catalog domain layer."""

from storefront.domain.catalog.entities.product import Product
from storefront.domain.catalog.exceptions import ProductNotFoundError, SkuAlreadyExistsError

__all__ = [
    "Product",
    "ProductNotFoundError",
    "SkuAlreadyExistsError",
]
