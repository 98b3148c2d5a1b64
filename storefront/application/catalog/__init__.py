"""Catalog application layer."""

from storefront.application.catalog.dtos import NewProduct, ProductChanges
from storefront.application.catalog.services.product_service import ProductService

__all__ = [
    "NewProduct",
    "ProductChanges",
    "ProductService",
]
