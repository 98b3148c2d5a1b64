"""Catalog domain exceptions."""

from storefront.domain.common.exceptions import ConflictError, EntityNotFoundError
from storefront.domain.common.value_objects.ids import ProductId


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product cannot be found."""

    def __init__(self, product_id: ProductId) -> None:
        super().__init__("Product", product_id)


class SkuAlreadyExistsError(ConflictError):
    """Raised when a product would share a SKU with another product."""

    def __init__(self, sku: str) -> None:
        super().__init__(f"SKU {sku} already exists", {"field": "sku", "value": sku})
        self.sku = sku
