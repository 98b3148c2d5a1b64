"""Protocol for Product repository in catalog context."""

from typing import Protocol

from storefront.application.catalog.dtos import NewProduct, ProductChanges
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.value_objects.ids import ProductId


class ProductRepositoryProtocol(Protocol):
    """Storage operations a product service may invoke."""

    def create(self, new_product: NewProduct) -> Product:
        """
        Persist a new product.

        Raises:
            SkuAlreadyExistsError: If the SKU is already taken
        """
        ...

    def get_by_id(self, product_id: ProductId) -> Product:
        """
        Fetch a product by id.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...

    def list_all(self) -> list[Product]:
        """Return every product, oldest first."""
        ...

    def update(self, product_id: ProductId, changes: ProductChanges) -> Product:
        """
        Apply a partial update and refresh updated_at.

        Raises:
            ProductNotFoundError: If no product has this id
            SkuAlreadyExistsError: If the new SKU is already taken
        """
        ...

    def delete(self, product_id: ProductId) -> None:
        """
        Delete a product.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...
