"""Application service for product CRUD."""

import structlog

from storefront.application.catalog.dtos import NewProduct, ProductChanges
from storefront.application.catalog.protocols.product_repository import (
    ProductRepositoryProtocol,
)
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.validation import require_non_negative_amount, require_text
from storefront.domain.common.value_objects.ids import ProductId

logger = structlog.get_logger(__name__)


class ProductService:
    """Use cases for products."""

    def __init__(self, product_repository: ProductRepositoryProtocol) -> None:
        self.product_repository = product_repository

    def create(self, new_product: NewProduct) -> Product:
        """
        Create a product.

        Raises:
            ValidationError: If sku or name is blank, or the price is negative
            SkuAlreadyExistsError: If the SKU is already taken
        """
        require_text(new_product.sku, "sku")
        require_text(new_product.name, "name")
        require_non_negative_amount(new_product.price_cents, "price_cents")

        product = self.product_repository.create(new_product)
        logger.info("product_created", product_id=str(product.id), sku=product.sku)
        return product

    def get_by_id(self, product_id: ProductId) -> Product:
        return self.product_repository.get_by_id(product_id)

    def list_all(self) -> list[Product]:
        return self.product_repository.list_all()

    def update(self, product_id: ProductId, changes: ProductChanges) -> Product:
        """
        Update any of sku, name and price.

        Raises:
            ValidationError: If a provided field is blank or negative
            ProductNotFoundError: If the product does not exist
            SkuAlreadyExistsError: If the new SKU is already taken
        """
        if changes.sku is not None:
            require_text(changes.sku, "sku")
        if changes.name is not None:
            require_text(changes.name, "name")
        if changes.price_cents is not None:
            require_non_negative_amount(changes.price_cents, "price_cents")

        product = self.product_repository.update(product_id, changes)
        logger.info("product_updated", product_id=str(product_id))
        return product

    def delete(self, product_id: ProductId) -> None:
        self.product_repository.delete(product_id)
        logger.info("product_deleted", product_id=str(product_id))
