"""Repository for Product domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.application.catalog.dtos import NewProduct, ProductChanges
from storefront.domain.catalog.entities.product import Product
from storefront.domain.catalog.exceptions import ProductNotFoundError, SkuAlreadyExistsError
from storefront.domain.common.value_objects.ids import ProductId
from storefront.infrastructure.catalog.mappers.product_mapper import ProductMapper
from storefront.infrastructure.common.db_errors import classified_errors
from storefront.infrastructure.common.timestamps import next_updated_at
from storefront.models import Product as ProductORM

logger = logging.getLogger(__name__)


class ProductRepository:
    """SQLAlchemy implementation of ProductRepositoryProtocol."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ProductMapper()

    def create(self, new_product: NewProduct) -> Product:
        """
        Insert a product.

        Raises:
            SkuAlreadyExistsError: If the SKU is already taken
        """
        with classified_errors(
            self.db,
            "products.create",
            on_unique=lambda: SkuAlreadyExistsError(new_product.sku),
        ):
            orm_model = self.mapper.to_orm(new_product)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Created product {new_product.sku} (id={orm_model.id})")
            return self.mapper.to_domain(orm_model)

    def get_by_id(self, product_id: ProductId) -> Product:
        with classified_errors(self.db, "products.get_by_id"):
            orm_model = self.db.get(ProductORM, product_id.value)
            if orm_model is None:
                raise ProductNotFoundError(product_id)
            return self.mapper.to_domain(orm_model)

    def list_all(self) -> list[Product]:
        with classified_errors(self.db, "products.list_all"):
            stmt = select(ProductORM).order_by(ProductORM.created_at, ProductORM.id)
            orm_models = self.db.execute(stmt).scalars().all()
            return [self.mapper.to_domain(orm) for orm in orm_models]

    def update(self, product_id: ProductId, changes: ProductChanges) -> Product:
        """
        Apply a partial update.

        Raises:
            ProductNotFoundError: If no product has this id
            SkuAlreadyExistsError: If the new SKU is already taken
        """
        with classified_errors(
            self.db,
            "products.update",
            on_unique=lambda: SkuAlreadyExistsError(changes.sku or ""),
        ):
            orm_model = self.db.get(ProductORM, product_id.value)
            if orm_model is None:
                raise ProductNotFoundError(product_id)

            if changes.sku is not None:
                orm_model.sku = changes.sku
            if changes.name is not None:
                orm_model.name = changes.name
            if changes.price_cents is not None:
                orm_model.price_cents = changes.price_cents
            orm_model.updated_at = next_updated_at(orm_model.updated_at)

            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Updated product {product_id}")
            return self.mapper.to_domain(orm_model)

    def delete(self, product_id: ProductId) -> None:
        """
        Delete a product.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        with classified_errors(self.db, "products.delete"):
            orm_model = self.db.get(ProductORM, product_id.value)
            if orm_model is None:
                raise ProductNotFoundError(product_id)

            self.db.delete(orm_model)
            self.db.commit()
        logger.info(f"Deleted product {product_id}")
