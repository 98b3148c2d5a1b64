"""Mapper for Product ORM ↔ Domain conversion."""

from storefront.application.catalog.dtos import NewProduct
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.value_objects.ids import ProductId
from storefront.infrastructure.common.timestamps import as_utc, utc_now
from storefront.models import Product as ProductORM


class ProductMapper:
    """Mapper for Product ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ProductORM) -> Product:
        """Convert ORM model to domain entity."""
        return Product(
            id=ProductId(orm_model.id),
            sku=orm_model.sku,
            name=orm_model.name,
            price_cents=orm_model.price_cents,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, new_product: NewProduct) -> ProductORM:
        """Build a new ORM row."""
        now = utc_now()
        return ProductORM(
            sku=new_product.sku,
            name=new_product.name,
            price_cents=new_product.price_cents,
            created_at=now,
            updated_at=now,
        )
