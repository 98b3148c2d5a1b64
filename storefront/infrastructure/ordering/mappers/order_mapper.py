"""Mapper for Order ORM ↔ Domain conversion."""

from storefront.application.ordering.dtos import NewOrder
from storefront.domain.common.value_objects.ids import OrderId, UserId
from storefront.domain.ordering.entities.order import Order, OrderStatus
from storefront.infrastructure.common.timestamps import as_utc, utc_now
from storefront.models import Order as OrderORM


class OrderMapper:
    """Mapper for Order ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: OrderORM) -> Order:
        """Convert ORM model to domain entity."""
        return Order(
            id=OrderId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            status=OrderStatus(orm_model.status),
            total_cents=orm_model.total_cents,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, new_order: NewOrder) -> OrderORM:
        """Build a new ORM row."""
        now = utc_now()
        return OrderORM(
            user_id=new_order.user_id.value,
            status=str(new_order.status),
            total_cents=new_order.total_cents,
            created_at=now,
            updated_at=now,
        )
