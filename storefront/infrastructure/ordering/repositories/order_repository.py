"""Repository for Order domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.application.ordering.dtos import NewOrder, OrderChanges
from storefront.domain.common.value_objects.ids import OrderId
from storefront.domain.ordering.entities.order import Order
from storefront.domain.ordering.exceptions import OrderNotFoundError, OrderUserNotFoundError
from storefront.infrastructure.common.db_errors import classified_errors
from storefront.infrastructure.common.timestamps import next_updated_at
from storefront.infrastructure.ordering.mappers.order_mapper import OrderMapper
from storefront.models import Order as OrderORM

logger = logging.getLogger(__name__)


class OrderRepository:
    """SQLAlchemy implementation of OrderRepositoryProtocol."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = OrderMapper()

    def create(self, new_order: NewOrder) -> Order:
        """
        Insert an order.

        The service has already checked the user exists. If the user was
        deleted in between, the foreign key rejects the insert and the caller
        gets the same validation error the check would have produced.

        Raises:
            OrderUserNotFoundError: If the referenced user does not exist
        """
        with classified_errors(
            self.db,
            "orders.create",
            on_foreign_key=lambda: OrderUserNotFoundError(new_order.user_id),
        ):
            orm_model = self.mapper.to_orm(new_order)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Created order {orm_model.id} for user {new_order.user_id}")
            return self.mapper.to_domain(orm_model)

    def get_by_id(self, order_id: OrderId) -> Order:
        """
        Find an order by ID.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        with classified_errors(self.db, "orders.get_by_id"):
            orm_model = self.db.get(OrderORM, order_id.value)
            if orm_model is None:
                raise OrderNotFoundError(order_id)
            return self.mapper.to_domain(orm_model)

    def list_all(self) -> list[Order]:
        """Get all orders in insertion order."""
        with classified_errors(self.db, "orders.list_all"):
            stmt = select(OrderORM).order_by(OrderORM.created_at, OrderORM.id)
            orm_models = self.db.execute(stmt).scalars().all()
            return [self.mapper.to_domain(orm) for orm in orm_models]

    def update(self, order_id: OrderId, changes: OrderChanges) -> Order:
        """
        Apply a partial update.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        with classified_errors(self.db, "orders.update"):
            orm_model = self.db.get(OrderORM, order_id.value)
            if orm_model is None:
                raise OrderNotFoundError(order_id)

            if changes.status is not None:
                orm_model.status = str(changes.status)
            if changes.total_cents is not None:
                orm_model.total_cents = changes.total_cents
            orm_model.updated_at = next_updated_at(orm_model.updated_at)

            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Updated order {order_id}")
            return self.mapper.to_domain(orm_model)

    def delete(self, order_id: OrderId) -> None:
        """
        Delete an order.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        with classified_errors(self.db, "orders.delete"):
            orm_model = self.db.get(OrderORM, order_id.value)
            if orm_model is None:
                raise OrderNotFoundError(order_id)

            self.db.delete(orm_model)
            self.db.commit()
        logger.info(f"Deleted order {order_id}")
