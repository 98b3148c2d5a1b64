"""Tests for the SQLAlchemy repositories against SQLite."""

from uuid import uuid4

import pytest
from sqlalchemy import update
from sqlalchemy.orm import Session

from storefront.application.catalog.dtos import NewProduct, ProductChanges
from storefront.application.identity.dtos import NewUser, UserChanges
from storefront.application.ordering.dtos import NewOrder, OrderChanges
from storefront.domain.catalog.exceptions import ProductNotFoundError, SkuAlreadyExistsError
from storefront.domain.common.exceptions import UnexpectedError
from storefront.domain.common.value_objects.ids import OrderId, ProductId, UserId
from storefront.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    UserHasOrdersError,
    UserNotFoundError,
)
from storefront.domain.ordering.entities.order import OrderStatus
from storefront.domain.ordering.exceptions import OrderNotFoundError, OrderUserNotFoundError
from storefront.infrastructure.catalog.repositories.product_repository import ProductRepository
from storefront.infrastructure.identity.repositories.user_repository import UserRepository
from storefront.infrastructure.ordering.repositories.order_repository import OrderRepository
from storefront.models import Order as OrderORM


@pytest.fixture
def users(db_session: Session) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def products(db_session: Session) -> ProductRepository:
    return ProductRepository(db_session)


@pytest.fixture
def orders(db_session: Session) -> OrderRepository:
    return OrderRepository(db_session)


class TestUserRepository:
    """Test suite for UserRepository."""

    def test_create_and_get(self, users: UserRepository) -> None:
        """Test a created user can be read back unchanged."""
        created = users.create(NewUser(email="a@x.io", name="A"))

        fetched = users.get_by_id(created.id)

        assert fetched == created
        assert fetched.email == "a@x.io"
        assert fetched.created_at == fetched.updated_at
        assert fetched.created_at.tzinfo is not None

    def test_duplicate_email_is_conflict(self, users: UserRepository) -> None:
        """Test the unique constraint surfaces as EmailAlreadyExistsError."""
        users.create(NewUser(email="a@x.io", name="A"))

        with pytest.raises(EmailAlreadyExistsError):
            users.create(NewUser(email="a@x.io", name="B"))

        # The session is usable after the failed insert
        assert len(users.list_all()) == 1

    def test_get_missing(self, users: UserRepository) -> None:
        """Test a missing id is reported as not found."""
        with pytest.raises(UserNotFoundError):
            users.get_by_id(UserId(uuid4()))

    def test_list_in_insertion_order(self, users: UserRepository) -> None:
        """Test list_all returns users oldest first."""
        for i in range(3):
            users.create(NewUser(email=f"u{i}@x.io", name=f"U{i}"))

        assert [user.email for user in users.list_all()] == ["u0@x.io", "u1@x.io", "u2@x.io"]

    def test_update_advances_updated_at(self, users: UserRepository) -> None:
        """Test update keeps created_at and moves updated_at forward."""
        created = users.create(NewUser(email="a@x.io", name="A"))

        updated = users.update(created.id, UserChanges(name="B"))

        assert updated.name == "B"
        assert updated.email == "a@x.io"
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at

    def test_update_to_taken_email_is_conflict(self, users: UserRepository) -> None:
        """Test changing email to another user's email is a conflict."""
        users.create(NewUser(email="a@x.io", name="A"))
        second = users.create(NewUser(email="b@x.io", name="B"))

        with pytest.raises(EmailAlreadyExistsError):
            users.update(second.id, UserChanges(email="a@x.io"))

        assert users.get_by_id(second.id).email == "b@x.io"

    def test_update_missing(self, users: UserRepository) -> None:
        """Test updating a missing user is not found."""
        with pytest.raises(UserNotFoundError):
            users.update(UserId(uuid4()), UserChanges(name="B"))

    def test_delete(self, users: UserRepository) -> None:
        """Test a deleted user is gone and cannot be deleted twice."""
        created = users.create(NewUser(email="a@x.io", name="A"))

        users.delete(created.id)

        with pytest.raises(UserNotFoundError):
            users.get_by_id(created.id)
        with pytest.raises(UserNotFoundError):
            users.delete(created.id)

    def test_delete_user_with_orders_is_refused(
        self, users: UserRepository, orders: OrderRepository
    ) -> None:
        """Test the restrict foreign key keeps both the user and its orders."""
        user = users.create(NewUser(email="a@x.io", name="A"))
        order = orders.create(
            NewOrder(user_id=user.id, status=OrderStatus.PENDING, total_cents=100)
        )

        with pytest.raises(UserHasOrdersError):
            users.delete(user.id)

        assert users.get_by_id(user.id) == user
        assert orders.get_by_id(order.id) == order


class TestProductRepository:
    """Test suite for ProductRepository."""

    def test_create_and_update(self, products: ProductRepository) -> None:
        """Test create then a partial price update."""
        created = products.create(NewProduct(sku="SKU-1", name="Widget", price_cents=500))

        updated = products.update(created.id, ProductChanges(price_cents=750))

        assert updated.price_cents == 750
        assert updated.sku == "SKU-1"
        assert updated.updated_at > created.updated_at

    def test_duplicate_sku_is_conflict(self, products: ProductRepository) -> None:
        """Test the SKU unique constraint surfaces as SkuAlreadyExistsError."""
        products.create(NewProduct(sku="SKU-1", name="Widget", price_cents=1))

        with pytest.raises(SkuAlreadyExistsError):
            products.create(NewProduct(sku="SKU-1", name="Other", price_cents=2))

    def test_missing_product(self, products: ProductRepository) -> None:
        """Test get and delete of a missing product are not found."""
        with pytest.raises(ProductNotFoundError):
            products.get_by_id(ProductId(uuid4()))
        with pytest.raises(ProductNotFoundError):
            products.delete(ProductId(uuid4()))

    def test_update_missing(self, products: ProductRepository) -> None:
        """Test updating a missing product is not found."""
        with pytest.raises(ProductNotFoundError):
            products.update(ProductId(uuid4()), ProductChanges(price_cents=1))

    def test_price_beyond_column_range_is_unexpected(self, products: ProductRepository) -> None:
        """Test a driver overflow leaves the adapter as UnexpectedError, not a raw error."""
        with pytest.raises(UnexpectedError):
            products.create(NewProduct(sku="SKU-1", name="Widget", price_cents=10**20))

        assert products.list_all() == []


class TestOrderRepository:
    """Test suite for OrderRepository."""

    def test_create_and_get(self, users: UserRepository, orders: OrderRepository) -> None:
        """Test an order round-trips with its status."""
        user = users.create(NewUser(email="a@x.io", name="A"))

        created = orders.create(
            NewOrder(user_id=user.id, status=OrderStatus.PAID, total_cents=1000)
        )
        fetched = orders.get_by_id(created.id)

        assert fetched.user_id == user.id
        assert fetched.status is OrderStatus.PAID
        assert fetched.total_cents == 1000

    def test_foreign_key_violation_is_validation(self, orders: OrderRepository) -> None:
        """Test inserting an order for an unknown user is a validation error."""
        missing = UserId(uuid4())

        with pytest.raises(OrderUserNotFoundError) as exc_info:
            orders.create(NewOrder(user_id=missing, status=OrderStatus.PENDING, total_cents=1))

        assert exc_info.value.value == str(missing)
        assert orders.list_all() == []

    def test_update_status(self, users: UserRepository, orders: OrderRepository) -> None:
        """Test status updates leave the total, id and created_at alone."""
        user = users.create(NewUser(email="a@x.io", name="A"))
        created = orders.create(
            NewOrder(user_id=user.id, status=OrderStatus.PENDING, total_cents=10)
        )

        updated = orders.update(created.id, OrderChanges(status=OrderStatus.SHIPPED))

        assert updated.status is OrderStatus.SHIPPED
        assert updated.total_cents == 10
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at

    def test_update_missing(self, orders: OrderRepository) -> None:
        """Test updating a missing order is not found."""
        with pytest.raises(OrderNotFoundError):
            orders.update(OrderId(uuid4()), OrderChanges(total_cents=5))

    def test_unknown_stored_status_is_unexpected(
        self, db_session: Session, users: UserRepository, orders: OrderRepository
    ) -> None:
        """Test a row whose status is outside OrderStatus is reported as a storage failure."""
        user = users.create(NewUser(email="a@x.io", name="A"))
        created = orders.create(
            NewOrder(user_id=user.id, status=OrderStatus.PENDING, total_cents=10)
        )
        db_session.execute(
            update(OrderORM).where(OrderORM.id == created.id.value).values(status="lost")
        )
        db_session.commit()
        db_session.expire_all()

        with pytest.raises(UnexpectedError):
            orders.get_by_id(created.id)
        with pytest.raises(UnexpectedError):
            orders.list_all()

    def test_delete_missing(self, orders: OrderRepository) -> None:
        """Test deleting a missing order is not found."""
        with pytest.raises(OrderNotFoundError):
            orders.delete(OrderId(uuid4()))
