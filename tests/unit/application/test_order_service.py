"""Tests for OrderService."""

from uuid import uuid4

import pytest

from storefront.application.identity import NewUser
from storefront.application.ordering import NewOrder, OrderChanges, OrderService
from storefront.domain.common.exceptions import ErrorKind, ValidationError
from storefront.domain.common.value_objects.ids import OrderId, UserId
from storefront.domain.ordering.entities.order import OrderStatus
from storefront.domain.ordering.exceptions import OrderNotFoundError, OrderUserNotFoundError


class TestOrderService:
    @pytest.fixture
    def service(self, order_repository, user_repository):
        return OrderService(order_repository, user_repository)

    @pytest.fixture
    def user_id(self, user_repository):
        return user_repository.create(NewUser(email="a@x.io", name="A")).id

    def test_create_for_existing_user(self, service, user_id):
        order = service.create(NewOrder(user_id=user_id, status="pending", total_cents=1000))
        assert order.user_id == user_id
        assert order.status is OrderStatus.PENDING

    def test_missing_user_is_validation_error(self, service, order_repository):
        missing = UserId(uuid4())
        with pytest.raises(OrderUserNotFoundError) as exc_info:
            service.create(NewOrder(user_id=missing, status="pending", total_cents=1))
        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.details == {"field": "user_id", "value": str(missing)}
        assert order_repository.calls == []

    def test_unknown_status_checked_before_user_lookup(self, service, user_repository):
        user_repository.calls.clear()
        with pytest.raises(ValidationError) as exc_info:
            service.create(NewOrder(user_id=UserId(uuid4()), status="lost", total_cents=1))
        assert exc_info.value.field == "status"
        assert user_repository.calls == []

    def test_negative_total_rejected(self, service, user_id):
        with pytest.raises(ValidationError) as exc_info:
            service.create(NewOrder(user_id=user_id, status="paid", total_cents=-1))
        assert exc_info.value.field == "total_cents"

    def test_update_status(self, service, user_id):
        order = service.create(NewOrder(user_id=user_id, status="pending", total_cents=1))
        updated = service.update(order.id, OrderChanges(status="shipped"))
        assert updated.status is OrderStatus.SHIPPED
        assert updated.total_cents == 1
        assert updated.updated_at > order.updated_at

    def test_update_unknown_status_rejected(self, service, user_id, order_repository):
        order = service.create(NewOrder(user_id=user_id, status="pending", total_cents=1))
        with pytest.raises(ValidationError):
            service.update(order.id, OrderChanges(status="lost"))
        assert "update" not in order_repository.calls

    def test_update_missing_order(self, service):
        with pytest.raises(OrderNotFoundError):
            service.update(OrderId(uuid4()), OrderChanges(total_cents=5))

    def test_total_beyond_storage_range_rejected(self, service, user_id, order_repository):
        with pytest.raises(ValidationError) as exc_info:
            service.create(NewOrder(user_id=user_id, status="paid", total_cents=2**63))
        assert exc_info.value.field == "total_cents"
        assert order_repository.calls == []
