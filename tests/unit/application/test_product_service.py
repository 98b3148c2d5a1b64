"""Tests for ProductService."""

from uuid import uuid4

import pytest

from storefront.application.catalog import NewProduct, ProductChanges, ProductService
from storefront.domain.catalog.exceptions import ProductNotFoundError, SkuAlreadyExistsError
from storefront.domain.common.exceptions import ValidationError
from storefront.domain.common.value_objects.ids import ProductId


class TestProductService:
    @pytest.fixture
    def service(self, product_repository):
        return ProductService(product_repository)

    def test_create(self, service):
        product = service.create(NewProduct(sku="SKU-1", name="Widget", price_cents=500))
        assert product.price_cents == 500

    @pytest.mark.parametrize(
        ("new_product", "field"),
        [
            (NewProduct(sku="", name="Widget", price_cents=1), "sku"),
            (NewProduct(sku="SKU-1", name="", price_cents=1), "name"),
            (NewProduct(sku="SKU-1", name="Widget", price_cents=-5), "price_cents"),
        ],
    )
    def test_invalid_input_never_reaches_storage(
        self, service, product_repository, new_product, field
    ):
        with pytest.raises(ValidationError) as exc_info:
            service.create(new_product)
        assert exc_info.value.field == field
        assert product_repository.calls == []

    def test_duplicate_sku(self, service):
        service.create(NewProduct(sku="SKU-1", name="Widget", price_cents=1))
        with pytest.raises(SkuAlreadyExistsError):
            service.create(NewProduct(sku="SKU-1", name="Other", price_cents=2))

    def test_update_price(self, service):
        product = service.create(NewProduct(sku="SKU-1", name="Widget", price_cents=1))
        updated = service.update(product.id, ProductChanges(price_cents=2))
        assert updated.price_cents == 2
        assert updated.sku == "SKU-1"

    def test_update_negative_price_rejected(self, service, product_repository):
        product = service.create(NewProduct(sku="SKU-1", name="Widget", price_cents=1))
        with pytest.raises(ValidationError):
            service.update(product.id, ProductChanges(price_cents=-1))
        assert "update" not in product_repository.calls

    def test_delete_missing_product(self, service):
        with pytest.raises(ProductNotFoundError):
            service.delete(ProductId(uuid4()))

    def test_price_beyond_storage_range_rejected(self, service, product_repository):
        with pytest.raises(ValidationError) as exc_info:
            service.create(NewProduct(sku="SKU-1", name="Widget", price_cents=10**20))
        assert exc_info.value.field == "price_cents"
        assert product_repository.calls == []

    def test_update_missing_product(self, service):
        with pytest.raises(ProductNotFoundError):
            service.update(ProductId(uuid4()), ProductChanges(name="Renamed"))
