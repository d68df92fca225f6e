"""Tests for the CatalogBackend adapter."""

from decimal import Decimal

import pytest

from storeman.adapters import StoremanCatalogBackend
from storeman.protocols import CatalogBackend, PriceRange


pytestmark = pytest.mark.django_db


@pytest.fixture
def backend():
    return StoremanCatalogBackend()


class TestStoremanCatalogBackend:
    def test_implements_protocol(self, backend):
        assert isinstance(backend, CatalogBackend)

    def test_get_product(self, backend, shirt):
        info = backend.get_product("acme", "linen-shirt")

        assert info.tenant == "acme"
        assert info.slug == "linen-shirt"
        assert info.product_type == "variable"
        assert info.category == "shirts"
        assert info.sku is None
        assert info.pricing.effective_price == Decimal("10.00")
        assert info.pricing.price_range == PriceRange(Decimal("10.00"), Decimal("15.00"))
        assert info.stock.total == 5
        assert sorted(info.tags) == ["linen", "summer"]

    def test_get_product_missing(self, backend, tenant):
        assert backend.get_product("acme", "missing") is None
        assert backend.get_product("nobody", "linen-shirt") is None

    def test_get_pricing(self, backend, mug):
        pricing = backend.get_pricing("acme", "enamel-mug")
        assert pricing.effective_price == Decimal("20.00")
        assert pricing.effective_compare_price == Decimal("25.00")

    def test_get_pricing_missing(self, backend, tenant):
        assert backend.get_pricing("acme", "missing") is None

    def test_is_out_of_stock(self, backend, mug, shirt):
        assert backend.is_out_of_stock("acme", "enamel-mug") is False
        assert backend.is_out_of_stock("acme", "missing") is True

        shirt.variants.update(inventory_quantity=0)
        assert backend.is_out_of_stock("acme", "linen-shirt") is True

    def test_inactive_product_not_purchasable(self, backend, mug):
        mug.is_active = False
        mug.save()

        assert backend.is_out_of_stock("acme", "enamel-mug") is True
        assert backend.get_pricing("acme", "enamel-mug") is None
        assert backend.get_product("acme", "enamel-mug").is_active is False
