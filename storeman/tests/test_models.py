"""Tests for Storeman models."""

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.test import override_settings

from storeman.models import Category, Product, ProductType, ProductVariant, Tenant
from storeman.protocols import PriceRange
from storeman.signals import price_changed, product_created


pytestmark = pytest.mark.django_db


class TestTenant:
    """Tests for Tenant model."""

    def test_defaults_from_settings(self, db):
        tenant = Tenant.objects.create(subdomain="shop", name="Shop")
        assert tenant.currency == "USD"
        assert tenant.low_stock_threshold == 5
        assert tenant.is_active is True

    @override_settings(STOREMAN={"DEFAULT_CURRENCY": "CRC", "LOW_STOCK_THRESHOLD": 2})
    def test_defaults_follow_overridden_settings(self, db):
        tenant = Tenant.objects.create(subdomain="tico", name="Tienda Tica")
        assert tenant.currency == "CRC"
        assert tenant.low_stock_threshold == 2

    def test_currency_uppercased(self, db):
        tenant = Tenant.objects.create(subdomain="euro", name="Euro Shop", currency="eur")
        assert tenant.currency == "EUR"

    def test_queryset_active(self, db):
        Tenant.objects.create(subdomain="live", name="Live")
        Tenant.objects.create(subdomain="closed", name="Closed", is_active=False)

        assert list(Tenant.objects.active().values_list("subdomain", flat=True)) == ["live"]


class TestCategory:
    """Tests for Category model."""

    def test_full_path_and_depth(self, clothing, shirts):
        assert shirts.full_path == "Clothing > Shirts"
        assert shirts.depth == 1
        assert clothing.depth == 0

    def test_ancestors_and_descendants(self, tenant, clothing, shirts):
        linen = Category.objects.create(tenant=tenant, slug="linen", name="Linen", parent=shirts)

        assert linen.get_ancestors() == [clothing, shirts]
        assert set(clothing.get_descendants()) == {shirts, linen}
        assert clothing.get_descendants(max_depth=1) == [shirts]

    def test_slug_unique_per_tenant(self, tenant, other_tenant, clothing):
        Category.objects.create(tenant=other_tenant, slug="clothing", name="Clothing")

        with pytest.raises(ValidationError):
            Category.objects.create(tenant=tenant, slug="clothing", name="Clothing again")

    def test_circular_parent_rejected(self, clothing, shirts):
        clothing.parent = Category.objects.get(pk=shirts.pk)
        with pytest.raises(ValidationError):
            clothing.save()

    def test_parent_from_other_tenant_rejected(self, other_tenant, clothing):
        with pytest.raises(ValidationError):
            Category.objects.create(tenant=other_tenant, slug="hats", name="Hats", parent=clothing)

    @override_settings(STOREMAN={"MAX_CATEGORY_DEPTH": 2})
    def test_max_depth(self, tenant, clothing, shirts):
        with pytest.raises(ValidationError):
            Category.objects.create(tenant=tenant, slug="deep", name="Deep", parent=shirts)


class TestProduct:
    """Tests for Product model."""

    def test_create_product(self, tenant):
        product = Product.objects.create(tenant=tenant, slug="tote", name="Canvas Tote", price=Decimal("12.50"))
        assert product.product_type == ProductType.SINGLE
        assert product.track_inventory is True
        assert product.inventory_quantity == 0
        assert product.is_active is True

    def test_slug_unique_per_tenant(self, tenant, other_tenant, mug):
        Product.objects.create(tenant=other_tenant, slug="enamel-mug", name="Mug")

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Product.objects.create(tenant=tenant, slug="enamel-mug", name="Mug copy")

    def test_single_resolved_properties(self, mug):
        assert mug.effective_price == Decimal("20.00")
        assert mug.effective_compare_price == Decimal("25.00")
        assert mug.price_range is None
        assert mug.is_out_of_stock is False
        assert mug.is_variable is False

    def test_variable_resolved_properties(self, shirt):
        assert shirt.effective_price == Decimal("10.00")
        assert shirt.effective_compare_price == Decimal("18.00")
        assert shirt.price_range == PriceRange(Decimal("10.00"), Decimal("15.00"))
        assert shirt.is_out_of_stock is False

    def test_variable_out_of_stock_after_selling_out(self, shirt):
        shirt.variants.filter(is_active=True).update(inventory_quantity=0)
        assert shirt.is_out_of_stock is True

    def test_untracked_digital_product(self, ebook):
        assert ebook.is_out_of_stock is False
        assert ebook.get_stock().status == "untracked"

    def test_get_stock_uses_tenant_threshold(self, tenant, mug):
        assert mug.get_stock().is_low_stock is True

        tenant.low_stock_threshold = 2
        tenant.save()
        mug.refresh_from_db()

        assert mug.get_stock().is_low_stock is False

    def test_queryset_filters(self, tenant, other_tenant, mug, shirt):
        Product.objects.create(tenant=tenant, slug="hidden", name="Hidden", is_active=False)
        Product.objects.create(tenant=other_tenant, slug="foreign", name="Foreign", is_featured=True)
        mug.is_featured = True
        mug.save()

        assert set(Product.objects.for_tenant(tenant).active().values_list("slug", flat=True)) == {
            "enamel-mug",
            "linen-shirt",
        }
        assert list(Product.objects.for_tenant("acme").featured()) == [mug]

    def test_history_tracked(self, mug):
        mug.price = Decimal("22.00")
        mug.save()
        assert mug.history.count() == 2

    def test_product_created_signal(self, tenant):
        received = []

        def handler(sender, instance, slug, **kwargs):
            received.append(slug)

        product_created.connect(handler)
        try:
            product = Product.objects.create(tenant=tenant, slug="new", name="New")
            product.name = "Renamed"
            product.save()
        finally:
            product_created.disconnect(handler)

        assert received == ["new"]

    def test_price_changed_signal(self, mug):
        received = []

        def handler(sender, product, variant, old_price, new_price, **kwargs):
            received.append((product.pk, variant, old_price, new_price))

        price_changed.connect(handler)
        try:
            mug.name = "Enamel Mug (blue)"
            mug.save()
            mug.price = Decimal("18.00")
            mug.save()
        finally:
            price_changed.disconnect(handler)

        assert received == [(mug.pk, None, Decimal("20.00"), Decimal("18.00"))]


class TestProductVariant:
    """Tests for ProductVariant model."""

    def test_cascade_delete(self, shirt):
        assert ProductVariant.objects.filter(product=shirt).count() == 3
        shirt.delete()
        assert ProductVariant.objects.count() == 0

    def test_defaults(self, shirt):
        variant = ProductVariant.objects.create(product=shirt, title="L")
        assert variant.price is None
        assert variant.inventory_quantity == 0
        assert variant.is_active is True

    def test_attribute_label(self, shirt):
        variant = ProductVariant.objects.create(
            product=shirt,
            title="M / Blue",
            attributes=[{"name": "Size", "value": "M"}, {"name": "Color", "value": "Blue"}],
        )
        assert variant.attribute_label == "Size: M, Color: Blue"

    def test_price_changed_signal(self, shirt):
        variant = shirt.variants.get(title="S")
        received = []

        def handler(sender, product, variant, old_price, new_price, **kwargs):
            received.append((product.pk, variant.title, old_price, new_price))

        price_changed.connect(handler)
        try:
            variant.inventory_quantity = 7
            variant.save()
            variant.price = Decimal("11.00")
            variant.save()
        finally:
            price_changed.disconnect(handler)

        assert received == [(shirt.pk, "S", Decimal("10.00"), Decimal("11.00"))]

    def test_variant_changes_move_product_price(self, shirt):
        cheapest = shirt.variants.get(title="S")
        cheapest.is_active = False
        cheapest.save()

        shirt = Product.objects.get(pk=shirt.pk)
        assert shirt.effective_price == Decimal("15.00")
        assert shirt.price_range is None

    def test_history_tracked(self, shirt):
        variant = shirt.variants.get(title="M")
        variant.price = Decimal("16.00")
        variant.save()
        assert variant.history.count() == 2
