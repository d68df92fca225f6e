"""Pytest fixtures for Storeman tests."""

from decimal import Decimal

import pytest

from storeman.models import Category, Product, ProductType, ProductVariant, Tenant


@pytest.fixture
def tenant(db):
    """Create a test tenant."""
    return Tenant.objects.create(subdomain="acme", name="Acme Outfitters", currency="USD")


@pytest.fixture
def other_tenant(db):
    """Create a second tenant to check isolation."""
    return Tenant.objects.create(subdomain="globex", name="Globex Goods", currency="EUR")


@pytest.fixture
def clothing(db, tenant):
    """Create a root category."""
    return Category.objects.create(tenant=tenant, slug="clothing", name="Clothing")


@pytest.fixture
def shirts(db, tenant, clothing):
    """Create a subcategory."""
    return Category.objects.create(tenant=tenant, slug="shirts", name="Shirts", parent=clothing)


@pytest.fixture
def mug(db, tenant):
    """Create a single product with a compare price."""
    return Product.objects.create(
        tenant=tenant,
        slug="enamel-mug",
        name="Enamel Mug",
        product_type=ProductType.SINGLE,
        price=Decimal("20.00"),
        compare_price=Decimal("25.00"),
        track_inventory=True,
        inventory_quantity=3,
    )


@pytest.fixture
def ebook(db, tenant):
    """Create a digital product that does not track inventory."""
    return Product.objects.create(
        tenant=tenant,
        slug="style-guide",
        name="Style Guide (PDF)",
        product_type=ProductType.DIGITAL,
        price=Decimal("9.00"),
        track_inventory=False,
        inventory_quantity=0,
    )


@pytest.fixture
def shirt(db, tenant, shirts):
    """Create a variable product with two active variants and one inactive."""
    product = Product.objects.create(
        tenant=tenant,
        slug="linen-shirt",
        name="Linen Shirt",
        product_type=ProductType.VARIABLE,
        price=Decimal("99.00"),  # ignored for variable products
        inventory_quantity=500,  # ignored for variable products
        category=shirts,
    )
    product.tags.add("linen", "summer")
    ProductVariant.objects.create(
        product=product,
        title="S",
        price=Decimal("10.00"),
        inventory_quantity=0,
        sort_order=1,
    )
    ProductVariant.objects.create(
        product=product,
        title="M",
        price=Decimal("15.00"),
        compare_price=Decimal("18.00"),
        inventory_quantity=5,
        sort_order=2,
    )
    ProductVariant.objects.create(
        product=product,
        title="XL (discontinued)",
        price=Decimal("5.00"),
        inventory_quantity=100,
        is_active=False,
        sort_order=3,
    )
    return product
