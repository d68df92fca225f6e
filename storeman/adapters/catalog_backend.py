"""CatalogBackend implementation for Storeman."""

from storeman.exceptions import CatalogError
from storeman.protocols import (
    CatalogBackend,
    PricingInfo,
    ProductInfo,
)
from storeman.service import CatalogService


class StoremanCatalogBackend:
    """
    CatalogBackend implementation using Storeman's catalog service.

    Lets cart and checkout code read resolved prices and availability
    without touching the models.
    """

    def get_product(self, tenant: str, slug: str) -> ProductInfo | None:
        """Return product by tenant subdomain and slug."""
        try:
            product = CatalogService.get(tenant, slug)
        except CatalogError:
            return None
        if not product:
            return None

        return ProductInfo(
            tenant=product.tenant.subdomain,
            slug=product.slug,
            name=product.name,
            product_type=product.product_type,
            sku=product.sku or None,
            category=product.category.slug if product.category_id else None,
            pricing=product.get_pricing(),
            stock=product.get_stock(),
            is_active=product.is_active,
            tags=list(product.tags.names()),
        )

    def get_pricing(self, tenant: str, slug: str) -> PricingInfo | None:
        """Return resolved pricing."""
        try:
            return CatalogService.pricing(tenant, slug)
        except CatalogError:
            return None

    def is_out_of_stock(self, tenant: str, slug: str) -> bool:
        """Unknown and inactive products count as out of stock."""
        product = CatalogService.get(tenant, slug)
        if product is None or not product.is_active:
            return True
        return product.is_out_of_stock


# Verify implementation at import time
if not isinstance(StoremanCatalogBackend(), CatalogBackend):
    raise TypeError("StoremanCatalogBackend does not implement CatalogBackend protocol")
