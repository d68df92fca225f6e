"""
Storeman public API.

TENANT:
    CatalogService.get_tenant(subdomain)      - Active tenant by subdomain
    CatalogService.subdomain_from_host(host)  - Tenant label from a Host header

CORE:
    CatalogService.get(tenant, slug)          - Get product(s)
    CatalogService.pricing(tenant, slug)      - Resolved price / compare price / range
    CatalogService.stock(tenant, slug)        - Resolved stock summary
    CatalogService.line_price(...)            - Total for a quantity of a product or variant

CONVENIENCE:
    CatalogService.search(...)                - Search a tenant's products
    CatalogService.low_stock(tenant)          - Products at or under the low stock threshold
"""

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from django.db import models

from storeman import pricing as resolvers
from storeman.choices import ProductType
from storeman.exceptions import CatalogError

if TYPE_CHECKING:
    from storeman.models import Product, Tenant
    from storeman.protocols import PricingInfo, StockInfo

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Storeman public API.

    Every product lookup is scoped to a tenant, given either as a Tenant
    instance or as its subdomain.
    """

    # ======================================================================
    # TENANT API
    # ======================================================================

    @classmethod
    def get_tenant(cls, subdomain: str) -> "Tenant":
        """
        Return the active tenant for a subdomain.

        Raises:
            CatalogError: TENANT_NOT_FOUND if missing or inactive
        """
        from storeman.models import Tenant

        tenant = Tenant.objects.active().filter(subdomain=(subdomain or "").lower()).first()
        if tenant is None:
            logger.debug("No active tenant for subdomain %r", subdomain)
            raise CatalogError("TENANT_NOT_FOUND", subdomain=subdomain)
        return tenant

    @classmethod
    def subdomain_from_host(cls, host: str) -> str | None:
        """
        Extract the tenant subdomain from a host name.

        "acme.example.com" -> "acme" (PLATFORM_DOMAIN = "example.com")
        "acme.localhost:3000" -> "acme"
        "example.com", "www.example.com", "other.org" -> None
        """
        from storeman.conf import storeman_settings

        if not host:
            return None
        hostname = host.split(":", 1)[0].strip().lower().rstrip(".")
        platform = storeman_settings.PLATFORM_DOMAIN.lower()

        for base in (platform, "localhost"):
            suffix = f".{base}"
            if hostname.endswith(suffix):
                label = hostname[: -len(suffix)]
                if label and "." not in label and label != "www":
                    return label
                return None
        return None

    @classmethod
    def _resolve_tenant(cls, tenant: "Tenant | str") -> "Tenant":
        if isinstance(tenant, str):
            return cls.get_tenant(tenant)
        return tenant

    # ======================================================================
    # CORE API
    # ======================================================================

    @classmethod
    def get(cls, tenant: "Tenant | str", slug: str | list[str]) -> "Product | dict[str, Product] | None":
        """
        Get product(s) of a tenant by slug, variants prefetched.

        Args:
            tenant: Tenant instance or subdomain
            slug: Single slug or list of slugs

        Returns:
            Product | None (for single slug)
            dict[slug, Product] (for list)
        """
        from storeman.models import Product

        qs = Product.objects.for_tenant(tenant).with_variants().select_related("tenant")
        if isinstance(slug, list):
            return {p.slug: p for p in qs.filter(slug__in=slug)}
        return qs.filter(slug=slug).first()

    @classmethod
    def _get_or_raise(cls, tenant: "Tenant | str", slug: str, only_active: bool = True) -> "Product":
        product = cls.get(tenant, slug)
        if product is None:
            logger.debug("Product %r not found for tenant %r", slug, tenant)
            raise CatalogError("PRODUCT_NOT_FOUND", slug=slug)
        if only_active and not product.is_active:
            logger.debug("Product %r is inactive for tenant %r", slug, tenant)
            raise CatalogError("PRODUCT_NOT_FOUND", slug=slug)
        return product

    @classmethod
    def pricing(cls, tenant: "Tenant | str", slug: str, only_active: bool = True) -> "PricingInfo":
        """
        Resolved pricing for a product.

        Inactive products count as missing unless only_active is False.

        Raises:
            CatalogError: PRODUCT_NOT_FOUND
        """
        return cls._get_or_raise(tenant, slug, only_active).get_pricing()

    @classmethod
    def stock(cls, tenant: "Tenant | str", slug: str, only_active: bool = True) -> "StockInfo":
        """
        Resolved stock for a product, using the tenant's low stock threshold.

        Raises:
            CatalogError: PRODUCT_NOT_FOUND
        """
        return cls._get_or_raise(tenant, slug, only_active).get_stock()

    @classmethod
    def line_price(
        cls,
        tenant: "Tenant | str",
        slug: str,
        variant_id: int | str | None = None,
        qty: int = 1,
    ) -> Decimal:
        """
        Total price for `qty` units of a product or one of its variants.

        Only active products can be priced. Variable products require an
        active variant; variant_id may be given as an int or a numeric string.
        Tracked stock is enforced against the variant's (or product's) own
        quantity.

        Raises:
            CatalogError: PRODUCT_NOT_FOUND, INVALID_QUANTITY, VARIANT_REQUIRED,
                VARIANT_NOT_FOUND, VARIANT_INACTIVE, OUT_OF_STOCK
        """
        if qty <= 0:
            raise CatalogError("INVALID_QUANTITY", slug=slug, qty=qty)

        product = cls._get_or_raise(tenant, slug, only_active=True)

        if product.product_type != ProductType.VARIABLE:
            if product.track_inventory and product.inventory_quantity < qty:
                raise CatalogError("OUT_OF_STOCK", slug=slug, available=product.inventory_quantity)
            return resolvers.resolve_effective_price(product) * qty

        if variant_id is None:
            raise CatalogError("VARIANT_REQUIRED", slug=slug)

        try:
            pk = int(variant_id)
        except (TypeError, ValueError):
            raise CatalogError("VARIANT_NOT_FOUND", slug=slug, variant_id=variant_id) from None

        variant = next((v for v in product.variants.all() if v.pk == pk), None)
        if variant is None:
            raise CatalogError("VARIANT_NOT_FOUND", slug=slug, variant_id=variant_id)
        if not variant.is_active:
            raise CatalogError("VARIANT_INACTIVE", slug=slug, variant_id=variant_id)
        if variant.inventory_quantity < qty:
            raise CatalogError(
                "OUT_OF_STOCK",
                slug=slug,
                variant_id=variant_id,
                available=variant.inventory_quantity,
            )

        return resolvers.resolve_variant_price(product, variant) * qty

    # ======================================================================
    # CONVENIENCE API
    # ======================================================================

    @classmethod
    def search(
        cls,
        tenant: "Tenant | str",
        query: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
        product_type: str | None = None,
        only_active: bool = True,
        in_stock: bool = False,
        limit: int = 20,
    ) -> list["Product"]:
        """
        Search a tenant's products.

        Args:
            tenant: Tenant instance or subdomain
            query: Search term (name, slug or SKU)
            category: Category slug, includes its descendants
            tags: Filter by tags (django-taggit)
            product_type: "single", "variable" or "digital"
            only_active: Only storefront-visible products
            in_stock: Drop products resolved as out of stock
            limit: Maximum results

        Returns:
            List of Product
        """
        from storeman.models import Category, Product

        qs = Product.objects.for_tenant(tenant).with_variants()

        if only_active:
            qs = qs.active()
        if product_type:
            qs = qs.filter(product_type=product_type)
        if query:
            qs = qs.filter(
                models.Q(name__icontains=query)
                | models.Q(slug__icontains=query)
                | models.Q(sku__icontains=query)
            )
        if category:
            categories = Category.objects.filter(slug=category)
            if isinstance(tenant, str):
                categories = categories.filter(tenant__subdomain=tenant)
            else:
                categories = categories.filter(tenant=tenant)
            root = categories.first()
            if root is None:
                return []
            ids = [root.pk] + [c.pk for c in root.get_descendants()]
            qs = qs.filter(category_id__in=ids)
        if tags:
            qs = qs.filter(tags__name__in=tags)

        qs = qs.distinct()

        if not in_stock:
            return list(qs[:limit])

        results = []
        for product in qs:
            if not product.is_out_of_stock:
                results.append(product)
                if len(results) >= limit:
                    break
        return results

    @classmethod
    def low_stock(cls, tenant: "Tenant | str", threshold: int | None = None) -> list["Product"]:
        """Active products whose resolved stock is low (not out)."""
        from storeman.models import Product

        tenant = cls._resolve_tenant(tenant)
        if threshold is None:
            threshold = tenant.low_stock_threshold

        qs = Product.objects.for_tenant(tenant).active().with_variants()
        return [p for p in qs if p.get_stock(threshold).is_low_stock]
