"""
Django Storeman - Tenant storefront catalog.

Usage:
    from storeman import CatalogService, CatalogError

    tenant = CatalogService.get_tenant("acme")
    pricing = CatalogService.pricing(tenant, "linen-shirt")
    pricing.effective_price, pricing.price_range
"""


def __getattr__(name):
    if name == "CatalogService":
        from storeman.service import CatalogService

        return CatalogService
    elif name == "CatalogError":
        from storeman.exceptions import CatalogError

        return CatalogError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["CatalogService", "CatalogError"]
__version__ = "0.1.0"
