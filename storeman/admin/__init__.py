"""Storeman admin."""

from storeman.admin.category import CategoryAdmin
from storeman.admin.product import ProductAdmin, ProductVariantInline
from storeman.admin.tenant import TenantAdmin

__all__ = [
    "CategoryAdmin",
    "ProductAdmin",
    "ProductVariantInline",
    "TenantAdmin",
]
