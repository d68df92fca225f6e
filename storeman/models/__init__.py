"""Storeman models."""

from storeman.choices import ProductType
from storeman.models.category import Category
from storeman.models.product import Product
from storeman.models.product_variant import ProductVariant
from storeman.models.tenant import Tenant

__all__ = [
    "Category",
    "Product",
    "ProductType",
    "ProductVariant",
    "Tenant",
]
