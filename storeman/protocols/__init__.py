"""Storeman protocols."""

from storeman.protocols.catalog import (
    CatalogBackend,
    PriceRange,
    PricingInfo,
    ProductInfo,
    StockInfo,
)
from storeman.protocols.records import ProductRecord, VariantRecord

__all__ = [
    "CatalogBackend",
    "PriceRange",
    "PricingInfo",
    "ProductInfo",
    "ProductRecord",
    "StockInfo",
    "VariantRecord",
]
