"""Catalog protocols."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class PriceRange:
    """Lowest and highest price of a variable product's variants."""

    min: Decimal
    max: Decimal


@dataclass(frozen=True)
class PricingInfo:
    """Resolved price information.

    - effective_price: "from" price to display/charge
    - effective_compare_price: struck-through "was" price, None when suppressed
    - price_range: only set for variable products spanning several prices
    """

    effective_price: Decimal
    effective_compare_price: Decimal | None = None
    price_range: PriceRange | None = None
    discount_percent: int = 0

    @property
    def has_discount(self) -> bool:
        return self.effective_compare_price is not None


@dataclass(frozen=True)
class StockInfo:
    """Resolved stock information.

    status is one of "good", "low", "out" or "untracked".
    """

    total: int
    status: str
    is_low_stock: bool
    is_out_of_stock: bool
    variant_count: int = 0


@dataclass(frozen=True)
class ProductInfo:
    """Product information as seen by cart and checkout code."""

    tenant: str
    slug: str
    name: str
    product_type: str
    sku: str | None
    category: str | None
    pricing: PricingInfo
    stock: StockInfo
    is_active: bool = True
    tags: list[str] | None = None


@runtime_checkable
class CatalogBackend(Protocol):
    """Interface for storefront catalog queries."""

    def get_product(self, tenant: str, slug: str) -> ProductInfo | None:
        """Return product by tenant subdomain and slug."""
        ...

    def get_pricing(self, tenant: str, slug: str) -> PricingInfo | None:
        """Return resolved pricing."""
        ...

    def is_out_of_stock(self, tenant: str, slug: str) -> bool:
        """Return True when the product cannot be purchased."""
        ...
