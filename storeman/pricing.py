"""
Derived price and stock resolution.

One definition of "what does this product cost" and "can it be bought",
shared by storefront views, the admin and the service layer.

A product is either variable (price, compare price and stock come from its
active variants) or not (the product's own fields are authoritative and
any attached variants are ignored).

Every function here is pure: records are only read, nothing is rounded,
and malformed values (e.g. negative prices) propagate arithmetically
instead of raising. Validation belongs to whatever writes the rows.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from storeman.choices import ProductType, StockStatus
from storeman.protocols.catalog import PriceRange, PricingInfo, StockInfo
from storeman.protocols.records import ProductRecord, VariantRecord

ZERO = Decimal("0")


def is_variable(product: ProductRecord) -> bool:
    return product.product_type == ProductType.VARIABLE


def active_variants(variants: Iterable[VariantRecord] | None) -> list[VariantRecord]:
    """Variants that currently count for price and stock aggregation."""
    if variants is None:
        return []
    return [v for v in variants if v.is_active]


def _priced(variants: list[VariantRecord]) -> list:
    return [v.price for v in variants if v.price is not None and v.price > 0]


def _compare_priced(variants: list[VariantRecord]) -> list:
    return [
        v.compare_price
        for v in variants
        if v.compare_price is not None and v.compare_price > 0
    ]


def _suppress_compare_price(compare_price, price):
    """A compare price is only shown when strictly above the price."""
    if compare_price is not None and compare_price > price:
        return compare_price
    return None


# ======================================================================
# PRICE
# ======================================================================


def resolve_effective_price(product: ProductRecord, variants=None) -> Decimal:
    """
    Price to display or charge as the "from" price.

    Variable products with no active, validly priced variant resolve to 0.
    """
    if not is_variable(product):
        return product.price

    prices = _priced(active_variants(variants))
    if not prices:
        return ZERO
    return min(prices)


def resolve_effective_compare_price(product: ProductRecord, variants=None) -> Decimal | None:
    """Struck-through "was" price, or None when not above the effective price."""
    active = active_variants(variants)
    price = resolve_effective_price(product, active)

    if not is_variable(product):
        return _suppress_compare_price(product.compare_price, price)

    compare_prices = _compare_priced(active)
    if not compare_prices:
        return None
    return _suppress_compare_price(min(compare_prices), price)


def resolve_price_range(product: ProductRecord, variants=None) -> PriceRange | None:
    """Min/max variant price, only when a variable product spans several prices."""
    if not is_variable(product):
        return None

    prices = _priced(active_variants(variants))
    if not prices:
        return None

    low, high = min(prices), max(prices)
    if low == high:
        return None
    return PriceRange(min=low, max=high)


def discount_percentage(price, compare_price) -> int:
    """Whole-number discount implied by a compare price, 0 when there is none."""
    if compare_price is None or compare_price <= price or compare_price <= 0:
        return 0
    compare = Decimal(str(compare_price))
    ratio = (compare - Decimal(str(price))) / compare * 100
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def resolve_pricing(product: ProductRecord, variants=None) -> PricingInfo:
    """All price results for one product in a single pass over its variants."""
    variants = list(variants) if variants is not None else []
    price = resolve_effective_price(product, variants)
    compare_price = resolve_effective_compare_price(product, variants)
    return PricingInfo(
        effective_price=price,
        effective_compare_price=compare_price,
        price_range=resolve_price_range(product, variants),
        discount_percent=discount_percentage(price, compare_price),
    )


def resolve_variant_price(product: ProductRecord, variant: VariantRecord | None) -> Decimal:
    """
    Unit price for a selected variant.

    Unpriced variants fall back to the product's own price. Without a
    variant, or for non-variable products, the product price is used.
    """
    if variant is not None and is_variable(product) and variant.price:
        return variant.price
    return product.price


def resolve_variant_compare_price(product: ProductRecord, variant: VariantRecord | None) -> Decimal | None:
    price = resolve_variant_price(product, variant)
    compare_price = product.compare_price
    if variant is not None and is_variable(product) and variant.compare_price:
        compare_price = variant.compare_price
    return _suppress_compare_price(compare_price, price)


# ======================================================================
# STOCK
# ======================================================================


def total_stock(product: ProductRecord, variants=None) -> int:
    """Units on hand: sum over active variants, or the product's own count."""
    if is_variable(product):
        return sum(v.inventory_quantity or 0 for v in active_variants(variants))
    return product.inventory_quantity or 0


def resolve_out_of_stock(product: ProductRecord, variants=None) -> bool:
    """
    True when the product cannot be purchased.

    Variable: no active variants, or their summed quantity is <= 0.
    Otherwise: inventory is tracked and the quantity is <= 0.
    """
    if is_variable(product):
        active = active_variants(variants)
        if not active:
            return True
        return sum(v.inventory_quantity or 0 for v in active) <= 0

    if not product.track_inventory:
        return False
    return (product.inventory_quantity or 0) <= 0


def resolve_stock(product: ProductRecord, variants=None, low_stock_threshold: int | None = None) -> StockInfo:
    """Stock summary with a low-stock flag layered on the raw quantity."""
    if low_stock_threshold is None:
        from storeman.conf import storeman_settings

        low_stock_threshold = storeman_settings.LOW_STOCK_THRESHOLD

    variants = list(variants) if variants is not None else []
    variant_count = len(active_variants(variants)) if is_variable(product) else 0
    total = total_stock(product, variants)
    out = resolve_out_of_stock(product, variants)

    if not is_variable(product) and not product.track_inventory:
        status = StockStatus.UNTRACKED
    elif out:
        status = StockStatus.OUT
    elif total <= low_stock_threshold:
        status = StockStatus.LOW
    else:
        status = StockStatus.GOOD

    return StockInfo(
        total=total,
        status=status.value,
        is_low_stock=status == StockStatus.LOW,
        is_out_of_stock=out,
        variant_count=variant_count,
    )


def default_variant(variants) -> VariantRecord | None:
    """Variant to preselect: first active one in stock, else first active one."""
    active = active_variants(variants)
    for variant in active:
        if (variant.inventory_quantity or 0) > 0:
            return variant
    return active[0] if active else None
