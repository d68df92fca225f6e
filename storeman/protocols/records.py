"""
Record protocols consumed by storeman.pricing.

The resolvers only read attributes, so anything shaped like these
protocols works: model instances, dataclasses, or SimpleNamespace
objects built from a JSON payload.
"""

from decimal import Decimal
from typing import Protocol


class VariantRecord(Protocol):
    price: Decimal | None
    compare_price: Decimal | None
    inventory_quantity: int
    is_active: bool


class ProductRecord(Protocol):
    product_type: str
    price: Decimal
    compare_price: Decimal | None
    track_inventory: bool
    inventory_quantity: int
