"""Storeman exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "TENANT_NOT_FOUND": "Tenant not found",
    "PRODUCT_NOT_FOUND": "Product not found",
    "VARIANT_NOT_FOUND": "Variant not found",
    "VARIANT_INACTIVE": "Variant is inactive",
    "VARIANT_REQUIRED": "A variant must be selected",
    "INVALID_QUANTITY": "Invalid quantity",
    "OUT_OF_STOCK": "Not enough stock",
}


class CatalogError(Exception):
    """
    Structured exception for catalog operations.

    Usage:
        try:
            pricing = CatalogService.pricing(tenant, "linen-shirt")
        except CatalogError as e:
            if e.code == "PRODUCT_NOT_FOUND":
                print(f"Product {e.slug} does not exist")
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    @property
    def slug(self) -> str | None:
        return self.data.get("slug")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
