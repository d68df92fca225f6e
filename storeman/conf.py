"""
Storeman configuration.

Usage in settings.py:
    STOREMAN = {
        "LOW_STOCK_THRESHOLD": 5,
        "DEFAULT_CURRENCY": "USD",
        "PLATFORM_DOMAIN": "aluro.shop",
        "MAX_CATEGORY_DEPTH": 10,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class StoremanSettings:
    """Storeman configuration settings."""

    LOW_STOCK_THRESHOLD: int = 5
    DEFAULT_CURRENCY: str = "USD"
    PLATFORM_DOMAIN: str = "localhost"
    MAX_CATEGORY_DEPTH: int = 10


def get_storeman_settings() -> StoremanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "STOREMAN", {})
    return StoremanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_storeman_settings(), name)


storeman_settings = _LazySettings()
