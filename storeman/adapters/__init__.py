"""Storeman adapters."""

from storeman.adapters.catalog_backend import StoremanCatalogBackend

__all__ = [
    "StoremanCatalogBackend",
]
