"""
Suggestions module - find alternative products.

Usage:
    from storeman.contrib.suggestions import find_alternatives, find_similar

    alternatives = find_alternatives("acme", "linen-shirt")
    similar = find_similar("acme", "linen-shirt")
"""

from storeman.contrib.suggestions.suggestions import find_alternatives, find_similar

__all__ = ["find_alternatives", "find_similar"]
