"""
Currency formatting for resolved prices.

Presentation only: storeman.pricing never rounds or formats, callers
format at the edge with these helpers. Separators follow the active
Django locale.
"""

from decimal import Decimal

from django.utils.formats import number_format

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "$",
    "AUD": "$",
    "CHF": "Fr",
    "CNY": "¥",
    "SEK": "kr",
    "NZD": "$",
    "MXN": "$",
    "SGD": "$",
    "HKD": "$",
    "NOK": "kr",
    "TRY": "₺",
    "RUB": "₽",
    "INR": "₹",
    "BRL": "R$",
    "ZAR": "R",
    "KRW": "₩",
    "CRC": "₡",
}

# Currencies without minor units
ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW"}


def _currency_code(currency: str | None) -> str:
    if not currency:
        from storeman.conf import storeman_settings

        currency = storeman_settings.DEFAULT_CURRENCY
    return currency.upper()


def currency_symbol(currency: str | None = None) -> str:
    return CURRENCY_SYMBOLS.get(_currency_code(currency), "$")


def format_price(amount, currency: str | None = None) -> str:
    """
    Format an amount as a price string, e.g. "$1,234.50" or "₡5,000.00".

    Args:
        amount: Decimal, int or float
        currency: ISO 4217 code (defaults to STOREMAN["DEFAULT_CURRENCY"])
    """
    code = _currency_code(currency)
    decimal_pos = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    value = Decimal(str(amount))
    sign = "-" if value < 0 else ""
    number = number_format(abs(value), decimal_pos=decimal_pos, force_grouping=True)
    return f"{sign}{currency_symbol(code)}{number}"


def format_price_range(price_range, currency: str | None = None) -> str:
    """Format a PriceRange as "$10.00 - $15.00"."""
    return f"{format_price(price_range.min, currency)} - {format_price(price_range.max, currency)}"


def format_pricing(pricing_info, currency: str | None = None) -> str:
    """Display string for resolved pricing: the range when present, else the price."""
    if pricing_info.price_range is not None:
        return format_price_range(pricing_info.price_range, currency)
    return format_price(pricing_info.effective_price, currency)
