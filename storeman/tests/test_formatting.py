"""Tests for price formatting."""

from decimal import Decimal

from django.test import override_settings
from django.utils import translation

from storeman.formatting import currency_symbol, format_price, format_price_range, format_pricing
from storeman.protocols import PriceRange, PricingInfo


class TestCurrencySymbol:
    def test_known(self):
        assert currency_symbol("EUR") == "€"
        assert currency_symbol("crc") == "₡"
        assert currency_symbol("BRL") == "R$"

    def test_unknown_falls_back_to_dollar(self):
        assert currency_symbol("XYZ") == "$"


class TestFormatPrice:
    def setup_method(self):
        translation.activate("en-us")

    def teardown_method(self):
        translation.deactivate()

    def test_usd(self):
        assert format_price(Decimal("20"), "USD") == "$20.00"

    def test_grouping(self):
        assert format_price(Decimal("1234.5"), "usd") == "$1,234.50"

    def test_zero_decimal_currency(self):
        assert format_price(1500, "JPY") == "¥1,500"

    def test_colon(self):
        assert format_price(Decimal("5000"), "CRC") == "₡5,000.00"

    def test_negative(self):
        assert format_price(Decimal("-5"), "USD") == "-$5.00"

    def test_zero_price(self):
        assert format_price(Decimal("0"), "USD") == "$0.00"

    @override_settings(STOREMAN={"DEFAULT_CURRENCY": "EUR"})
    def test_default_currency_from_settings(self):
        assert format_price(Decimal("10")) == "€10.00"

    def test_range(self):
        price_range = PriceRange(min=Decimal("10"), max=Decimal("15"))
        assert format_price_range(price_range, "USD") == "$10.00 - $15.00"

    def test_format_pricing_prefers_range(self):
        info = PricingInfo(
            effective_price=Decimal("10"),
            price_range=PriceRange(min=Decimal("10"), max=Decimal("15")),
        )
        assert format_pricing(info, "GBP") == "£10.00 - £15.00"
        assert format_pricing(PricingInfo(effective_price=Decimal("7.5")), "GBP") == "£7.50"
