"""Tests for price text parsing and money helpers."""

from types import SimpleNamespace

import pytest

from storefront_e2e.pricing import (
    calculate_expected_total,
    compare_prices,
    format_price,
    parse_price,
    round_to_two_decimals,
    try_parse_price,
)
from storefront_e2e.testdata import ProductFixture


class TestParsePrice:
    """parse_price never raises and defaults to zero."""

    @pytest.mark.parametrize("text, expected", [
        ("$1,234.56", 1234.56),
        ("Sub-Total: 3310.00", 3310.00),
        ("1590.00", 1590.0),
        ("  24.00\n", 24.0),
        ("Price: 10", 10.0),
        ("-10.00", -10.0),
        ("€ 99.99", 99.99),
    ])
    def test_extracts_number(self, text, expected):
        assert parse_price(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", [None, "", "Calculated during checkout", "-", "$"])
    def test_defaults_to_zero(self, text):
        assert parse_price(text) == 0

    def test_hyphen_inside_label_is_not_a_sign(self):
        assert parse_price("Sub-Total: 3310.00") > 0

    def test_malformed_input_is_best_effort(self):
        # Second decimal point ends the number
        assert parse_price("1.2.3") == pytest.approx(1.2)


class TestTryParsePrice:
    def test_none_when_nothing_to_parse(self):
        assert try_parse_price("Calculated during checkout") is None
        assert try_parse_price(None) is None

    def test_zero_is_a_real_value(self):
        assert try_parse_price("0.00") == 0.0


class TestMoneyHelpers:
    def test_round_to_two_decimals(self):
        assert round_to_two_decimals(1.005) == 1.01
        assert round_to_two_decimals(10.0 * 3) == 30.0
        assert round_to_two_decimals(2.675) == 2.68

    def test_compare_prices_is_inclusive(self):
        assert compare_prices(10.005, 10.0)
        assert compare_prices(10.0, 10.0)
        assert not compare_prices(10.02, 10.0)

    def test_format_price(self):
        assert format_price(3) == "3.00"
        assert format_price(1234.5) == "1234.50"

    def test_calculate_expected_total(self):
        products = [
            ProductFixture(name="A", url="/a", price=10.0, quantity=2),
            ProductFixture(name="B", url="/b", price=24.0, quantity=1),
        ]
        assert calculate_expected_total(products) == pytest.approx(44.0)
        assert calculate_expected_total([]) == 0

    def test_calculate_expected_total_accepts_any_priced_quantity(self):
        lines = [SimpleNamespace(price=4.34, quantity=3), SimpleNamespace(price=0.5, quantity=1)]

        assert calculate_expected_total(lines) == pytest.approx(13.52)
