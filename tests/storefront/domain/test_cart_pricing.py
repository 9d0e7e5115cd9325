"""Tests for cart totals."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from storefront.cart.pricing import CartTotals, compute_totals, round_money, to_decimal


def _lines(*pairs):
    return [SimpleNamespace(unit_price=to_decimal(price), quantity=qty) for price, qty in pairs]


class TestComputeTotals:
    def test_empty_cart_totals_are_zero(self):
        totals = compute_totals([])
        assert totals == CartTotals(
            subtotal=Decimal("0"),
            shipping=Decimal("0"),
            tax=Decimal("0"),
            total=Decimal("0"),
        )

    def test_single_line(self):
        totals = compute_totals(_lines((129.99, 2)))
        assert totals.subtotal == Decimal("259.98")
        assert totals.shipping == Decimal("0")
        assert totals.tax == Decimal("20.7984")
        assert totals.total == Decimal("280.7784")

    def test_mixed_lines(self):
        totals = compute_totals(_lines((129.99, 1), (149.99, 2)))
        assert totals.subtotal == Decimal("429.97")
        assert round_money(totals.tax) == Decimal("34.40")
        assert round_money(totals.total) == Decimal("464.37")

    def test_shipping_is_always_free(self):
        assert compute_totals(_lines((999.99, 10))).shipping == Decimal("0")

    def test_total_is_subtotal_plus_tax(self):
        totals = compute_totals(_lines((119.99, 3), (134.99, 1)))
        assert totals.total == totals.subtotal + totals.tax

    def test_totals_are_exact_for_float_prices(self):
        # 0.1 + 0.2 in binary floating point is not 0.3
        totals = compute_totals(_lines((0.1, 1), (0.2, 1)))
        assert totals.subtotal == Decimal("0.3")

    @pytest.mark.parametrize("factor", [2, 3, 7])
    def test_totals_are_linear_in_quantity(self, factor):
        base = compute_totals(_lines((129.99, 1), (149.99, 2)))
        scaled = compute_totals(_lines((129.99, factor), (149.99, 2 * factor)))
        assert scaled.subtotal == base.subtotal * factor
        assert scaled.tax == base.tax * factor
        assert scaled.total == scaled.subtotal + scaled.tax


class TestRounding:
    def test_rounded_totals(self):
        rounded = compute_totals(_lines((129.99, 2))).rounded()
        assert rounded.tax == Decimal("20.80")
        assert rounded.total == Decimal("280.78")

    @pytest.mark.parametrize(
        "value,expected",
        [("0.005", "0.01"), ("0.004", "0.00"), ("10.125", "10.13"), ("2.675", "2.68")],
    )
    def test_round_half_up(self, value, expected):
        assert round_money(Decimal(value)) == Decimal(expected)
