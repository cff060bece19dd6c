"""Tests for money helpers"""
from decimal import Decimal

from storefront.services.money import (
    discount_percent,
    format_money,
    from_cents,
    round_money,
    to_cents,
    to_decimal,
)


def test_to_decimal_handles_floats_via_str():
    assert to_decimal(19.99) == Decimal("19.99")


def test_to_decimal_invalid_values():
    assert to_decimal(None) == Decimal("0")
    assert to_decimal("not a number") == Decimal("0")


def test_round_money_half_up():
    assert round_money("2.675") == Decimal("2.68")
    assert round_money(3) == Decimal("3.00")


def test_cents_conversion():
    assert to_cents("105.00") == 10500
    assert to_cents(0.1) == 10
    assert from_cents(6500) == Decimal("65.00")


def test_discount_percent():
    assert discount_percent(50, 37.5) == 25
    assert discount_percent(30, 20) == 33
    assert discount_percent(0, 0) == 0


def test_format_money():
    assert format_money(Decimal("1234.5")) == "$1,234.50"
    assert format_money(10, "EUR") == "€10.00"
    assert format_money(10, "CHF") == "10.00 CHF"
