"""Tests for amount parsing utilities."""

from decimal import Decimal

import pytest

from isp_ledger.utils.amount_parser import parse_amount, parse_non_negative_amount, to_decimal


@pytest.mark.parametrize(
    "text,expected",
    [
        ("40", Decimal("40")),
        ("12.5", Decimal("12.5")),
        ("12,5", Decimal("12.5")),
        ("  7 ", Decimal("7")),
        ("1 200.00", Decimal("1200.00")),
        ("1,200.00", Decimal("1200.00")),
        ("1,200", Decimal("1200")),
        ("12,345,678", Decimal("12345678")),
        ("0,75", Decimal("0.75")),
        ("12,50", Decimal("12.50")),
        ("300 руб.", Decimal("300")),
        ("300 RUB", Decimal("300")),
        ("₽300", Decimal("300")),
        ("10 GB", Decimal("10")),
        ("-3", Decimal("-3")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3", "nan", "inf", "1,2,3"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_non_negative_amount():
    assert parse_non_negative_amount("0") == Decimal("0")
    with pytest.raises(ValueError, match="must be >= 0"):
        parse_non_negative_amount("-0.5")


def test_to_decimal():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(5) == Decimal("5")
    value = Decimal("2.50")
    assert to_decimal(value) is value
    with pytest.raises(ValueError):
        to_decimal(True)
    with pytest.raises(ValueError):
        to_decimal(float("inf"))


def test_comma_thousands_is_not_a_decimal_point():
    assert parse_non_negative_amount("1,200") == Decimal("1200")
    assert parse_non_negative_amount("1,200 RUB") == Decimal("1200")
    assert parse_non_negative_amount("1,20") == Decimal("1.20")
