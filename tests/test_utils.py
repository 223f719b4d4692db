from __future__ import annotations

from decimal import Decimal

import pytest

from cabinet_panels.utils import parse_number, parse_quantity, plain_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("34.5", Decimal("34.5")),
        ("  12 ", Decimal("12")),
        (24, Decimal("24")),
        (0.75, Decimal("0.75")),
        (Decimal("1.5"), Decimal("1.5")),
        ("-3", Decimal("-3")),
    ],
)
def test_parse_number_accepts_numbers_and_numeric_text(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12abc", "NaN", "Infinity", "-inf", float("nan"), True])
def test_parse_number_treats_garbage_as_absent(raw):
    assert parse_number(raw) is None


@pytest.mark.parametrize("raw, expected", [("4", 4), (6, 6), ("4.0", 4), (2.0, 2)])
def test_parse_quantity_whole_numbers(raw, expected):
    assert parse_quantity(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-1", "1.5", "", None, "two"])
def test_parse_quantity_rejects_non_positive_or_fractional(raw):
    assert parse_quantity(raw) is None


@pytest.mark.parametrize(
    "value, text",
    [
        (Decimal("30.0"), "30"),
        (Decimal("29.25"), "29.25"),
        (Decimal("28.50"), "28.5"),
        (Decimal("1E+3"), "1000"),
        (12, "12"),
        (0.5, "0.5"),
    ],
)
def test_plain_number(value, text):
    assert plain_number(value) == text


def test_plain_number_large_exponent_does_not_go_through_int():
    assert plain_number(Decimal("1E+5000")) == "1" + "0" * 5000
    assert plain_number(Decimal("-2.50E+3")) == "-2500"


def test_parse_number_rejects_out_of_range_magnitudes():
    assert parse_number("1e400") == Decimal("1e400")
    assert parse_number("1e5000") is None
    assert parse_number("1e-401") is None
