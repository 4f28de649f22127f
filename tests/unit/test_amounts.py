"""Unit tests for amount formatting and parsing"""

import pytest
from ikigai_payments.domain.amounts import (
    format_amount,
    format_minor_units,
    parse_formatted_amount,
    to_minor_units,
)


def test_format_amount_groups_thousands():
    """Test thousands separators on whole amounts"""
    assert format_amount("150000") == "150,000"
    assert format_amount("1234567") == "1,234,567"
    assert format_amount("999") == "999"


def test_format_amount_empty_and_invalid():
    """Test empty or non-numeric input degrades to empty string"""
    assert format_amount("") == ""
    assert format_amount("abc") == ""
    assert format_amount(".") == ""
    assert format_amount("..") == ""


def test_format_amount_strips_non_numeric():
    """Test currency symbols, commas and spaces are dropped"""
    assert format_amount("₦150,000") == "150,000"
    assert format_amount(" 12 500 ") == "12,500"


def test_format_amount_preserves_trailing_decimal_point():
    """Test the field does not jump while the user types a decimal"""
    assert format_amount("1500.") == "1,500."
    assert format_amount("0.") == "0."


def test_format_amount_keeps_typed_fraction_digits():
    """Test fraction digits are kept as typed, up to two"""
    assert format_amount("1234.5") == "1,234.5"
    assert format_amount("1234.50") == "1,234.50"
    assert format_amount(".5") == "0.5"


def test_format_amount_rounds_extra_fraction_digits():
    """Test more than two fraction digits are rounded half-up"""
    assert format_amount("12.555") == "12.56"
    assert format_amount("12.554") == "12.55"


def test_format_amount_collapses_multiple_decimal_points():
    """Test extra decimal points merge into the first"""
    assert format_amount("1.2.3") == "1.23"
    assert format_amount("100..5") == "100.5"


def test_format_amount_drops_leading_zeros():
    assert format_amount("007") == "7"
    assert format_amount("000150000") == "150,000"


def test_format_amount_beyond_default_decimal_precision():
    """Test very long amounts still format instead of degrading"""
    assert format_amount("9" * 40 + ".99") == f"{int('9' * 40):,}.99"
    assert format_amount("9" * 30 + ".995") == f"{int('1' + '0' * 30):,}.00"
    assert parse_formatted_amount(format_amount("1" * 29)) == "1" * 29


def test_parse_formatted_amount():
    """Test thousands separators are removed"""
    assert parse_formatted_amount("150,000") == "150000"
    assert parse_formatted_amount("1,234.56") == "1234.56"
    assert parse_formatted_amount("") == ""


@pytest.mark.parametrize("raw", ["150000", "1234.5", "0.75", "1000000.05", "42"])
def test_parse_format_round_trip(raw: str):
    """Test parse(format(x)) returns the normalized input"""
    assert parse_formatted_amount(format_amount(raw)) == parse_formatted_amount(raw)


def test_parse_format_round_trip_normalizes_leading_zeros():
    assert parse_formatted_amount(format_amount("0042")) == "42"


def test_to_minor_units():
    """Test display amounts convert to integer kobo"""
    assert to_minor_units("150,000") == 15_000_000
    assert to_minor_units("12.5") == 1250
    assert to_minor_units("0.01") == 1
    assert to_minor_units("1500.") == 150_000


def test_to_minor_units_rejects_non_positive_and_invalid():
    """Test anything but a positive finite number gives None"""
    assert to_minor_units("") is None
    assert to_minor_units("0") is None
    assert to_minor_units("-5") is None
    assert to_minor_units("abc") is None
    assert to_minor_units("NaN") is None
    assert to_minor_units("Infinity") is None
    assert to_minor_units("0.001") is None


def test_format_minor_units():
    """Test kobo are shown only when non-zero"""
    assert format_minor_units(15_000_000) == "150,000"
    assert format_minor_units(1050) == "10.50"
    assert format_minor_units(5) == "0.05"
    assert format_minor_units(0) == "0"


def test_to_minor_units_beyond_default_decimal_precision():
    """Test very long amounts convert exactly and absurd exponents give None"""
    assert to_minor_units("1" * 27) == int("1" * 27) * 100
    assert to_minor_units("9" * 30 + ".995") == int("1" + "0" * 30) * 100
    assert to_minor_units("1e999999999") is None
