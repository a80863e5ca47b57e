"""
Tests for the number formatting helpers.
"""
import math

import pytest

from number_format import (
    format_entry,
    format_number,
    normalize,
    number_to_text,
    parse_number,
)


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize("text, expected", [
        ("0", 0.0),
        ("42", 42.0),
        ("-7.5", -7.5),
        ("3.", 3.0),
        ("0.", 0.0),
    ])
    def test_numerals(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["NaN", "∞", "-∞", "", "-", "1e5", "inf", "1.2.3"])
    def test_non_numerals_are_nan(self, text):
        assert math.isnan(parse_number(text))


class TestNormalize:
    """Tests for result normalization."""

    def test_integral_float_has_no_point(self):
        assert normalize(8.0) == "8"

    def test_float_noise_is_rounded(self):
        assert normalize(0.1 + 0.2) == "0.3"

    def test_rounds_to_twelve_decimals(self):
        assert normalize(1 / 3) == "0.333333333333"

    def test_tiny_values_collapse_to_zero(self):
        assert normalize(1e-13) == "0"
        assert normalize(-1e-13) == "0"

    def test_no_exponent_notation(self):
        assert normalize(1e-5) == "0.00001"
        assert normalize(1e21) == "1" + "0" * 21

    @pytest.mark.parametrize("value, expected", [
        (math.inf, "∞"),
        (-math.inf, "-∞"),
        (math.nan, "NaN"),
    ])
    def test_sentinels(self, value, expected):
        assert normalize(value) == expected

    def test_number_to_text_negative(self):
        assert number_to_text(-2.5) == "-2.5"


class TestFormatEntry:
    """Tests for display grouping."""

    @pytest.mark.parametrize("text, expected", [
        ("0", "0"),
        ("999", "999"),
        ("1000", "1,000"),
        ("-1234567", "-1,234,567"),
        ("1234.5678", "1,234.5678"),
        ("12345.", "12,345."),
        ("-0.5", "-0.5"),
        ("0.000001", "0.000001"),
        ("NaN", "NaN"),
        ("-∞", "-∞"),
    ])
    def test_format_entry(self, text, expected):
        assert format_entry(text) == expected

    def test_format_number(self):
        assert format_number(1234567.0) == "1,234,567"
        assert format_number(-0.25) == "-0.25"
        assert format_number(math.inf) == "∞"
