"""Unit tests for avaliador.domain.calculator.parsing module."""

import pytest

from avaliador.domain.calculator.parsing import (
    count_digits,
    parse_float,
    parse_int,
    parse_strict_number,
    parse_year,
    round_half_up,
)


class TestPermissiveParsing:
    """Leading-number parsing used by the valuation formulas."""

    @pytest.mark.parametrize("text,expected", [
        ("80", 80.0),
        ("80m2", 80.0),
        ("80 m²", 80.0),
        ("  72.5", 72.5),
        ("72,5", 72.5),
        ("-3", -3.0),
        (".5", 0.5),
    ])
    def test_parse_float(self, text, expected):
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "abc", "m2 80"])
    def test_parse_float_invalid(self, text):
        assert parse_float(text) is None

    @pytest.mark.parametrize("text,expected", [
        ("2010", 2010),
        ("2010.5", 2010),
        ("5º", 5),
        ("-1", -1),
    ])
    def test_parse_int(self, text, expected):
        assert parse_int(text) == expected

    def test_parse_int_invalid(self):
        assert parse_int("") is None
        assert parse_int("rc") is None
        assert parse_int(None) is None


class TestStrictParsing:
    """Whole-string parsing used by step validation."""

    @pytest.mark.parametrize("text,expected", [
        ("80", 80.0),
        (" 80 ", 80.0),
        ("80.5", 80.5),
        ("80,5", 80.5),
        ("0", 0.0),
        ("-2", -2.0),
    ])
    def test_valid(self, text, expected):
        assert parse_strict_number(text) == expected

    @pytest.mark.parametrize("text", [None, "", "  ", "80m2", "1e3", "inf", "nan", "8 0"])
    def test_invalid(self, text):
        assert parse_strict_number(text) is None


class TestParseYear:

    def test_four_digits(self):
        assert parse_year("1995") == 1995

    def test_too_short(self):
        assert parse_year("995") is None

    def test_unparseable(self):
        assert parse_year("") is None
        assert parse_year("nineteen") is None


class TestCountDigits:

    @pytest.mark.parametrize("text,expected", [
        ("912345678", 9),
        ("912 345 678", 9),
        ("+351 912 345 678", 12),
        ("abc", 0),
        ("", 0),
        (None, 0),
    ])
    def test_count(self, text, expected):
        assert count_digits(text) == expected


class TestRoundHalfUp:
    """Halves round away from zero, unlike the built-in round()."""

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (2.5, 3),
        (2.4999, 2),
        (240000.5, 240001),
        (-2.5, -3),
        (0.0, 0),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestOversizedInput:
    """Input longer than the int conversion limit reads as unparseable."""

    def test_parse_int_huge_digit_string(self):
        assert parse_int("1" * 5000) is None
        assert parse_year("1" * 5000) is None

    def test_parse_float_overflow(self):
        assert parse_float("9" * 400) is None
        assert parse_strict_number("9" * 400) is None

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_round_non_finite(self, value):
        assert round_half_up(value) == 0
