"""Tests for numeric helpers."""

import pytest
from src.domain.numeric import format_decimal, parse_decimal, round_half_up


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("6.8", 6.8),
        (" 120 ", 120.0),
        (0, 0.0),
        ("0", 0.0),
        (7, 7.0),
        (None, None),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("nan", None),
        ("inf", None),
        (True, None),
    ],
)
def test_parse_decimal(raw, expected):
    assert parse_decimal(raw) == expected


def test_round_half_up():
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(10.76768, 1) == 10.8
    assert round_half_up(2.5) == 3.0
    assert round_half_up(3.74, 1) == 3.7


def test_format_decimal():
    assert format_decimal(6.0) == "6"
    assert format_decimal(95) == "95"
    assert format_decimal(6.8) == "6.8"
    assert format_decimal(10.8) == "10.8"


@pytest.mark.parametrize(
    "value,expected",
    [
        (0.0, "0"),
        (-0.0, "0"),
        (-2.5, "-2.5"),
        (1e21, "1e+21"),
        (1.5e21, "1.5e+21"),
        (1e20, "100000000000000000000"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (0.1 + 0.2, "0.30000000000000004"),
    ],
)
def test_format_decimal_matches_javascript_rendering(value, expected):
    assert format_decimal(value) == expected
