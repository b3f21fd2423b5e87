"""Unit tests for raw input coercion"""

import pytest
from datetime import date, datetime
from penalty_gateway.domain.inputs import parse_count, parse_rate, parse_start_date


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-01-15", date(2024, 1, 15)),
        (" 2024-01-15 ", date(2024, 1, 15)),
        (date(2024, 1, 15), date(2024, 1, 15)),
        (datetime(2024, 1, 15, 9, 30), date(2024, 1, 15)),
    ],
)
def test_parse_start_date_valid(value, expected):
    assert parse_start_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "2024-02-30", "15/01/2024", "soon", 20240115])
def test_parse_start_date_invalid(value):
    assert parse_start_date(value) is None


@pytest.mark.parametrize(
    "value,expected",
    [(3, 3), ("3", 3), (" 3 ", 3), (3.0, 3), ("0", 0), ("-2", -2), ("2.5", 2.5), (2.5, 2.5)],
)
def test_parse_count_valid(value, expected):
    assert parse_count(value) == expected


@pytest.mark.parametrize("value", [None, "", "abc", True, float("nan"), "inf"])
def test_parse_count_invalid(value):
    assert parse_count(value) is None


def test_parse_rate():
    assert parse_rate("5") == 5.0
    assert parse_rate(2.5) == 2.5
    assert parse_rate("7.25") == 7.25
    assert parse_rate("") is None
    assert parse_rate(None) is None
    assert parse_rate("five") is None


def test_parse_count_whole_float_is_int():
    assert isinstance(parse_count("4.0"), int)
    assert isinstance(parse_count("1.5"), float)
