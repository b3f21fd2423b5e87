"""Coercion of raw caller input (form strings, JSON numbers, None) into engine types"""

import math
from datetime import date, datetime
from typing import Any, Optional, Union


def parse_start_date(value: Any) -> Optional[date]:
    """Return a calendar date, or None if the value is missing or not a valid date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def _parse_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    return number if math.isfinite(number) else None


def parse_count(value: Any) -> Optional[Union[int, float]]:
    """
    Parse a dues count.

    Whole numbers come back as int ("3", 3 and 3.0 give 3); a fractional
    count such as "1.5" is kept as a float. "", None, "abc" and booleans do
    not parse.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    number = _parse_number(value)
    if number is None:
        return None
    return int(number) if number.is_integer() else number


def parse_rate(value: Any) -> Optional[float]:
    """Parse a per-day penalty rate; None when missing or non-numeric"""
    return _parse_number(value)
