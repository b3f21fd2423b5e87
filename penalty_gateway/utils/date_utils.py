"""Date manipulation utilities"""

import calendar
from datetime import date, timedelta


def add_one_month(from_date: date) -> date:
    """
    Advance a date by one calendar month.

    The month field is incremented and a day-of-month that does not exist in
    the target month rolls over into the following month:
        2024-01-31 -> 2024-03-02 (Feb 2024 has 29 days)
        2023-01-31 -> 2023-03-03
    """
    year, month = from_date.year, from_date.month + 1
    if month > 12:
        year, month = year + 1, 1

    days_in_month = calendar.monthrange(year, month)[1]
    if from_date.day <= days_in_month:
        return from_date.replace(year=year, month=month)

    # Overflow past month end
    return date(year, month, days_in_month) + timedelta(days=from_date.day - days_in_month)


def days_between(earlier: date, later: date) -> int:
    """Whole days from earlier to later (negative when later precedes earlier)"""
    return (later - earlier).days


def format_due_label(due_date: date, fmt: str = "%a %b %d %Y") -> str:
    """Human-readable due date, e.g. 'Thu Feb 15 2024'"""
    return due_date.strftime(fmt)
