"""Monthly due-date generation for installment loans"""

from datetime import date
from typing import List

from penalty_gateway.utils.date_utils import add_one_month


def generate_due_dates(start_date: date, today: date) -> List[date]:
    """
    Generate every monthly due date that has occurred by today.

    Each due is one calendar month after the previous one (the first is one
    month after start_date). Dues falling exactly on today are included.
    Month-end overflow carries forward: a loan started 2024-01-31 has dues
    2024-03-02, 2024-04-02, ...

    Returns:
        Due dates in ascending order; empty when start_date is less than a
        month before today or in the future
    """
    dues = []
    due_date = add_one_month(start_date)
    while due_date <= today:
        dues.append(due_date)
        due_date = add_one_month(due_date)
    return dues
