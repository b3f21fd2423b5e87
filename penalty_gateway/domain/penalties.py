"""Late-payment penalty computation for monthly installment dues"""

import math
from datetime import date
from typing import Any, List, Union

from penalty_gateway.domain.inputs import parse_count, parse_rate, parse_start_date
from penalty_gateway.domain.models import (
    ClearingRequest,
    LoanTerms,
    PenaltyLine,
    PenaltyResult,
    Rejection,
    RejectionReason,
)
from penalty_gateway.domain.schedule import generate_due_dates
from penalty_gateway.utils.date_utils import days_between

MISSING_INPUT_MESSAGE = "Enter loan start date and number of dues being cleared today!"


def compute_penalty(
    start_date: Any,
    dues_already_cleared: Any,
    dues_clearing_now: Any,
    daily_penalty_rate: Any,
    today: date,
) -> Union[PenaltyResult, Rejection]:
    """
    Compute penalties for the dues being cleared today.

    Raw caller values are accepted: dues_already_cleared and
    daily_penalty_rate fall back to 0 when missing or unparseable, while a
    missing start date or a non-positive dues_clearing_now is rejected.

    Returns:
        PenaltyResult with one line per due cleared (oldest first), or a
        Rejection naming the failed precondition
    """
    loan_start = parse_start_date(start_date)
    if loan_start is None:
        return Rejection(RejectionReason.INVALID_START_DATE, MISSING_INPUT_MESSAGE)

    clearing_now = parse_count(dues_clearing_now)
    if clearing_now is None or clearing_now <= 0:
        return Rejection(RejectionReason.NOTHING_TO_CLEAR, MISSING_INPUT_MESSAGE)

    request = ClearingRequest(
        dues_already_cleared=max(parse_count(dues_already_cleared) or 0, 0),
        dues_clearing_now=clearing_now,
        daily_penalty_rate=max(parse_rate(daily_penalty_rate) or 0.0, 0.0),
    )
    return calculate_penalties(LoanTerms(start_date=loan_start), request, today)


def calculate_penalties(loan: LoanTerms, request: ClearingRequest, today: date) -> PenaltyResult:
    """
    Apply the penalty schedule to already-validated inputs.

    A fractional dues_clearing_now rounds the number of dues visited up
    (1.5 clears two). A fractional dues_already_cleared points between two
    dues, so no due is cleared.
    """
    dues = generate_due_dates(loan.start_date, today)

    unpaid_dues = max(len(dues) - request.dues_already_cleared, 0)
    dues_to_clear = min(request.dues_clearing_now, unpaid_dues)

    lines: List[PenaltyLine] = []
    total_penalty = 0.0
    for offset in range(math.ceil(dues_to_clear)):
        index = request.dues_already_cleared + offset
        if index != int(index) or index >= len(dues):
            continue

        due_date = dues[int(index)]
        days_late = days_between(due_date, today)
        if days_late > 0:
            penalty = days_late * request.daily_penalty_rate
        else:
            days_late, penalty = 0, 0.0

        lines.append(PenaltyLine(due_date=due_date, days_late=days_late, penalty_amount=penalty))
        total_penalty += penalty

    return PenaltyResult(
        as_of=today,
        total_dues=len(dues),
        unpaid_dues=unpaid_dues,
        dues_to_clear=dues_to_clear,
        lines=lines,
        total_penalty=total_penalty,
    )
