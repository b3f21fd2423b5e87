"""POST /v1/penalty and GET /v1/dues - late-payment penalty endpoints"""

import logging
import time
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from penalty_gateway.api.dependencies import get_request_id, get_today
from penalty_gateway.api.v1.schemas import (
    DueDateSchema,
    DueScheduleResponse,
    PenaltyLineSchema,
    PenaltyRequest,
    PenaltyResponse,
    RejectionDetail,
)
from penalty_gateway.config import settings
from penalty_gateway.domain.inputs import parse_start_date
from penalty_gateway.domain.models import Rejection, RejectionReason
from penalty_gateway.domain.penalties import MISSING_INPUT_MESSAGE, compute_penalty
from penalty_gateway.domain.schedule import generate_due_dates
from penalty_gateway.infrastructure.observability.logging import log_penalty_computation
from penalty_gateway.infrastructure.observability.metrics import record_computation, record_rejection
from penalty_gateway.utils.date_utils import days_between, format_due_label

router = APIRouter()


def _reject(rejection: Rejection) -> HTTPException:
    record_rejection(rejection.reason.value)
    detail = RejectionDetail(reason=rejection.reason.value, message=rejection.message)
    return HTTPException(status_code=422, detail=detail.model_dump())


@router.post("/penalty", response_model=PenaltyResponse)
def calculate_penalty(
    request_body: PenaltyRequest,
    request: Request,
    today: date = Depends(get_today),
):
    """
    Compute penalties for the dues a borrower is clearing today.

    Flow:
    1. Resolve the reference date (body as_of, else today)
    2. Fall back to the configured daily rate when none is sent
    3. Run the penalty engine
    4. Map a rejection to 422, otherwise return the breakdown
    """
    start_time = time.time()
    request_id = get_request_id(request)
    as_of = request_body.as_of or today

    rate = request_body.daily_penalty_rate
    if rate is None:
        rate = settings.default_daily_penalty_rate

    try:
        result = compute_penalty(
            request_body.loan_start_date,
            request_body.dues_cleared,
            request_body.dues_clearing_today,
            rate,
            as_of,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000

    if isinstance(result, Rejection):
        log_penalty_computation(request_id, result.reason.value, duration_ms)
        raise _reject(result)

    record_computation(len(result.lines), result.total_penalty)
    log_penalty_computation(
        request_id,
        "computed",
        duration_ms,
        total_dues=result.total_dues,
        lines=len(result.lines),
        total_penalty=result.total_penalty,
    )

    return PenaltyResponse(
        as_of=result.as_of,
        total_dues=result.total_dues,
        unpaid_dues=result.unpaid_dues,
        dues_to_clear=result.dues_to_clear,
        lines=[
            PenaltyLineSchema(
                due_date=line.due_date,
                due_label=format_due_label(line.due_date, settings.due_label_format),
                days_late=line.days_late,
                penalty=line.penalty_amount,
            )
            for line in result.lines
        ],
        total_penalty=result.total_penalty,
    )


@router.get("/dues", response_model=DueScheduleResponse)
def list_dues(
    request: Request,
    loan_start_date: Optional[str] = None,
    as_of: Optional[date] = None,
    today: date = Depends(get_today),
):
    """List the monthly dues that have fallen due by the reference date"""
    request_id = get_request_id(request)
    start_date = parse_start_date(loan_start_date)
    if start_date is None:
        logging.warning("Due schedule request rejected: InvalidStartDate", extra={"request_id": request_id})
        raise _reject(Rejection(RejectionReason.INVALID_START_DATE, MISSING_INPUT_MESSAGE))

    reference = as_of or today
    dues = generate_due_dates(start_date, reference)

    return DueScheduleResponse(
        loan_start_date=start_date,
        as_of=reference,
        total_dues=len(dues),
        dues=[
            DueDateSchema(
                due_date=due_date,
                due_label=format_due_label(due_date, settings.due_label_format),
                days_elapsed=days_between(due_date, reference),
            )
            for due_date in dues
        ],
    )
