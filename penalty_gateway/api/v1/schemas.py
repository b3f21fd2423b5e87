"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, Field

# Form fields arrive as typed text or JSON numbers; the engine coerces them
RawField = Optional[Union[int, float, str]]


class PenaltyRequest(BaseModel):
    """Request body for POST /v1/penalty"""

    loan_start_date: Optional[str] = Field(None, description="Loan start date (YYYY-MM-DD)")
    dues_cleared: RawField = Field(None, description="Dues already cleared; blank means 0")
    dues_clearing_today: RawField = Field(None, description="Dues being cleared today; must be > 0")
    daily_penalty_rate: RawField = Field(None, description="Penalty per day late; defaults to the configured rate")
    as_of: Optional[date] = Field(None, description="Reference date; defaults to today")


class PenaltyLineSchema(BaseModel):
    """Penalty for a single due being cleared"""

    due_date: date
    due_label: str
    days_late: int
    penalty: float


class PenaltyResponse(BaseModel):
    """Response for POST /v1/penalty"""

    as_of: date
    total_dues: int
    unpaid_dues: Union[int, float]
    dues_to_clear: Union[int, float]
    lines: List[PenaltyLineSchema]
    total_penalty: float


class RejectionDetail(BaseModel):
    """Body of a 422 response when inputs are incomplete"""

    reason: str
    message: str


class DueDateSchema(BaseModel):
    """Single monthly due in the elapsed schedule"""

    due_date: date
    due_label: str
    days_elapsed: int


class DueScheduleResponse(BaseModel):
    """Response for GET /v1/dues"""

    loan_start_date: date
    as_of: date
    total_dues: int
    dues: List[DueDateSchema]
