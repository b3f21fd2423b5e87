"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Union


@dataclass(frozen=True)
class LoanTerms:
    """Installment loan whose dues fall on monthly anniversaries of start_date"""

    start_date: date


@dataclass(frozen=True)
class ClearingRequest:
    """Dues the borrower is settling in the current transaction"""

    dues_already_cleared: Union[int, float]
    dues_clearing_now: Union[int, float]
    daily_penalty_rate: float

    def __post_init__(self):
        if self.dues_already_cleared < 0:
            raise ValueError(f"dues_already_cleared must be >= 0, got {self.dues_already_cleared}")
        if self.dues_clearing_now <= 0:
            raise ValueError(f"dues_clearing_now must be > 0, got {self.dues_clearing_now}")
        if self.daily_penalty_rate < 0:
            raise ValueError(f"daily_penalty_rate must be >= 0, got {self.daily_penalty_rate}")


@dataclass(frozen=True)
class PenaltyLine:
    """Penalty charged for a single late due"""

    due_date: date
    days_late: int
    penalty_amount: float


@dataclass(frozen=True)
class PenaltyResult:
    """Penalty breakdown for the dues cleared in one transaction"""

    as_of: date
    total_dues: int
    unpaid_dues: Union[int, float]
    dues_to_clear: Union[int, float]
    lines: List[PenaltyLine] = field(default_factory=list)
    total_penalty: float = 0


class RejectionReason(str, Enum):
    """Precondition failures reported instead of a result"""

    INVALID_START_DATE = "InvalidStartDate"
    NOTHING_TO_CLEAR = "NothingToClear"


@dataclass(frozen=True)
class Rejection:
    """Computation refused because the inputs are incomplete"""

    reason: RejectionReason
    message: str
