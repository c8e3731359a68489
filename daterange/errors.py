"""Date range computation errors.

Every calendar helper has its own error type so callers can tell which
boundary or shift could not be represented. All of them derive from
RangeComputationError.

Standard error codes:
- CANNOT_COMPUTE_START_OF_DAY / CANNOT_COMPUTE_END_OF_DAY
- CANNOT_COMPUTE_START_OF_WEEK / CANNOT_COMPUTE_END_OF_WEEK
- CANNOT_COMPUTE_START_OF_MONTH / CANNOT_COMPUTE_END_OF_MONTH
- CANNOT_SHIFT_BY_DAYS / CANNOT_SHIFT_BY_WEEKS / CANNOT_SHIFT_BY_MONTHS
"""

from datetime import datetime


class RangeComputationError(RuntimeError):
    """Raised when calendar arithmetic has no representable result.

    Attributes:
        code: Error code (e.g., "CANNOT_COMPUTE_START_OF_MONTH")
        instant: The instant the computation started from
    """

    code = "RANGE_COMPUTATION_FAILED"
    description = "Failed to compute date range"

    def __init__(self, instant: datetime | None = None, detail: str | None = None):
        self.instant = instant
        self.detail = detail
        message = self.description
        if instant is not None:
            message = f"{message} for {instant.isoformat()}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(f"{self.code}: {message}")


class CannotComputeStartOfDayError(RangeComputationError):
    """Raised when the start of the day cannot be represented."""

    code = "CANNOT_COMPUTE_START_OF_DAY"
    description = "Failed to get start of day"


class CannotComputeEndOfDayError(RangeComputationError):
    """Raised when the end of the day cannot be represented."""

    code = "CANNOT_COMPUTE_END_OF_DAY"
    description = "Failed to get end of day"


class CannotComputeStartOfWeekError(RangeComputationError):
    """Raised when the start of the week cannot be represented."""

    code = "CANNOT_COMPUTE_START_OF_WEEK"
    description = "Failed to get start of week"


class CannotComputeEndOfWeekError(RangeComputationError):
    """Raised when the end of the week cannot be represented."""

    code = "CANNOT_COMPUTE_END_OF_WEEK"
    description = "Failed to get end of week"


class CannotComputeStartOfMonthError(RangeComputationError):
    """Raised when the start of the month cannot be represented."""

    code = "CANNOT_COMPUTE_START_OF_MONTH"
    description = "Failed to get start of month"


class CannotComputeEndOfMonthError(RangeComputationError):
    """Raised when the end of the month cannot be represented."""

    code = "CANNOT_COMPUTE_END_OF_MONTH"
    description = "Failed to get end of month"


class CannotShiftByDaysError(RangeComputationError):
    """Raised when shifting by a number of days leaves the representable range."""

    code = "CANNOT_SHIFT_BY_DAYS"
    description = "Failed to shift by days"


class CannotShiftByWeeksError(RangeComputationError):
    """Raised when shifting by a number of weeks leaves the representable range."""

    code = "CANNOT_SHIFT_BY_WEEKS"
    description = "Failed to shift by weeks"


class CannotShiftByMonthsError(RangeComputationError):
    """Raised when shifting by a number of months leaves the representable range."""

    code = "CANNOT_SHIFT_BY_MONTHS"
    description = "Failed to shift by months"
