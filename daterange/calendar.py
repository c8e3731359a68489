"""Calendar boundary arithmetic.

Central helpers for day, week and month boundaries:
- Resolve the timezone and week-start convention (CalendarPolicy)
- Provide the current instant through an injectable clock
- Compute start/end of day, week and month in the policy's timezone
- Shift instants by calendar days, weeks and months

End boundaries are inclusive: they are the last representable second before
the next boundary (23:59:59), not the start of the next period.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import TYPE_CHECKING, Protocol
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta
from dateutil.tz import tzlocal

from daterange.errors import (
    CannotComputeEndOfDayError,
    CannotComputeEndOfMonthError,
    CannotComputeEndOfWeekError,
    CannotComputeStartOfDayError,
    CannotComputeStartOfMonthError,
    CannotComputeStartOfWeekError,
    CannotShiftByDaysError,
    CannotShiftByMonthsError,
    CannotShiftByWeeksError,
    RangeComputationError,
)
from daterange.schemas import Weekday
from daterange.timezone import to_aware

if TYPE_CHECKING:
    from daterange.config.settings import Settings

# Smallest step between an end boundary and the next period's start
BOUNDARY_RESOLUTION = timedelta(seconds=1)


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock, always timezone-aware (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to a single instant."""

    instant: datetime

    def now(self) -> datetime:
        return to_aware(self.instant)


@dataclass(frozen=True)
class CalendarPolicy:
    """Timezone and week-start convention used for boundary arithmetic."""

    tz: tzinfo = timezone.utc
    week_start: Weekday = Weekday.SUNDAY

    @classmethod
    def utc(cls, week_start: Weekday = Weekday.SUNDAY) -> "CalendarPolicy":
        return cls(tz=timezone.utc, week_start=week_start)

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "CalendarPolicy":
        """Build a policy from DATERANGE_* settings.

        An empty timezone setting selects the system local zone.
        """
        if settings is None:
            from daterange.config.settings import settings as default_settings

            settings = default_settings
        tz: tzinfo = ZoneInfo(settings.timezone) if settings.timezone else tzlocal()
        return cls(tz=tz, week_start=settings.week_start)

    def localize(self, instant: datetime) -> datetime:
        """Express an instant in the policy's timezone."""
        aware = to_aware(instant)
        try:
            return aware.astimezone(self.tz)
        except (OverflowError, ValueError) as e:
            raise RangeComputationError(aware, f"cannot convert to {self.tz}") from e


@contextmanager
def _calendar_guard(error: type[RangeComputationError], instant: datetime) -> Iterator[None]:
    """Translate datetime range failures into the given error type."""
    try:
        yield
    except (OverflowError, ValueError) as e:
        raise error(instant, str(e)) from e


def start_of_day(instant: datetime, policy: CalendarPolicy) -> datetime:
    """Return 00:00:00 of the day containing instant."""
    local = policy.localize(instant)
    with _calendar_guard(CannotComputeStartOfDayError, instant):
        return local.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)


def end_of_day(instant: datetime, policy: CalendarPolicy) -> datetime:
    """Return 23:59:59 of the day containing instant."""
    start = start_of_day(instant, policy)
    with _calendar_guard(CannotComputeEndOfDayError, instant):
        return start + (timedelta(days=1) - BOUNDARY_RESOLUTION)


def start_of_week(instant: datetime, policy: CalendarPolicy) -> datetime:
    """Return the first instant of the week containing instant.

    The week starts on policy.week_start.
    """
    day_start = start_of_day(instant, policy)
    offset = (day_start.weekday() - policy.week_start.number) % 7
    with _calendar_guard(CannotComputeStartOfWeekError, instant):
        return day_start - timedelta(days=offset)


def end_of_week(instant: datetime, policy: CalendarPolicy) -> datetime:
    """Return the last second of the week containing instant."""
    start = start_of_week(instant, policy)
    with _calendar_guard(CannotComputeEndOfWeekError, instant):
        return start + (timedelta(weeks=1) - BOUNDARY_RESOLUTION)


def start_of_month(instant: datetime, policy: CalendarPolicy) -> datetime:
    """Return the first instant of the month containing instant."""
    day_start = start_of_day(instant, policy)
    with _calendar_guard(CannotComputeStartOfMonthError, instant):
        return day_start.replace(day=1)


def end_of_month(instant: datetime, policy: CalendarPolicy) -> datetime:
    """Return the last second of the month containing instant."""
    start = start_of_month(instant, policy)
    with _calendar_guard(CannotComputeEndOfMonthError, instant):
        return start + relativedelta(months=1) - BOUNDARY_RESOLUTION


def shift_days(instant: datetime, days: int) -> datetime:
    """Shift by calendar days, keeping the wall-clock time."""
    with _calendar_guard(CannotShiftByDaysError, instant):
        return instant + timedelta(days=days)


def shift_weeks(instant: datetime, weeks: int) -> datetime:
    """Shift by calendar weeks, keeping the wall-clock time."""
    with _calendar_guard(CannotShiftByWeeksError, instant):
        return instant + timedelta(weeks=weeks)


def shift_months(instant: datetime, months: int) -> datetime:
    """Shift by calendar months.

    The day of month is clamped to the target month's length
    (March 31 minus one month is February 28 or 29).
    """
    with _calendar_guard(CannotShiftByMonthsError, instant):
        return instant + relativedelta(months=months)
