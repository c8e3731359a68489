"""Relative date range computation.

Maps a RangeKind plus a reference instant to a concrete DateRange.
All boundaries are computed in the CalendarPolicy's timezone.
"""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from daterange.calendar import (
    CalendarPolicy,
    Clock,
    SystemClock,
    end_of_day,
    end_of_month,
    end_of_week,
    shift_days,
    shift_months,
    shift_weeks,
    start_of_day,
    start_of_month,
    start_of_week,
)
from daterange.errors import RangeComputationError
from daterange.schemas import DateRange, RangeKind

RangeBuilder = Callable[[datetime, CalendarPolicy], tuple[datetime, datetime]]


def _today(now: datetime, policy: CalendarPolicy) -> tuple[datetime, datetime]:
    return start_of_day(now, policy), end_of_day(now, policy)


def _trailing_days(days: int) -> RangeBuilder:
    def build(now: datetime, policy: CalendarPolicy) -> tuple[datetime, datetime]:
        return shift_days(now, -days), now

    return build


def _this_month(now: datetime, policy: CalendarPolicy) -> tuple[datetime, datetime]:
    return start_of_month(now, policy), end_of_month(now, policy)


def _last_month(now: datetime, policy: CalendarPolicy) -> tuple[datetime, datetime]:
    start = shift_months(start_of_month(now, policy), -1)
    return start, end_of_month(start, policy)


def _last_week(now: datetime, policy: CalendarPolicy) -> tuple[datetime, datetime]:
    start = shift_weeks(start_of_week(now, policy), -1)
    return start, end_of_week(start, policy)


_BUILDERS: dict[RangeKind, RangeBuilder] = {
    RangeKind.TODAY: _today,
    RangeKind.LAST_SEVEN_DAYS: _trailing_days(7),
    RangeKind.LAST_THIRTY_DAYS: _trailing_days(30),
    RangeKind.LAST_NINETY_DAYS: _trailing_days(90),
    RangeKind.THIS_MONTH: _this_month,
    RangeKind.LAST_MONTH: _last_month,
    RangeKind.LAST_WEEK: _last_week,
}


def compute_range(
    kind: RangeKind | str,
    now: datetime | None = None,
    *,
    policy: CalendarPolicy | None = None,
    clock: Clock | None = None,
) -> DateRange:
    """Compute the concrete range for a named relative range.

    Args:
        kind: The range to compute, as a RangeKind or a label such as "Last Week"
        now: Reference instant. Defaults to clock.now().
        policy: Timezone and week-start convention. Defaults to settings.
        clock: Source of the current instant when now is omitted

    Returns:
        DateRange in the policy's timezone. For the trailing-day kinds the
        end is now itself, not aligned to a day boundary.

    Raises:
        RangeComputationError: If calendar arithmetic leaves the representable range
        ValueError: If kind does not name a known range
    """
    kind = kind if isinstance(kind, RangeKind) else RangeKind.from_label(kind)
    policy = policy or CalendarPolicy.from_settings()
    if now is None:
        now = (clock or SystemClock()).now()

    try:
        local_now = policy.localize(now)
        start, end = _BUILDERS[kind](local_now, policy)
    except RangeComputationError as e:
        logger.error(f"Failed to create date range for {kind.label}: now={now.isoformat()}, error={e}")
        raise

    logger.debug(f"Computed {kind.value} range: start={start.isoformat()}, end={end.isoformat()}")
    return DateRange(start=start, end=end)


def list_presets() -> list[tuple[str, str]]:
    """Return (value, label) tuples for every supported range."""
    return [(kind.value, kind.label) for kind in RangeKind]
