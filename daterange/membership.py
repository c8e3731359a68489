"""Range membership checks.

is_within_bounds is the primitive; is_within resolves a RangeSpecifier
(custom pair or predefined kind) to bounds and delegates to it.
Bounds are inclusive on both ends.
"""

from datetime import datetime

from daterange.calculator import compute_range
from daterange.calendar import CalendarPolicy, Clock
from daterange.schemas import RANGE_SPECIFIER_ADAPTER, CustomRange, PredefinedRange, RangeKind
from daterange.timezone import to_utc

SpecifierInput = CustomRange | PredefinedRange | RangeKind | str | tuple[datetime, datetime] | dict


def is_within_bounds(instant: datetime, start: datetime, end: datetime) -> bool:
    """Return True if start <= instant <= end.

    Compared in UTC; naive datetimes are interpreted as UTC. An inverted
    pair contains nothing.
    """
    return to_utc(start) <= to_utc(instant) <= to_utc(end)


def is_within(
    instant: datetime,
    specifier: SpecifierInput,
    *,
    now: datetime | None = None,
    policy: CalendarPolicy | None = None,
    clock: Clock | None = None,
) -> bool:
    """Check whether instant falls inside a custom or predefined range.

    Args:
        instant: The instant to test
        specifier: CustomRange, PredefinedRange, a bare RangeKind or range
            label, a (start, end) tuple, or a dict accepted by RANGE_SPECIFIER_ADAPTER
        now: Reference instant for predefined ranges. Defaults to clock.now().
        policy: Calendar policy for predefined ranges
        clock: Source of the current instant when now is omitted

    Returns:
        True if instant lies within the range, bounds included

    Raises:
        RangeComputationError: If a predefined range cannot be computed
        TypeError: If specifier is not a supported type
    """
    if isinstance(specifier, tuple):
        start, end = specifier
        return is_within_bounds(instant, start, end)
    if isinstance(specifier, RangeKind):
        specifier = PredefinedRange(kind=specifier)
    elif isinstance(specifier, str):
        specifier = PredefinedRange(kind=RangeKind.from_label(specifier))
    elif isinstance(specifier, dict):
        specifier = RANGE_SPECIFIER_ADAPTER.validate_python(specifier)

    if isinstance(specifier, CustomRange):
        return is_within_bounds(instant, specifier.start, specifier.end)
    if isinstance(specifier, PredefinedRange):
        date_range = compute_range(specifier.kind, now, policy=policy, clock=clock)
        return is_within_bounds(instant, date_range.start, date_range.end)

    raise TypeError(f"Unsupported range specifier: {type(specifier).__name__}")
