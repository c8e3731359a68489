"""Date range schemas.

RangeKind names the supported relative ranges, DateRange is the concrete
result of a computation, and RangeSpecifier is the input to membership
checks (either a custom pair or a predefined kind).
"""

from datetime import datetime, timedelta
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from daterange.timezone import to_utc


class RangeKind(StrEnum):
    """Named relative date ranges."""

    TODAY = "today"
    LAST_SEVEN_DAYS = "last_seven_days"
    LAST_THIRTY_DAYS = "last_thirty_days"
    LAST_NINETY_DAYS = "last_ninety_days"
    LAST_MONTH = "last_month"
    THIS_MONTH = "this_month"
    LAST_WEEK = "last_week"

    @property
    def label(self) -> str:
        """Human readable label, e.g. "Last 7 Days"."""
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "RangeKind":
        """Resolve a display label or enum value.

        Matching is case-insensitive and treats spaces, dashes and
        underscores alike, so "Last Month", "last-month" and "last_month"
        all resolve to LAST_MONTH.

        Raises:
            ValueError: If the label does not name a known range
        """
        normalized = _normalize_label(label)
        for kind in cls:
            if normalized in (_normalize_label(kind.value), _normalize_label(kind.label)):
                return kind
        raise ValueError(f"Unknown date range: {label!r}")


_LABELS: dict[RangeKind, str] = {
    RangeKind.TODAY: "Today",
    RangeKind.LAST_SEVEN_DAYS: "Last 7 Days",
    RangeKind.LAST_THIRTY_DAYS: "Last 30 Days",
    RangeKind.LAST_NINETY_DAYS: "Last 90 Days",
    RangeKind.LAST_MONTH: "Last Month",
    RangeKind.THIS_MONTH: "This Month",
    RangeKind.LAST_WEEK: "Last Week",
}


def _normalize_label(label: str) -> str:
    return "_".join((label or "").strip().lower().replace("-", " ").replace("_", " ").split())


class Weekday(StrEnum):
    """Day a calendar week starts on."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def number(self) -> int:
        """Day number as returned by datetime.weekday() (Monday = 0)."""
        return list(Weekday).index(self)


def _check_bounds(start: datetime, end: datetime) -> None:
    if start.tzinfo is None or end.tzinfo is None:
        raise ValueError("Date range bounds must be timezone-aware")
    if to_utc(start) > to_utc(end):
        raise ValueError(f"Invalid date range: start {start.isoformat()} is after end {end.isoformat()}")


class DateRange(BaseModel):
    """Concrete (start, end) instant pair, inclusive on both ends."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_order(self) -> "DateRange":
        _check_bounds(self.start, self.end)
        return self

    @property
    def duration(self) -> timedelta:
        return to_utc(self.end) - to_utc(self.start)

    def contains(self, instant: datetime) -> bool:
        return to_utc(self.start) <= to_utc(instant) <= to_utc(self.end)

    def as_tuple(self) -> tuple[datetime, datetime]:
        return self.start, self.end


class CustomRange(BaseModel):
    """Caller supplied (start, end) pair."""

    model_config = ConfigDict(frozen=True)

    type: Literal["custom"] = "custom"
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_order(self) -> "CustomRange":
        _check_bounds(self.start, self.end)
        return self

    def to_range(self) -> DateRange:
        return DateRange(start=self.start, end=self.end)


class PredefinedRange(BaseModel):
    """A named range, resolved against a reference instant when checked."""

    model_config = ConfigDict(frozen=True)

    type: Literal["predefined"] = "predefined"
    kind: RangeKind


RangeSpecifier = Annotated[CustomRange | PredefinedRange, Field(discriminator="type")]

RANGE_SPECIFIER_ADAPTER: TypeAdapter[CustomRange | PredefinedRange] = TypeAdapter(RangeSpecifier)
