"""Date range module - named relative ranges and membership checks.

This module provides:
- Concrete [start, end] ranges for named relative ranges (today, last week, ...)
- Inclusive membership checks against custom or predefined ranges
- Calendar boundary helpers with an injectable timezone, week start and clock
"""

from loguru import logger

from daterange.calculator import compute_range, list_presets
from daterange.calendar import CalendarPolicy, FixedClock, SystemClock
from daterange.errors import RangeComputationError
from daterange.membership import is_within, is_within_bounds
from daterange.schemas import CustomRange, DateRange, PredefinedRange, RangeKind, RangeSpecifier, Weekday

__all__ = [
    "CalendarPolicy",
    "CustomRange",
    "DateRange",
    "FixedClock",
    "PredefinedRange",
    "RangeComputationError",
    "RangeKind",
    "RangeSpecifier",
    "SystemClock",
    "Weekday",
    "compute_range",
    "is_within",
    "is_within_bounds",
    "list_presets",
]

# Library records stay silent until setup_logger enables them
logger.disable("daterange")
