"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from datetime import datetime, timezone

import pytest
from loguru import logger

from daterange.calendar import CalendarPolicy, FixedClock
from daterange.schemas import Weekday


@pytest.fixture
def fixed_now() -> datetime:
    """January 1, 2021, 12:00 PM UTC (a Friday)."""
    return datetime(2021, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def utc_policy() -> CalendarPolicy:
    """UTC calendar with Sunday-start weeks."""
    return CalendarPolicy.utc(week_start=Weekday.SUNDAY)


@pytest.fixture
def fixed_clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def log_messages():
    """Capture loguru records as (level, message) tuples, daterange records included."""
    messages: list[tuple[str, str]] = []
    logger.enable("daterange")
    handler_id = logger.add(
        lambda message: messages.append((message.record["level"].name, message.record["message"])),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
    logger.disable("daterange")
