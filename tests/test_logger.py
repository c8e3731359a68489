"""Tests for daterange loguru sinks."""

from datetime import datetime, timezone

import pytest
from loguru import logger

import daterange.config.settings as settings_module
from daterange.calculator import compute_range
from daterange.calendar import CalendarPolicy
from daterange.config.settings import Settings
from daterange.core.logger import setup_logger, teardown_logger
from daterange.errors import CannotShiftByDaysError
from daterange.schemas import RangeKind
from daterange.timezone import to_aware


@pytest.fixture(autouse=True)
def remove_daterange_sinks():
    yield
    teardown_logger()


def _fail_to_compute_range():
    with pytest.raises(CannotShiftByDaysError):
        compute_range(RangeKind.LAST_NINETY_DAYS, datetime(1, 1, 5, tzinfo=timezone.utc), policy=CalendarPolicy.utc())


def test_setup_logger_writes_daterange_records_to_file(tmp_path):
    log_file = tmp_path / "logs" / "daterange.log"

    handler_ids = setup_logger(level="DEBUG", log_file=str(log_file), console=False)
    to_aware(datetime(2021, 1, 1, 12))
    logger.info("outside the package")
    logger.complete()

    contents = log_file.read_text()
    assert len(handler_ids) == 1
    assert "daterange logging enabled with level=DEBUG" in contents
    assert "Interpreting naive datetime 2021-01-01T12:00:00 as UTC" in contents
    assert "outside the package" not in contents


def test_level_defaults_to_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("DATERANGE_LOG_LEVEL", "warning")
    monkeypatch.setattr(settings_module, "settings", Settings(_env_file=None))
    log_file = tmp_path / "daterange.log"

    setup_logger(log_file=str(log_file), console=False)
    to_aware(datetime(2021, 1, 1, 12))
    _fail_to_compute_range()

    contents = log_file.read_text()
    assert "Interpreting naive datetime" not in contents
    assert "Failed to create date range for Last 90 Days" in contents


def test_setup_logger_replaces_previous_sinks(tmp_path):
    first = setup_logger(level="INFO", log_file=str(tmp_path / "first.log"), console=False)
    second = setup_logger(level="INFO", log_file=str(tmp_path / "second.log"), console=False)
    _fail_to_compute_range()

    assert set(first).isdisjoint(second)
    assert "Failed to create date range" not in (tmp_path / "first.log").read_text()
    assert "Failed to create date range" in (tmp_path / "second.log").read_text()


def test_teardown_leaves_other_sinks_in_place():
    messages = []
    handler_id = logger.add(messages.append, level="INFO")

    setup_logger(level="INFO", console=True)
    teardown_logger()
    logger.info("still delivered")

    logger.remove(handler_id)
    assert any("still delivered" in message for message in messages)


def test_records_are_silent_until_enabled():
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG")

    _fail_to_compute_range()

    logger.remove(handler_id)
    assert not any("Failed to create date range" in message for message in messages)
