"""Loguru sinks for daterange.

The package disables its own loguru records on import. Applications that
want them call setup_logger once at startup; the sinks it adds only receive
daterange records and are the only sinks teardown_logger removes.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

_handler_ids: list[int] = []


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    console: bool = True,
) -> list[int]:
    """Enable daterange logging with console and optional file output.

    Calling it again replaces the sinks from the previous call.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to DATERANGE_LOG_LEVEL.
        log_file: Optional path to log file. If None, only console logging.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
        console: Add a colorized stderr sink

    Returns:
        Loguru handler ids of the sinks added
    """
    if level is None:
        from daterange.config.settings import settings

        level = settings.log_level

    teardown_logger()

    if console:
        _handler_ids.append(
            logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True, filter="daterange")
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _handler_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMAT,
                level=level,
                filter="daterange",
                rotation=rotation,
                retention=retention,
                compression="zip",
                backtrace=True,
                diagnose=True,
            )
        )

    logger.enable("daterange")
    logger.info(f"daterange logging enabled with level={level}")
    return list(_handler_ids)


def teardown_logger() -> None:
    """Remove the sinks added by setup_logger and silence daterange records."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable("daterange")
