from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from daterange.schemas import Weekday


class Settings(BaseSettings):
    timezone: str = Field(
        default="",  # Empty means the system local zone
        validation_alias="DATERANGE_TIMEZONE",
        description="IANA zone name used for day, week and month boundaries",
    )
    week_start: Weekday = Field(
        default=Weekday.SUNDAY,
        validation_alias="DATERANGE_WEEK_START",
        description="Day the calendar week starts on",
    )
    log_level: str = Field(default="INFO", validation_alias="DATERANGE_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DATERANGE_",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Validate that the timezone names a zone known to zoneinfo."""
        value = (value or "").strip()
        if not value:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{value}'. Use an IANA name such as 'Europe/London'.") from e
        return value

    @field_validator("week_start", mode="before")
    @classmethod
    def normalize_week_start(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value


settings = Settings()
