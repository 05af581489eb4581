from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutSettings(BaseSettings):
    min_height_percent: float = Field(
        default=2.0,
        validation_alias="LAYOUT_MIN_HEIGHT_PERCENT",
        description="Smallest height a day event may get (about 30 minutes of visual height)",
    )
    default_height_percent: float = Field(
        default=5.0,
        validation_alias="LAYOUT_DEFAULT_HEIGHT_PERCENT",
        description="Height used when an event is missing its start or end",
    )
    log_level: str = Field(default="INFO", validation_alias="LAYOUT_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LAYOUT_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LAYOUT_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LAYOUT_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("min_height_percent", "default_height_percent")
    @classmethod
    def validate_percent(cls, value: float) -> float:
        if value <= 0 or value > 100:
            raise ValueError(f"Height percentages must be in (0, 100], got {value}")
        return value


settings = LayoutSettings()
