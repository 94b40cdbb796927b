"""Library settings and logging configuration."""

import json
import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER = "isitvalid"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from ISITVALID_* environment variables.

    Only logging is configurable. Validation defaults are fixed constants and
    never read from the environment.
    """

    log_level: str = "WARNING"
    log_format: str = "text"  # text, json

    model_config = SettingsConfigDict(
        env_prefix="ISITVALID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level against the standard level names."""
        level = str(v).upper()
        valid_levels = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {sorted(valid_levels)}, got {level}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        valid_formats = {"text", "json"}
        log_format = str(v).lower()
        if log_format not in valid_formats:
            raise ValueError(f"Log format must be one of {valid_formats}, got {log_format}")
        return log_format


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger using ``settings``.

    The root logger is left untouched. Calling this again replaces the handler
    installed by the previous call.

    Args:
        settings: Settings to apply; defaults to get_settings()

    Returns:
        The configured package logger

    """
    settings = settings or get_settings()
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(package_logger.handlers):
        if handler.get_name() == PACKAGE_LOGGER:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(PACKAGE_LOGGER)
    if settings.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)
    logger.debug(f"Logging configured: level={settings.log_level} format={settings.log_format}")
    return package_logger


__all__ = ["JsonFormatter", "Settings", "configure_logging", "get_settings"]
