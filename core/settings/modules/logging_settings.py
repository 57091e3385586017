from __future__ import annotations

import logging

from pydantic import field_validator

from core.settings.base import HandlersBaseSettings

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class LoggingSettings(HandlersBaseSettings):
    """
    Logging configuration.

    Environment:
        HANDLERS_LOG_LEVEL   -> log_level
        HANDLERS_LOG_FORMAT  -> log_format
    """

    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
