"""
Logging infrastructure.

Provides logging utilities shared by the core and orchestration layers.
"""
import logging

from core.settings import LoggingSettings, get_app_settings

# Loggers configured by configure_logging
ROOT_LOGGERS = ("core", "orchestration")


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Loggers under ROOT_LOGGERS are left bare; configure_logging owns their
    handlers and levels.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if _is_managed(name):
        return logger
    if not logger.hasHandlers():
        settings = get_app_settings().logging
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.log_format))
        logger.addHandler(handler)
        logger.setLevel(settings.log_level)
    return logger


def _is_managed(name: str) -> bool:
    return any(name == root or name.startswith(f"{root}.") for root in ROOT_LOGGERS)


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """
    Apply level and format to the package loggers.

    Replaces handlers previously attached by this function, so calling
    it again with new settings takes effect.

    Args:
        settings: Logging settings (defaults to application settings)
    """
    settings = settings or get_app_settings().logging
    formatter = logging.Formatter(settings.log_format)
    for name in ROOT_LOGGERS:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if getattr(handler, "_handlers_managed", False):
                logger.removeHandler(handler)
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        handler._handlers_managed = True
        logger.addHandler(handler)
        logger.setLevel(settings.log_level)
