# Settings modules
from .app_settings import AppSettings, get_app_settings
from .logging_settings import DEFAULT_LOG_FORMAT, LoggingSettings
from .pipeline_settings import PipelineSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "DEFAULT_LOG_FORMAT",
    "LoggingSettings",
    "PipelineSettings",
]
