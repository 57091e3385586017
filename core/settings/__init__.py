# Settings package
from core.settings.modules import AppSettings, LoggingSettings, PipelineSettings, get_app_settings

__all__ = ["get_app_settings", "AppSettings", "LoggingSettings", "PipelineSettings"]
