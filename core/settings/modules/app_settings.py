from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.logging_settings import LoggingSettings
from core.settings.modules.pipeline_settings import PipelineSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingSettings
    pipeline: PipelineSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        logging=LoggingSettings(),
        pipeline=PipelineSettings(),
    )
