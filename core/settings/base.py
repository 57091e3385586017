# core/settings/base.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class HandlersBaseSettings(BaseSettings):
    """Shared config: HANDLERS_* environment variables, optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HANDLERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
