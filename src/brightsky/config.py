"""Client configuration pulled from environment variables via pydantic."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.brightsky.dev/"


class Settings(BaseSettings):
    """Environment-driven defaults for Bright Sky clients."""

    model_config = SettingsConfigDict(env_prefix="BRIGHTSKY_", extra="ignore")

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "brightsky-client/0.1"


settings = Settings()
