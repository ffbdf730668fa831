"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from geopattern.engine.config import DEFAULT_BASE_COLOR


class Settings(BaseSettings):
    geopattern_env: str = "development"
    geopattern_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Base color for API requests that don't send one
    default_base_color: str = DEFAULT_BASE_COLOR

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
