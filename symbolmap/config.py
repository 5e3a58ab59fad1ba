"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    symbolmap_env: str = "development"
    symbolmap_log_level: str = "info"

    # Sprite defaults
    symbolmap_default_prefix: str = "i"
    symbolmap_extension: str = "svg"

    # CORS
    symbolmap_cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
