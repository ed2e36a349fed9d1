"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    drawable_viewer_env: str = "development"
    drawable_viewer_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Directory the HTTP surface is allowed to read drawables from
    resource_root: str = "."

    # Icon loading
    thumbnail_size: int = Field(default=24, gt=0)
    vector_suffix: str = ".xml"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
