"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svg2vector_env: str = "development"
    svg2vector_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Conversion defaults, used when a request leaves them out
    default_width: str = "24"
    default_height: str = "24"
    default_fill: str = "#000000"
    pretty_print: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
