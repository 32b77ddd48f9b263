"""Etymon application configuration via environment variables.

Only the app shell (logging, CORS, health output) reads these. Provider
credentials are never configured here; they arrive with each request.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global application settings loaded from environment / .env file."""

    # General
    etymon_env: str = "development"
    etymon_debug: bool = True

    # CORS — the browser front-end may be served from anywhere
    cors_allow_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
