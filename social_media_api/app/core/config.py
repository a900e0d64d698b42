"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the API starts with
no configuration at all; override them via environment variables in a
real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Social Media API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Level of the ``social_media_api`` loggers (DAOs, services, handlers).
    # Empty means "same as LOG_LEVEL".  APP_LOG_LEVEL=WARNING hides the
    # per-request INFO records (created rows, rejected input) and keeps
    # storage failures.
    app_log_level: str = os.getenv("APP_LOG_LEVEL", "")

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite database file.  If a relative path is provided,
    # it is resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "social_media.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
