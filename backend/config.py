"""
Service settings, read from the environment (or a local ``.env``) by
pydantic-settings.  Only presentation and logging knobs live here; the
listener address and the two routes are fixed in ``main.py``.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Top-level application settings."""

    # ── App ──────────────────────────────────────────────────────────
    APP_TITLE: str = "Greeting Service"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


def get_settings() -> Settings:
    return Settings()
