#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "MacroableModels"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "testing", "production"] = "development"

    # ── Logging ────────────────────────────────────────────────────────────

    log_level: str = "INFO"

    # ── Database ───────────────────────────────────────────────────────────

    database_url: str = "sqlite+aiosqlite:///./macroable.db"
    # For tests, override to: "sqlite+aiosqlite:///:memory:"
    db_echo: bool = False

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
