"""
PlantCare — Centralized configuration.

Loads all settings from .env and validates them.
Every module that needs the civil timezone or display format imports from here.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

# Load .env from project root (one level up from plantcare/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)

# Names accepted by logging.basicConfig(level=...)
_LOG_LEVELS = frozenset({
    "CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET",
})


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Civil timezone that decides where "today" starts and ends
    TIMEZONE: str = "America/Sao_Paulo"

    # strftime pattern for dates inside status text
    DATE_DISPLAY_FORMAT: str = "%d/%m/%Y"

    # Max event rows pulled per household for the dashboard
    EVENT_HISTORY_LIMIT: int = 2000

    LOG_LEVEL: str = "INFO"

    @field_validator("TIMEZONE")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {v!r}") from exc
        return v

    @field_validator("EVENT_HISTORY_LIMIT", mode="before")
    @classmethod
    def parse_limit(cls, v: str | int) -> int:
        limit = int(v)
        if limit <= 0:
            raise ValueError("EVENT_HISTORY_LIMIT must be positive")
        return limit

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_level(cls, v: str) -> str:
        level = v.strip().upper() or "INFO"
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level


def _load_settings() -> Settings:
    """Load settings from environment, exiting on invalid values."""
    try:
        return Settings(
            TIMEZONE=os.getenv("TIMEZONE", "America/Sao_Paulo"),
            DATE_DISPLAY_FORMAT=os.getenv("DATE_DISPLAY_FORMAT", "%d/%m/%Y"),
            EVENT_HISTORY_LIMIT=os.getenv("EVENT_HISTORY_LIMIT", "2000"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        )
    except ValidationError as exc:
        print(f"ERROR: invalid configuration in .env\n{exc}", file=sys.stderr)
        sys.exit(1)


# Singleton — imported by all other modules as:
#   from plantcare.config import settings
settings = _load_settings()
