"""
Configuration Management

Handles application configuration and environment variables.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"


def _int_env(name, default):
    """Read an integer environment variable, falling back on bad values."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


class Config:
    """Default settings, overridable through environment variables."""

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'storefront.db'}")

    # Seconds before the session marker is treated as stale; 0 disables expiry
    SESSION_MAX_AGE = _int_env("SESSION_MAX_AGE", 0)

    RESET_REDIRECT_DELAY_MS = _int_env("RESET_REDIRECT_DELAY_MS", 1000)
    NAVBAR_SCROLL_THRESHOLD = _int_env("NAVBAR_SCROLL_THRESHOLD", 50)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class TestConfig(Config):
    """Settings used by the test-suite."""

    TESTING = True
    SECRET_KEY = "test-secret-key"
    DATABASE_URL = "sqlite://"
    SESSION_MAX_AGE = 0
