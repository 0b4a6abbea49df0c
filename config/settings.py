"""
Centralized configuration settings for the application.
"""

import math
import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_API_URL = "https://restcountries.com/v3.1/all"


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    """Read a positive float from the environment, falling back on bad input."""
    value = os.getenv(name)
    if not value:
        return default
    try:
        number = float(value)
    except ValueError:
        return default
    if not math.isfinite(number) or number <= 0:
        return default
    return number


@dataclass
class Settings:
    """Application settings container."""

    # API Configuration
    api_url: str = field(default_factory=lambda: os.getenv("COUNTRIES_API_URL", DEFAULT_API_URL))
    request_timeout: float = field(default_factory=lambda: _env_float("COUNTRIES_REQUEST_TIMEOUT", 30))
    user_agent: str = "country-explorer/1.0"

    # Logging Configuration
    # WARNING keeps the interactive console clean; INFO shows fetch progress
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Display Configuration
    show_initial_listing: bool = field(default_factory=lambda: _env_bool("SHOW_INITIAL_LISTING", True))


# Singleton settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
