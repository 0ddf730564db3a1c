"""
Configuration management for Recipe Search.

This module centralizes environment variable loading from .env file at project root.
It should be imported early by the Streamlit frontend (streamlit_app/app.py) to ensure
.env is loaded before any other code accesses environment variables.

When no .env exists, load_dotenv() is safe to call and will no-op. Every setting has
a default, so the app talks to the public TheMealDB endpoint out of the box.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1/1"
- MEALDB_CONNECT_TIMEOUT: Optional, connect timeout in seconds (default: 30)
- MEALDB_READ_TIMEOUT: Optional, read timeout in seconds (default: 30)
- LOG_LEVEL: Optional, logging level for the Streamlit app (default: INFO)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_TIMEOUT_SECONDS = 30.0


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is found by going up from this file's location
    (recipe_search/config.py -> project root).

    Safe to call multiple times. Existing environment variables take precedence.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be a number of seconds, got {raw!r}") from e


class MealDBConfig:
    """Configuration for the TheMealDB connector."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the TheMealDB API base URL.

        Returns:
            Base URL with trailing slash removed
            (default: "https://www.themealdb.com/api/json/v1/1")
        """
        return os.getenv("MEALDB_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    @staticmethod
    def get_connect_timeout() -> float:
        """
        Get the connect timeout in seconds.

        Raises:
            RuntimeError: If MEALDB_CONNECT_TIMEOUT is set but not a number
        """
        return _get_float("MEALDB_CONNECT_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)

    @staticmethod
    def get_read_timeout() -> float:
        """
        Get the read timeout in seconds.

        Raises:
            RuntimeError: If MEALDB_READ_TIMEOUT is set but not a number
        """
        return _get_float("MEALDB_READ_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)


def get_log_level() -> str:
    """Logging level name for the app entry point (default: "INFO")."""
    return os.getenv("LOG_LEVEL", "INFO").upper()
