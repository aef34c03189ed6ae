"""
Configuration management for the Forkify recipe client.

This module centralizes environment variable loading from the .env file at the
project root. It is imported by the connector and the storage layer so .env is
loaded before any other code reads the environment.

When no .env exists (CI, containers), load_dotenv() is a no-op and plain
environment variables are used instead.

Environment Variables:
- FORKIFY_API_URL: Optional, base recipes endpoint (trailing slash kept)
- FORKIFY_RES_PER_PAGE: Optional, search results per page (default: 10)
- FORKIFY_KEY: Required only for recipe uploads
- FORKIFY_TIMEOUT_SEC: Optional, HTTP timeout in seconds (default: 10)
- FORKIFY_STORAGE_PATH: Optional, JSON file backing the bookmark store
- FORKIFY_LOG_LEVEL: Optional, logging level for setup_logging (default: INFO)
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from forkify.errors import ConfigError

DEFAULT_API_URL = "https://forkify-api.herokuapp.com/api/v2/recipes/"
DEFAULT_RES_PER_PAGE = 10
DEFAULT_TIMEOUT_SEC = 10
DEFAULT_STORAGE_PATH = ".forkify_storage.json"
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is two levels up from this file (forkify/config.py).
    override=False means variables already in the environment take precedence.
    Safe to call multiple times.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


def _get_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ConfigError(f"{name} must be at least 1, got {value}")
    return value


class ForkifyConfig:
    """Configuration for the Forkify API and local state."""

    @staticmethod
    def get_api_url() -> str:
        """
        Get the base recipes URL.

        Returns:
            URL string ending in a slash, so recipe ids can be appended directly.
        """
        url = os.getenv("FORKIFY_API_URL", DEFAULT_API_URL)
        return url if url.endswith("/") else f"{url}/"

    @staticmethod
    def get_res_per_page() -> int:
        """
        Get the number of search results shown per page.

        Raises:
            ConfigError: If FORKIFY_RES_PER_PAGE is not a positive integer
        """
        return _get_positive_int("FORKIFY_RES_PER_PAGE", DEFAULT_RES_PER_PAGE)

    @staticmethod
    def get_key() -> Optional[str]:
        """
        Get the API key used for uploads.

        Returns:
            Key string or None if not set

        Note:
            This does not raise an error - uploads validate the key themselves.
        """
        return os.getenv("FORKIFY_KEY") or None

    @staticmethod
    def get_timeout_sec() -> int:
        """Get the HTTP request timeout in seconds."""
        return _get_positive_int("FORKIFY_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC)

    @staticmethod
    def get_storage_path() -> Path:
        """Get the path of the JSON file that backs the bookmark store."""
        return Path(os.getenv("FORKIFY_STORAGE_PATH", DEFAULT_STORAGE_PATH))

    @staticmethod
    def get_log_level() -> str:
        return os.getenv("FORKIFY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def validate_upload_config() -> str:
    """
    Return the upload key, failing when it is missing.

    Raises:
        ConfigError: If FORKIFY_KEY is not set
    """
    key = ForkifyConfig.get_key()
    if not key:
        raise ConfigError(
            "FORKIFY_KEY is not set. Please add it to your .env file at the project root:\n"
            "FORKIFY_KEY=your_forkify_api_key_here"
        )
    return key
