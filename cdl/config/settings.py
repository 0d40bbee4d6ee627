"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from cdl.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self._parse_log_level(
            self._get_env("CDL_LOG_LEVEL", "WARNING")
        )
        self.ls_command: Optional[str] = self._get_optional_env("CDL_LS_COMMAND")
        self.ls_timeout: float = self._parse_timeout(
            self._get_env("CDL_LS_TIMEOUT", "15")
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_optional_env(self, key: str) -> Optional[str]:
        """Get an environment variable, treating blank values as unset."""
        value = os.getenv(key, "").strip()
        return value or None

    def _parse_log_level(self, value: str) -> int:
        """Convert a level name such as 'INFO' to its logging constant."""
        level = logging.getLevelName(value.strip().upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid CDL_LOG_LEVEL: {value!r}")
        return level

    def _parse_timeout(self, value: str) -> float:
        """Parse the listing timeout in seconds."""
        try:
            timeout = float(value)
        except ValueError:
            raise ConfigurationError(f"Invalid CDL_LS_TIMEOUT: {value!r}")
        if timeout <= 0:
            raise ConfigurationError(f"CDL_LS_TIMEOUT must be positive, got {value!r}")
        return timeout
