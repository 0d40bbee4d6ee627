"""
Custom exceptions and return codes for the application.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process return codes."""

    SUCCESS = 0
    GENERAL = 1
    CHDIR = 2


class BaseAppError(Exception):
    """Base exception class for application errors."""

    exit_code: ExitCode = ExitCode.GENERAL


class ListingError(BaseAppError):
    """Exception raised when the listing binary is missing or fails."""

    pass


class DirectoryChangeError(BaseAppError):
    """Exception raised when the target directory cannot be entered."""

    exit_code = ExitCode.CHDIR


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
