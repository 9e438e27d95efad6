"""Error definitions for SmartDate.

The parsing engine itself never raises on malformed input; it answers "no
result" instead. These errors cover the surfaces around it: loading settings
and reading CLI arguments.

Usage:
    from smartdate.errors import SmartDateError, format_error_for_cli

    try:
        settings = resolve_settings(path)
    except SmartDateError as e:
        print(format_error_for_cli(e))
"""

from __future__ import annotations

from smartdate.errors.user_messages import (
    format_error_for_cli,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class SmartDateError(Exception):
    """Base exception for all SmartDate errors.

    Attributes:
        code: Error code for categorization
        details: Additional error details for debugging
    """

    code: str = "SMARTDATE_ERROR"
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class SettingsError(SmartDateError):
    """Settings could not be loaded or failed validation."""

    code = "SETTINGS_ERROR"
    default_message = "Invalid settings"


class SettingsNotFoundError(SettingsError):
    """Settings file does not exist."""

    code = "SETTINGS_NOT_FOUND"
    default_message = "Settings file not found"


# =============================================================================
# Input Errors
# =============================================================================


class InvalidReferenceTimeError(SmartDateError):
    """A reference time given on the command line is not ISO 8601."""

    code = "INVALID_REFERENCE_TIME"
    default_message = "Invalid reference time"


__all__ = [
    "SmartDateError",
    "SettingsError",
    "SettingsNotFoundError",
    "InvalidReferenceTimeError",
    "format_error_for_cli",
    "get_user_message",
    "get_recovery_suggestion",
]
