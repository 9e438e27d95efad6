"""User-friendly error messages for SmartDate.

Maps error codes to human-readable messages and recovery suggestions so the
CLI never shows raw tracebacks for configuration or argument problems.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    "SETTINGS_ERROR": "The SmartDate configuration is invalid.",
    "SETTINGS_NOT_FOUND": "The SmartDate configuration file wasn't found.",
    "INVALID_REFERENCE_TIME": "The reference time couldn't be read.",
    "SMARTDATE_ERROR": "An unexpected error occurred. Please try again.",
    "UNKNOWN_ERROR": "Something went wrong. Please try again.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    "SETTINGS_ERROR": "Check the JSON keys and value ranges, e.g. min_confidence between 0.3 and 1.0.",
    "SETTINGS_NOT_FOUND": "Pass an existing file with --config or omit it to use defaults.",
    "INVALID_REFERENCE_TIME": "Use ISO format, e.g. --now 2024-01-17T10:30.",
    "SMARTDATE_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "If this persists, please report the issue.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error or error code."""
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error or error code."""
    return RECOVERY_SUGGESTIONS.get(_error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"])


def format_error_for_cli(error: Any) -> str:
    """Format error for CLI output.

    Args:
        error: The error to format

    Returns:
        Message, suggestion and (non-sensitive) details on separate lines
    """
    code = getattr(error, "code", "ERROR")
    lines = [
        f"Error [{code}]: {get_user_message(error)}",
        f"Suggestion: {get_recovery_suggestion(error)}",
    ]

    details = getattr(error, "details", None)
    if details:
        lines.append("Details:")
        for key, value in details.items():
            lines.append(f"  {key}: {value}")

    return "\n".join(lines)
