"""
Error types shared by the Passport AutoFill tools and service layer.

The document parser itself never raises: missing or malformed fields are
reported as errors/warnings on the returned record. These exceptions cover the
standalone tools (date checks, form payloads) and the HTTP layer.
"""

from __future__ import annotations


class PassportAutofillError(Exception):
    """Base exception for all Passport AutoFill errors."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """Initialize Passport AutoFill error."""
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidInputError(PassportAutofillError):
    """Exception raised when user supplied input cannot be interpreted."""

    def __init__(self, message: str, error_code: str = "INVALID_INPUT") -> None:
        super().__init__(message, error_code)


class ConfigurationError(PassportAutofillError):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, error_code: str = "CONFIGURATION_ERROR") -> None:
        super().__init__(message, error_code)


__all__ = ["ConfigurationError", "InvalidInputError", "PassportAutofillError"]
