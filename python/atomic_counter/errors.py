"""Custom exceptions for the counter service."""

from __future__ import annotations


class CounterError(RuntimeError):
    """Base error for the counter service."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidFormError(CounterError):
    """Raised when a submitted form carries neither an action nor an identity."""

    def __init__(self, message: str = "Invalid form data"):
        super().__init__(message, status_code=400)


class ConfigError(CounterError):
    """Raised when service configuration is invalid."""
