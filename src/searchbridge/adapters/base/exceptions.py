"""Adapter-specific exceptions."""

from __future__ import annotations

from typing import Any


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter cannot connect to the search backend."""


class ApiError(AdapterError):
    """Raised when the search backend answers with a non-success HTTP status.

    Args:
        http_status: HTTP status code returned by the backend.
        message: Error message reported by the backend.
        code: Backend-specific error code, if any.
        body: Decoded error payload, if any.
    """

    def __init__(
        self,
        http_status: int,
        message: str = "",
        code: str | None = None,
        body: dict[str, Any] | None = None,
    ) -> None:
        self.http_status = http_status
        self.message = message
        self.code = code
        self.body = body or {}
        super().__init__(f"HTTP {http_status}: {message}" + (f" ({code})" if code else ""))


class UnsupportedConditionError(AdapterError, NotImplementedError):
    """Raised when a filter condition type cannot be compiled by the adapter."""

    def __init__(self, condition: object) -> None:
        self.condition_type = type(condition).__name__
        super().__init__(f"{self.condition_type} filter not implemented.")


class DuplicateSearchConditionError(AdapterError, ValueError):
    """Raised when a request carries more than one free-text ``SearchCondition``."""


class MalformedHighlightError(AdapterError, AssertionError):
    """Raised when a backend hit lacks the highlight data that was requested."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""
