"""
Exception hierarchy for the Instatus provider.

Provides layered exception structure for configuration, API client and
resource operation errors. All exceptions include context for debugging,
and any of them can be rendered as host diagnostics.

Dependencies: None (pure domain layer)
System role: Centralized error model surfaced to the Pulumi engine
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single user-facing problem report."""

    severity: Severity
    summary: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.summary}: {self.detail}"
        return self.summary


class InstatusProviderException(Exception):
    """Base exception for all Instatus provider errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(InstatusProviderException):
    """Raised when required provider configuration is missing or invalid."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        """
        Initialize configuration error.

        Args:
            diagnostics: Every configuration problem found, in schema order
        """
        self.diagnostics = list(diagnostics)
        message = "; ".join(str(d) for d in self.diagnostics) or "Invalid provider configuration"
        super().__init__(message)


class InstatusAPIError(InstatusProviderException):
    """Base exception for Instatus API client errors."""

    pass


class RequestConstructionError(InstatusAPIError):
    """Raised when a request body or request object cannot be built."""

    pass


class InstatusConnectionError(InstatusAPIError):
    """Raised when the API cannot be reached or the request times out."""

    pass


class APIResponseError(InstatusAPIError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(
        self,
        status_code: int,
        body: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize API response error.

        Args:
            status_code: HTTP status code returned by the API
            body: Raw response body, reported verbatim
            details: Additional context
        """
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {body}", details)


class ResponseDecodeError(InstatusAPIError):
    """Raised when a response body is not the expected JSON document."""

    pass


class ResourceOperationError(InstatusProviderException):
    """Raised when a resource CRUD operation fails."""

    def __init__(self, operation: str, cause: Exception) -> None:
        """
        Initialize resource operation error.

        Args:
            operation: Verb of the failed operation (creating, reading, ...)
            cause: Underlying error
        """
        self.operation = operation
        self.cause = cause
        super().__init__(f"error {operation} component: {cause}")


def diagnostics_from_error(error: Exception) -> list[Diagnostic]:
    """
    Convert an error into host diagnostics.

    Args:
        error: Any exception raised by the provider

    Returns:
        list[Diagnostic]: The error's own diagnostics, or a single error entry
    """
    if isinstance(error, ConfigurationError):
        return list(error.diagnostics)
    return [Diagnostic(severity=Severity.ERROR, summary=str(error))]
