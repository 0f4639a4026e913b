"""Exception hierarchy for zen-kit.

All exceptions raised by the client and the import/export pipeline
derive from ZenError, so callers can catch a single base class.
"""

from typing import Any


class ZenError(Exception):
    """Base exception for all zen-kit errors.

    Attributes:
        message: Human-readable error message
        details: Extra context (server error payload, offending field, etc.)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ZenError):
    """Raised when client configuration is invalid or missing."""


# HTTP errors


class AuthenticationError(ZenError):
    """Raised on HTTP 401."""


class AuthorizationError(ZenError):
    """Raised on HTTP 403."""


class NotFoundError(ZenError):
    """Raised on HTTP 404."""


class ValidationError(ZenError):
    """Raised on HTTP 400 (the server rejected the payload)."""


class ConflictError(ZenError):
    """Raised on HTTP 409."""


class RateLimitError(ZenError):
    """Raised on HTTP 429.

    Attributes:
        retry_after: Seconds to wait before retrying, if the server said so
    """

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.retry_after = retry_after


class ServerError(ZenError):
    """Raised on HTTP 5xx."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


# Network errors


class NetworkError(ZenError):
    """Base class for transport-level failures."""


class ConnectionError(NetworkError):  # noqa: A001
    """Raised when the API server cannot be reached."""


class TimeoutError(NetworkError):  # noqa: A001
    """Raised when a request exceeds the configured timeout."""


# Import/export errors


class ImportExportError(ZenError):
    """Base class for template import/export failures."""


class FormatError(ImportExportError):
    """Raised when an export artifact is malformed or has the wrong shape."""


class TemplateCreateError(ImportExportError):
    """Raised when the remote create call for one template fails.

    Attributes:
        index: Position of the failing template in the artifact
    """

    def __init__(
        self,
        message: str,
        index: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.index = index
