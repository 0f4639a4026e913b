"""Base HTTP client for the Zen notes API.

Holds everything that does not depend on the I/O model: URL and header
construction, HTTP error mapping and the retry policy.
"""

import logging
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
    ZenError,
)
from ..exceptions import (
    ConnectionError as ZenConnectionError,
)
from ..protocols import ConfigProvider

logger = logging.getLogger(__name__)

# Methods that are safe to send twice. Creates are not retried.
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "PUT", "DELETE"})


class BaseClient:
    """Base HTTP client for Zen API operations.

    Not intended to be used directly - use AsyncClient instead.
    """

    def __init__(self, config: ConfigProvider) -> None:
        """Initialize the base client.

        Args:
            config: Configuration provider (typically ZenConfig)
        """
        self.config = config
        self.base_url = config.get_base_url()
        self._api_token = config.get_api_token()

        logger.info(f"Initialized Zen client for {self.base_url}")

    def _get_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Build request headers, adding the bearer token when configured."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _build_url(self, endpoint: str) -> str:
        """Build full URL for an endpoint.

        Args:
            endpoint: API endpoint path (e.g., "templates" or "/api/tags/3")

        Returns:
            Complete URL
        """
        endpoint = endpoint.strip("/")

        if not endpoint.startswith("api/"):
            endpoint = f"api/{endpoint}"

        return f"{self.base_url}/{endpoint}"

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Raise the exception matching an HTTP error response.

        Args:
            response: HTTPX response object

        Raises:
            Appropriate ZenError subclass based on status code
        """
        status_code = response.status_code

        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        error_message = response.text or f"HTTP {status_code}"
        error_details: dict[str, Any] = {}
        if isinstance(error_data, dict):
            error = error_data.get("error", error_data)
            if isinstance(error, dict):
                error_message = error.get("message", error_message)
                error_details = error.get("details") or {}
            elif isinstance(error, str):
                error_message = error

        if status_code == 401:
            raise AuthenticationError(
                f"Authentication failed: {error_message}", details=error_details
            )
        elif status_code == 403:
            raise AuthorizationError(
                f"Authorization failed: {error_message}", details=error_details
            )
        elif status_code == 404:
            raise NotFoundError(f"Resource not found: {error_message}", details=error_details)
        elif status_code == 400:
            raise ValidationError(f"Validation error: {error_message}", details=error_details)
        elif status_code == 409:
            raise ConflictError(f"Conflict: {error_message}", details=error_details)
        elif status_code == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            raise RateLimitError(
                f"Rate limit exceeded: {error_message}",
                retry_after=retry_seconds,
                details=error_details,
            )
        elif 500 <= status_code < 600:
            raise ServerError(
                f"Server error: {error_message}",
                status_code=status_code,
                details=error_details,
            )
        else:
            raise ZenError(
                f"Unexpected error (HTTP {status_code}): {error_message}",
                details=error_details,
            )

    def _create_retry_decorator(self, method: str) -> Any:
        """Create a retry decorator for one HTTP method.

        Non-idempotent methods get a single attempt.

        Returns:
            Configured tenacity retry decorator
        """
        retry_config = self.config.retry
        attempts = retry_config.max_attempts if method.upper() in IDEMPOTENT_METHODS else 1

        return retry(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(
                multiplier=retry_config.exponential_base,
                min=retry_config.initial_wait,
                max=retry_config.max_wait,
            ),
            retry=retry_if_exception_type((ServerError, ZenConnectionError)),
            reraise=True,
        )
