"""Protocols for dependency injection.

The client and the import pipeline depend on these structural types
rather than on concrete classes, so tests and alternative transports
can be plugged in.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx

if TYPE_CHECKING:
    from .models.config import RetryConfig
    from .models.template import Template


@runtime_checkable
class ConfigProvider(Protocol):
    """Anything that can configure a client (ZenConfig satisfies it)."""

    def get_base_url(self) -> str: ...

    def get_api_token(self) -> str | None: ...

    @property
    def timeout(self) -> float: ...

    @property
    def max_connections(self) -> int: ...

    @property
    def verify_ssl(self) -> bool: ...

    @property
    def retry(self) -> "RetryConfig": ...


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Subset of httpx.AsyncClient used by AsyncClient."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response: ...

    async def aclose(self) -> None: ...


@runtime_checkable
class TemplateCreator(Protocol):
    """Remote mutation capability consumed by the template importer.

    Implementations create one template per call and raise on failure.
    They are not expected to deduplicate.
    """

    async def create_template(self, payload: dict[str, Any]) -> "Template": ...
