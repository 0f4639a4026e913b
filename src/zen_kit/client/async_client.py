"""Asynchronous HTTP client for the Zen notes API.

This module provides non-blocking I/O for templates, tags and focus
modes. It is the default create capability used by the template
importer.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import (
    ConnectionError as ZenConnectionError,
)
from ..exceptions import (
    FormatError,
)
from ..exceptions import (
    TimeoutError as ZenTimeoutError,
)
from ..models.notes import FocusMode, Tag
from ..models.template import Template
from ..protocols import AsyncHTTPClient, ConfigProvider
from .base import BaseClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class AsyncClient(BaseClient):
    """Asynchronous HTTP client for the Zen notes API.

    Example:
        ```python
        import asyncio
        from zen_kit import AsyncClient, ZenConfig

        async def main():
            config = ZenConfig(base_url="http://localhost:8080")

            async with AsyncClient(config) as client:
                templates = await client.list_templates()
                print(len(templates))

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: AsyncHTTPClient | None = None,
    ) -> None:
        """Initialize the asynchronous client.

        Args:
            config: Configuration provider (typically ZenConfig)
            http_client: Async HTTP client (defaults to httpx.AsyncClient with pooling)
        """
        super().__init__(config)

        self._client: AsyncHTTPClient | httpx.AsyncClient = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create default async HTTP client with connection pooling."""
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    async def __aenter__(self) -> "AsyncClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
        logger.info("Closed asynchronous Zen client")

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request to the Zen API.

        Idempotent methods are retried on server and connection errors;
        POST is sent exactly once.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint path
            params: URL query parameters
            json: JSON request body
            headers: Additional headers

        Returns:
            Decoded JSON body, or None for empty responses

        Raises:
            ZenError: On API errors (after retries exhausted)
            ConnectionError: On connection failures
            TimeoutError: On request timeout
            FormatError: If the body is not JSON
        """
        retry_decorator = self._create_retry_decorator(method)

        @retry_decorator  # type: ignore[untyped-decorator]
        async def _do_request() -> Any:
            url = self._build_url(endpoint)
            request_headers = self._get_headers(headers)

            logger.debug(f"{method} {url} params={params}")

            try:
                response = await self._client.request(
                    method=method,
                    url=url,
                    params=params,
                    json=json,
                    headers=request_headers,
                )
            except httpx.ConnectError as e:
                raise ZenConnectionError(f"Failed to connect to {self.base_url}: {e}") from e
            except httpx.TimeoutException as e:
                raise ZenTimeoutError(
                    f"Request timed out after {self.config.timeout}s: {e}"
                ) from e

            if not response.is_success:
                self._handle_error_response(response)

            if response.status_code == 204 or not response.content:
                logger.debug(f"Response: {response.status_code} (no content)")
                return None

            try:
                data = response.json()
            except ValueError as json_error:
                content_type = response.headers.get("content-type", "unknown")
                raise FormatError(
                    f"Received non-JSON response (content-type: {content_type})",
                    details={"body_preview": response.text[:500]},
                ) from json_error

            logger.debug(f"Response: {response.status_code}")
            return data

        return await _do_request()

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, json: Any) -> Any:
        return await self.request("POST", endpoint, json=json)

    async def put(self, endpoint: str, json: Any) -> Any:
        return await self.request("PUT", endpoint, json=json)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)

    # Templates

    async def list_templates(self) -> list[Template]:
        """Fetch all templates."""
        data = await self.get("templates")
        return self._parse_list(Template, data, "templates")

    async def create_template(self, payload: dict[str, Any] | Template) -> Template:
        """Create a template.

        The payload is sent as-is; strip server-assigned fields first
        when re-creating an existing template.

        Args:
            payload: Template fields in wire (camelCase) shape, or a Template

        Returns:
            The template as stored by the server
        """
        body = payload.to_wire() if isinstance(payload, Template) else payload
        data = await self.post("templates", json=body)
        return self._parse_model(Template, data)

    # Tags

    async def list_tags(self) -> list[Tag]:
        """Fetch all tags, most used first."""
        data = await self.get("tags")
        return self._parse_list(Tag, data, "tags")

    async def search_tags(self, term: str) -> list[Tag]:
        """Search tags by name; names starting with ``term`` rank first."""
        data = await self.get("tags", params={"query": term})
        return self._parse_list(Tag, data, "tags")

    async def get_focus_mode_tags(self, focus_id: int) -> list[Tag]:
        """Fetch the tags attached to a focus mode."""
        data = await self.get("tags", params={"focusId": focus_id})
        return self._parse_list(Tag, data, "tags")

    async def update_tag(self, tag: Tag) -> Tag:
        """Rename a tag.

        Returns:
            The updated tag (the request payload when the server sends no body)
        """
        if tag.tag_id is None:
            raise ValueError("tag_id is required to update a tag")

        payload = {"tagId": tag.tag_id, "name": tag.name}
        data = await self.put(f"tags/{tag.tag_id}", json=payload)
        if data is None:
            return tag
        return self._parse_model(Tag, data)

    async def delete_tag(self, tag_id: int) -> None:
        """Delete a tag and detach it from every note."""
        await self.delete(f"tags/{tag_id}")
        logger.info(f"Deleted tag {tag_id}")

    # Focus modes

    async def create_focus_mode(self, name: str, tags: list[Tag] | None = None) -> FocusMode:
        """Create a focus mode filtering notes by ``tags``."""
        payload = {
            "name": name,
            "tags": [tag.model_dump(mode="json", by_alias=True) for tag in tags or []],
        }
        data = await self.post("focus", json=payload)
        return self._parse_model(FocusMode, data)

    async def update_focus_mode(self, focus_mode: FocusMode) -> FocusMode:
        """Replace the name and tags of an existing focus mode."""
        if focus_mode.focus_id is None:
            raise ValueError("focus_id is required to update a focus mode")

        payload = focus_mode.model_dump(mode="json", by_alias=True)
        data = await self.put(f"focus/{focus_mode.focus_id}", json=payload)
        if data is None:
            return focus_mode
        return self._parse_model(FocusMode, data)

    async def delete_focus_mode(self, focus_id: int) -> None:
        """Delete a focus mode. Its tags are left untouched."""
        await self.delete(f"focus/{focus_id}")
        logger.info(f"Deleted focus mode {focus_id}")

    # Response parsing

    @staticmethod
    def _parse_model(model: type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise FormatError(f"Unexpected {model.__name__} response: {e}") from e

    @staticmethod
    def _parse_list(model: type[ModelT], data: Any, key: str) -> list[ModelT]:
        """Parse a list response, bare or wrapped as ``{key: [...]}``."""
        if data is None:
            return []
        if isinstance(data, dict):
            data = data.get(key)
        if not isinstance(data, list):
            raise FormatError(f"Expected a list of {key}, got {type(data).__name__}")
        return [AsyncClient._parse_model(model, item) for item in data]
