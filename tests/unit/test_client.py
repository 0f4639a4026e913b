"""Tests for the asynchronous Zen API client."""

import json

import httpx
import pytest
import respx

from zen_kit import AsyncClient, FocusMode, Tag, Template, TemplateCreator, ZenConfig
from zen_kit.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ConnectionError as ZenConnectionError,
    FormatError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError as ZenTimeoutError,
    ValidationError,
    ZenError,
)

BASE = "http://localhost:8080/api"


def test_client_satisfies_template_creator(zen_config: ZenConfig) -> None:
    client = AsyncClient(zen_config)

    assert isinstance(client, TemplateCreator)


def test_build_url(zen_config: ZenConfig) -> None:
    client = AsyncClient(zen_config)

    assert client._build_url("templates") == f"{BASE}/templates"
    assert client._build_url("/tags/3/") == f"{BASE}/tags/3"
    assert client._build_url("api/focus") == f"{BASE}/focus"


def test_headers_include_bearer_token(zen_config: ZenConfig) -> None:
    client = AsyncClient(zen_config)

    headers = client._get_headers({"X-Trace": "1"})

    assert headers["Authorization"] == "Bearer test-token-12345678"
    assert headers["Content-Type"] == "application/json"
    assert headers["X-Trace"] == "1"


def test_headers_without_token() -> None:
    client = AsyncClient(ZenConfig(base_url="http://localhost:8080"))

    assert "Authorization" not in client._get_headers()


# Templates


@pytest.mark.asyncio
@respx.mock
async def test_list_templates(zen_config: ZenConfig) -> None:
    respx.get(f"{BASE}/templates").mock(
        return_value=httpx.Response(
            200,
            json=[
                {"templateId": 1, "name": "Daily", "usageCount": 2},
                {"templateId": 2, "name": "Weekly"},
            ],
        )
    )

    async with AsyncClient(zen_config) as client:
        templates = await client.list_templates()

    assert [t.template_id for t in templates] == [1, 2]
    assert templates[0].usage_count == 2


@pytest.mark.asyncio
@respx.mock
async def test_list_templates_wrapped_response(zen_config: ZenConfig) -> None:
    respx.get(f"{BASE}/templates").mock(
        return_value=httpx.Response(200, json={"templates": [{"templateId": 9, "name": "X"}]})
    )

    async with AsyncClient(zen_config) as client:
        templates = await client.list_templates()

    assert templates[0].template_id == 9


@pytest.mark.asyncio
@respx.mock
async def test_create_template_posts_payload(zen_config: ZenConfig) -> None:
    route = respx.post(f"{BASE}/templates").mock(
        return_value=httpx.Response(
            201,
            json={"templateId": 42, "name": "Daily", "createdAt": "2024-05-01T10:00:00Z"},
        )
    )

    async with AsyncClient(zen_config) as client:
        created = await client.create_template({"name": "Daily", "content": "## Today"})

    assert isinstance(created, Template)
    assert created.template_id == 42
    assert created.created_at == "2024-05-01T10:00:00Z"
    assert json.loads(route.calls[0].request.content) == {"name": "Daily", "content": "## Today"}


@pytest.mark.asyncio
@respx.mock
async def test_create_template_is_not_retried(zen_config: ZenConfig) -> None:
    """Test that creates are sent once even though retries are configured."""
    route = respx.post(f"{BASE}/templates").mock(
        return_value=httpx.Response(500, json={"message": "db locked"})
    )

    async with AsyncClient(zen_config) as client:
        with pytest.raises(ServerError):
            await client.create_template({"name": "Daily"})

    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_create_template_bad_response_shape(zen_config: ZenConfig) -> None:
    respx.post(f"{BASE}/templates").mock(
        return_value=httpx.Response(200, json={"name": ["not", "a", "string"]})
    )

    async with AsyncClient(zen_config) as client:
        with pytest.raises(FormatError):
            await client.create_template({"name": "Daily"})


# Tags


@pytest.mark.asyncio
@respx.mock
async def test_search_tags(zen_config: ZenConfig) -> None:
    route = respx.get(f"{BASE}/tags", params={"query": "wor"}).mock(
        return_value=httpx.Response(
            200, json=[{"tagId": 1, "name": "work"}, {"tagId": 2, "name": "homework"}]
        )
    )

    async with AsyncClient(zen_config) as client:
        tags = await client.search_tags("wor")

    assert route.called
    assert [t.name for t in tags] == ["work", "homework"]


@pytest.mark.asyncio
@respx.mock
async def test_get_focus_mode_tags(zen_config: ZenConfig) -> None:
    respx.get(f"{BASE}/tags", params={"focusId": "4"}).mock(
        return_value=httpx.Response(200, json=[{"tagId": 7, "name": "deep-work"}])
    )

    async with AsyncClient(zen_config) as client:
        tags = await client.get_focus_mode_tags(4)

    assert tags == [Tag(tag_id=7, name="deep-work")]


@pytest.mark.asyncio
@respx.mock
async def test_update_tag(zen_config: ZenConfig) -> None:
    route = respx.put(f"{BASE}/tags/3").mock(return_value=httpx.Response(204))

    async with AsyncClient(zen_config) as client:
        updated = await client.update_tag(Tag(tag_id=3, name="renamed"))

    assert updated.name == "renamed"
    assert json.loads(route.calls[0].request.content) == {"tagId": 3, "name": "renamed"}


@pytest.mark.asyncio
async def test_update_tag_requires_id(zen_config: ZenConfig) -> None:
    async with AsyncClient(zen_config) as client:
        with pytest.raises(ValueError):
            await client.update_tag(Tag(name="no id"))


@pytest.mark.asyncio
@respx.mock
async def test_delete_tag(zen_config: ZenConfig) -> None:
    route = respx.delete(f"{BASE}/tags/3").mock(return_value=httpx.Response(204))

    async with AsyncClient(zen_config) as client:
        await client.delete_tag(3)

    assert route.called


# Focus modes


@pytest.mark.asyncio
@respx.mock
async def test_create_focus_mode(zen_config: ZenConfig) -> None:
    route = respx.post(f"{BASE}/focus").mock(
        return_value=httpx.Response(
            200,
            json={"focusId": 11, "name": "Writing", "tags": [{"tagId": 2, "name": "draft"}]},
        )
    )

    async with AsyncClient(zen_config) as client:
        focus = await client.create_focus_mode("Writing", [Tag(tag_id=2, name="draft")])

    assert isinstance(focus, FocusMode)
    assert focus.focus_id == 11
    body = json.loads(route.calls[0].request.content)
    assert body["name"] == "Writing"
    assert body["tags"][0]["tagId"] == 2


@pytest.mark.asyncio
@respx.mock
async def test_update_focus_mode(zen_config: ZenConfig) -> None:
    route = respx.put(f"{BASE}/focus/11").mock(
        return_value=httpx.Response(200, json={"focusId": 11, "name": "Reading", "tags": []})
    )

    async with AsyncClient(zen_config) as client:
        focus = await client.update_focus_mode(FocusMode(focus_id=11, name="Reading"))

    assert focus.name == "Reading"
    assert json.loads(route.calls[0].request.content)["focusId"] == 11


@pytest.mark.asyncio
@respx.mock
async def test_delete_focus_mode(zen_config: ZenConfig) -> None:
    route = respx.delete(f"{BASE}/focus/11").mock(return_value=httpx.Response(200))

    async with AsyncClient(zen_config) as client:
        await client.delete_focus_mode(11)

    assert route.called


# Error handling


@pytest.mark.asyncio
@respx.mock
@pytest.mark.parametrize(
    ("status_code", "exception"),
    [
        (400, ValidationError),
        (401, AuthenticationError),
        (403, AuthorizationError),
        (404, NotFoundError),
        (409, ConflictError),
        (418, ZenError),
    ],
)
async def test_error_mapping(
    zen_config: ZenConfig, status_code: int, exception: type[Exception]
) -> None:
    respx.get(f"{BASE}/tags").mock(
        return_value=httpx.Response(status_code, json={"error": {"message": "nope"}})
    )

    async with AsyncClient(zen_config) as client:
        with pytest.raises(exception, match="nope"):
            await client.list_tags()


@pytest.mark.asyncio
@respx.mock
async def test_rate_limit_error_carries_retry_after(zen_config: ZenConfig) -> None:
    respx.get(f"{BASE}/tags").mock(
        return_value=httpx.Response(429, headers={"Retry-After": "30"}, text="slow down")
    )

    async with AsyncClient(zen_config) as client:
        with pytest.raises(RateLimitError) as exc_info:
            await client.list_tags()

    assert exc_info.value.retry_after == 30


@pytest.mark.asyncio
@respx.mock
async def test_get_retries_on_server_error(zen_config: ZenConfig) -> None:
    route = respx.get(f"{BASE}/tags")
    route.side_effect = [
        httpx.Response(503, json={"message": "starting"}),
        httpx.Response(200, json=[{"tagId": 1, "name": "work"}]),
    ]

    async with AsyncClient(zen_config) as client:
        tags = await client.list_tags()

    assert len(tags) == 1
    assert route.call_count == 2


@pytest.mark.asyncio
@respx.mock
async def test_get_retry_exhausted(zen_config: ZenConfig) -> None:
    route = respx.get(f"{BASE}/tags").mock(return_value=httpx.Response(500))

    async with AsyncClient(zen_config) as client:
        with pytest.raises(ServerError):
            await client.list_tags()

    assert route.call_count == 3


@pytest.mark.asyncio
@respx.mock
async def test_connection_error(zen_config: ZenConfig) -> None:
    respx.get(f"{BASE}/tags").mock(side_effect=httpx.ConnectError("refused"))

    async with AsyncClient(zen_config) as client:
        with pytest.raises(ZenConnectionError):
            await client.list_tags()


@pytest.mark.asyncio
@respx.mock
async def test_timeout_error(zen_config: ZenConfig) -> None:
    respx.get(f"{BASE}/tags").mock(side_effect=httpx.ReadTimeout("slow"))

    async with AsyncClient(zen_config) as client:
        with pytest.raises(ZenTimeoutError):
            await client.list_tags()


@pytest.mark.asyncio
@respx.mock
async def test_non_json_response(zen_config: ZenConfig) -> None:
    respx.get(f"{BASE}/tags").mock(
        return_value=httpx.Response(200, text="<html>", headers={"content-type": "text/html"})
    )

    async with AsyncClient(zen_config) as client:
        with pytest.raises(FormatError, match="non-JSON"):
            await client.list_tags()


@pytest.mark.asyncio
async def test_injected_http_client_is_not_closed(zen_config: ZenConfig) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[]))
    http_client = httpx.AsyncClient(transport=transport)

    async with AsyncClient(zen_config, http_client=http_client) as client:
        assert await client.list_templates() == []

    assert not http_client.is_closed
    await http_client.aclose()
