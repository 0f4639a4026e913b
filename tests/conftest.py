"""Pytest configuration and shared fixtures."""

import asyncio
from typing import Any

import pytest

from zen_kit import RetryConfig, StatusReporter, Template, ZenConfig


@pytest.fixture
def zen_config() -> ZenConfig:
    """Create a test configuration with near-zero retry backoff.

    Returns:
        Test configuration with mock values
    """
    return ZenConfig(
        base_url="http://localhost:8080",
        api_token="test-token-12345678",
        retry=RetryConfig(max_attempts=3, initial_wait=0, max_wait=0, exponential_base=1),
    )


@pytest.fixture
def server_templates() -> list[dict[str, Any]]:
    """Templates as the server returns them, server-assigned fields included."""
    return [
        {
            "templateId": 1,
            "name": "Daily Journal",
            "content": "## Today\n",
            "tags": [{"tagId": 3, "name": "journal"}],
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-02T00:00:00Z",
            "usageCount": 12,
            "lastUsedAt": "2024-03-01T08:30:00Z",
        },
        {
            "templateId": 2,
            "name": "Meeting Notes",
            "content": "Attendees:\n",
            "tags": [],
            "createdAt": "2024-01-05T00:00:00Z",
            "updatedAt": "2024-01-05T00:00:00Z",
            "usageCount": 0,
            "lastUsedAt": None,
        },
        {
            "templateId": 3,
            "name": "Weekly Review",
            "content": "Wins:\nMisses:\n",
            "tags": [],
            "createdAt": "2024-02-01T00:00:00Z",
            "updatedAt": "2024-02-03T00:00:00Z",
            "usageCount": 4,
            "lastUsedAt": "2024-02-28T18:00:00Z",
            "icon": "calendar",
        },
    ]


@pytest.fixture
def notifications() -> list[str]:
    return []


@pytest.fixture
def status(notifications: list[str]) -> StatusReporter:
    return StatusReporter(sink=notifications.append)


class FakeCreator:
    """In-memory create capability recording every call.

    Attributes:
        payloads: Payloads received, in call order
        max_in_flight: Highest number of creates running at the same time
    """

    def __init__(self, fail_at: int | None = None) -> None:
        self.fail_at = fail_at
        self.payloads: list[dict[str, Any]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def create_template(self, payload: dict[str, Any]) -> Template:
        index = len(self.payloads)
        self.payloads.append(payload)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Yield to the loop so overlapping creates would be observable
            await asyncio.sleep(0)
            if index == self.fail_at:
                raise RuntimeError("server rejected template")
            return Template.model_validate({**payload, "templateId": 100 + index})
        finally:
            self.in_flight -= 1


@pytest.fixture
def creator() -> FakeCreator:
    return FakeCreator()


@pytest.fixture
def creator_factory() -> type[FakeCreator]:
    """FakeCreator class, for tests that need a failing or customised creator."""
    return FakeCreator
