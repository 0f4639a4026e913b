"""Normalization of imported template records."""

from collections.abc import Mapping
from typing import Any

from zen_kit.models.template import SERVER_ASSIGNED_FIELDS


def strip_server_fields(record: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``record`` without server-assigned fields.

    The server gives every created template a new identity and fresh
    usage metadata, so ``templateId``, ``createdAt``, ``updatedAt``,
    ``usageCount`` and ``lastUsedAt`` must never be resubmitted. The
    input mapping is left untouched.

    Example:
        >>> strip_server_fields({"templateId": 4, "name": "Daily", "usageCount": 9})
        {'name': 'Daily'}
    """
    return {key: value for key, value in record.items() if key not in SERVER_ASSIGNED_FIELDS}
