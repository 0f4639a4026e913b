"""Serialization of the template export artifact.

Artifacts are indented JSON so they can be read and edited by hand.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from zen_kit.exceptions import FormatError
from zen_kit.models.export_format import EXPORT_FORMAT_VERSION, TemplateExport
from zen_kit.models.template import Template

logger = logging.getLogger(__name__)

SUPPORTED_MAJOR_VERSION = EXPORT_FORMAT_VERSION.split(".")[0]


def record_to_wire(record: Template | Mapping[str, Any]) -> dict[str, Any]:
    """Convert one record to its JSON object form without normalizing it.

    Args:
        record: A Template model or a plain mapping in wire shape

    Returns:
        New dict holding every field of the record
    """
    if isinstance(record, Template):
        return record.to_wire()
    if isinstance(record, Mapping):
        return dict(record)
    raise FormatError(f"Cannot export record of type {type(record).__name__}")


def build_artifact(records: Sequence[Template | Mapping[str, Any]]) -> TemplateExport:
    """Wrap records in a fresh artifact stamped with the current time."""
    return TemplateExport(
        version=EXPORT_FORMAT_VERSION,
        templates=[record_to_wire(record) for record in records],
    )


def serialize_artifact(artifact: TemplateExport) -> str:
    """Render an artifact as indented JSON text."""
    return json.dumps(artifact.to_wire(), indent=2, ensure_ascii=False)


def parse_artifact(text: str) -> TemplateExport:
    """Parse artifact text.

    Args:
        text: Full file contents

    Returns:
        Parsed artifact

    Raises:
        FormatError: If the text is not JSON, or not an object with a
            ``templates`` list of objects
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON in export file: {e}") from e

    if not isinstance(data, dict):
        raise FormatError(f"Expected JSON object at top level, got: {type(data).__name__}")

    if "templates" not in data:
        raise FormatError("Export file has no 'templates' field")

    try:
        return TemplateExport.model_validate(data)
    except PydanticValidationError as e:
        raise FormatError(f"Export file has the wrong shape: {e}") from e


def check_version(artifact: TemplateExport) -> list[str]:
    """Check that the artifact format revision can be imported.

    Any ``1.x`` revision is accepted; other minors only produce a warning.

    Returns:
        Warnings about the version (empty when it matches exactly)

    Raises:
        FormatError: If the major revision is not supported
    """
    if "version" not in artifact.model_fields_set:
        return [f"Export file has no version, assuming {EXPORT_FORMAT_VERSION}"]

    version = artifact.version.strip()
    major = version.split(".")[0]
    if major != SUPPORTED_MAJOR_VERSION:
        raise FormatError(
            f"Unsupported export format version {version!r} "
            f"(expected {SUPPORTED_MAJOR_VERSION}.x)"
        )

    if version != EXPORT_FORMAT_VERSION:
        return [f"Export format version {version} may not be fully compatible"]

    return []
