"""Template export.

Builds an artifact from the templates currently shown to the user and
delivers it as a JSON download.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from zen_kit.export.codec import build_artifact, serialize_artifact
from zen_kit.export.delivery import FileDelivery, export_filename
from zen_kit.models.template import Template
from zen_kit.status import StatusReporter

logger = logging.getLogger(__name__)

EXPORT_SUCCESS_MESSAGE = "Templates exported successfully"
EXPORT_FAILURE_MESSAGE = "Failed to export templates"


class TemplateExporter:
    """Export templates to a portable JSON file.

    Records are written verbatim, server-assigned fields included.
    Failures are reported through the status reporter and never raised.

    Example:
        >>> status = StatusReporter(sink=print)
        >>> exporter = TemplateExporter(status, FileDelivery("downloads"))
        >>> path = exporter.export(templates)
        Templates exported successfully
    """

    def __init__(
        self,
        status: StatusReporter | None = None,
        delivery: FileDelivery | None = None,
    ) -> None:
        """Initialize exporter.

        Args:
            status: Busy flag and notification sink (a fresh one if omitted)
            delivery: Where export files go (current directory if omitted)
        """
        self.status = status or StatusReporter()
        self.delivery = delivery or FileDelivery()

    @staticmethod
    def can_export(records: Sequence[Any]) -> bool:
        """Whether the export action should be enabled for ``records``."""
        return len(records) > 0

    def export(self, records: Sequence[Template | Mapping[str, Any]]) -> Path | None:
        """Export records and deliver the artifact file.

        Callers are expected to disable export for an empty collection
        (see ``can_export``); an empty artifact is still written if asked.

        Args:
            records: Templates to export, in display order

        Returns:
            Path of the delivered file, or None if the export failed
        """
        with self.status.track("exporting"):
            try:
                artifact = build_artifact(records)
                content = serialize_artifact(artifact)
                path = self.delivery.deliver(content, export_filename())
            except Exception:
                logger.exception("Template export failed")
                self.status.notify(EXPORT_FAILURE_MESSAGE)
                return None

            logger.info(f"Exported {artifact.get_template_count()} templates to {path}")
            self.status.notify(EXPORT_SUCCESS_MESSAGE)
            return path
