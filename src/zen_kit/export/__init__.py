"""Template export and import.

This package writes templates to a portable JSON artifact and replays
such artifacts against the notes API.
"""

from zen_kit.export.codec import build_artifact, parse_artifact, serialize_artifact
from zen_kit.export.delivery import FileDelivery, export_filename
from zen_kit.export.exporter import TemplateExporter
from zen_kit.export.importer import TemplateImporter
from zen_kit.export.normalize import strip_server_fields

__all__ = [
    "FileDelivery",
    "TemplateExporter",
    "TemplateImporter",
    "build_artifact",
    "export_filename",
    "parse_artifact",
    "serialize_artifact",
    "strip_server_fields",
]
