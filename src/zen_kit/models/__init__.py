"""Data models for zen-kit."""

from .config import RetryConfig, ZenConfig
from .export_format import EXPORT_FORMAT_VERSION, TemplateExport
from .import_result import ImportFailure, ImportFailureKind, ImportResult
from .notes import FocusMode, Tag
from .template import SERVER_ASSIGNED_FIELDS, Template

__all__ = [
    # Configuration
    "ZenConfig",
    "RetryConfig",
    # Records
    "Template",
    "Tag",
    "FocusMode",
    "SERVER_ASSIGNED_FIELDS",
    # Export/Import
    "TemplateExport",
    "EXPORT_FORMAT_VERSION",
    "ImportResult",
    "ImportFailure",
    "ImportFailureKind",
]
