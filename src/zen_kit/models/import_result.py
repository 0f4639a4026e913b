"""Outcome models for template imports."""

from enum import Enum

from pydantic import BaseModel, Field

from .template import Template


class ImportFailureKind(str, Enum):
    """Why an import stopped."""

    MALFORMED_ARTIFACT = "malformed_artifact"
    CREATE_FAILED = "create_failed"


class ImportFailure(BaseModel):
    """Terminal failure of an import.

    Attributes:
        kind: Failure category
        message: Diagnostic message (not shown to the user as-is)
        index: Artifact position of the template whose create failed
    """

    kind: ImportFailureKind
    message: str
    index: int | None = None


class ImportResult(BaseModel):
    """Result of one import invocation.

    Templates created before a failure stay on the server; ``created``
    lists them in creation order.
    """

    success: bool = False
    total: int = 0
    imported: int = 0
    created: list[Template] = Field(default_factory=list)
    failure: ImportFailure | None = None
    warnings: list[str] = Field(default_factory=list)

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def fail(self, kind: ImportFailureKind, message: str, index: int | None = None) -> None:
        """Mark the import as failed."""
        self.success = False
        self.failure = ImportFailure(kind=kind, message=message, index=index)
