"""Template export artifact format.

The artifact is a single JSON object:

    {
      "version": "1.0",
      "exportDate": "<ISO-8601 timestamp>",
      "templates": [ {...}, ... ]
    }
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

EXPORT_FORMAT_VERSION = "1.0"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class TemplateExport(BaseModel):
    """Container written by export and read back by import.

    Templates are kept as raw JSON objects: export must not drop or
    rename fields it does not know about.
    """

    model_config = ConfigDict(populate_by_name=True)

    version: str = Field(default=EXPORT_FORMAT_VERSION, description="Format revision")
    # Informational only; imports accept whatever value the file carries.
    export_date: Any = Field(default_factory=_now_iso, alias="exportDate")
    templates: list[dict[str, Any]] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        """Dump with camelCase keys in the documented field order.

        Template values are passed through as given, so values that are not
        JSON types fail at serialization instead of being coerced.
        """
        return self.model_dump(by_alias=True)

    def get_template_count(self) -> int:
        return len(self.templates)
