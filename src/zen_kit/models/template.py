"""Template record model.

A template is the record type moved by the import/export pipeline. Only
a handful of its fields are known here; anything else the server sends
is kept as an extra field so exports stay lossless.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .notes import Tag

# Wire names of fields the server assigns on creation
SERVER_ASSIGNED_FIELDS: tuple[str, ...] = (
    "templateId",
    "createdAt",
    "updatedAt",
    "usageCount",
    "lastUsedAt",
)


class Template(BaseModel):
    """A note template as returned by the API.

    Example:
        >>> template = Template.model_validate({"templateId": 3, "name": "Daily"})
        >>> template.template_id
        3
        >>> template.to_wire()
        {'templateId': 3, 'name': 'Daily'}
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    template_id: int | None = Field(default=None, alias="templateId")
    name: str = ""
    content: str = ""
    tags: list[Tag] = Field(default_factory=list)
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    usage_count: int | None = Field(default=None, alias="usageCount")
    last_used_at: str | None = Field(default=None, alias="lastUsedAt")

    def to_wire(self) -> dict[str, Any]:
        """Dump to the camelCase JSON shape, keeping only fields that were set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
