"""Tag and focus mode models."""

from pydantic import BaseModel, ConfigDict, Field


class Tag(BaseModel):
    """A note tag.

    ``noteCount`` is only filled in by listing endpoints.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    tag_id: int | None = Field(default=None, alias="tagId")
    name: str
    note_count: int | None = Field(default=None, alias="noteCount")


class FocusMode(BaseModel):
    """A saved focus: a named set of tags that filters the notes list."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    focus_id: int | None = Field(default=None, alias="focusId")
    name: str
    tags: list[Tag] = Field(default_factory=list)
