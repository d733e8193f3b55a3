"""Tag schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog_api.configs.settings import (
    MAX_TAG_NAME_LENGTH,
    MAX_TAGS_PER_REQUEST,
    MIN_TAG_NAME_LENGTH,
)


class TagsCreate(BaseModel):
    """Bulk tag creation model; duplicate names collapse."""

    model_config = ConfigDict(json_schema_extra={"example": {"names": ["python", "fastapi"]}})

    names: set[str] = Field(
        ...,
        min_length=1,
        max_length=MAX_TAGS_PER_REQUEST,
        description="Tag names to get or create",
    )

    @field_validator("names", mode="after")
    @classmethod
    def validate_names(cls, v: set[str]) -> set[str]:
        """Strip whitespace and enforce the tag name length bounds."""
        names = {name.strip() for name in v}
        for name in names:
            if not MIN_TAG_NAME_LENGTH <= len(name) <= MAX_TAG_NAME_LENGTH:
                mssg = (
                    f"Each tag must be {MIN_TAG_NAME_LENGTH}-{MAX_TAG_NAME_LENGTH} characters"
                )
                raise ValueError(mssg)
        return names


class TagResponse(BaseModel):
    """Tag with its published post count."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    post_count: int = Field(default=0, serialization_alias="postCount")
