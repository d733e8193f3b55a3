"""Category schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog_api.configs.settings import MAX_CATEGORY_NAME_LENGTH, MIN_CATEGORY_NAME_LENGTH

CATEGORY_NAME_PATTERN = r"^[\w\s-]+$"


class CategoryCreate(BaseModel):
    """Category creation model."""

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Programming"}})

    name: str = Field(
        ...,
        min_length=MIN_CATEGORY_NAME_LENGTH,
        max_length=MAX_CATEGORY_NAME_LENGTH,
        pattern=CATEGORY_NAME_PATTERN,
        description="Category name (letters, numbers, spaces or hyphens)",
    )

    @field_validator("name", mode="after")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < MIN_CATEGORY_NAME_LENGTH:
            mssg = f"Category name must be at least {MIN_CATEGORY_NAME_LENGTH} non-blank characters"
            raise ValueError(mssg)
        return v


class CategoryUpdate(CategoryCreate):
    """Category rename model."""


class CategoryResponse(BaseModel):
    """Category with its published post count."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    post_count: int = Field(default=0, serialization_alias="postCount")
