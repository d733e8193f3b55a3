"""
Post schemas.

Request bodies never carry a reading time: it is always derived from the
post content on the server.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog_api.configs.settings import (
    MAX_CONTENT_LENGTH,
    MAX_TAGS_PER_REQUEST,
    MAX_TITLE_LENGTH,
    MIN_CONTENT_LENGTH,
    MIN_TITLE_LENGTH,
)
from blog_api.models.blog import PostStatus


def _strip_title(title: str) -> str:
    """Strip a title and reject it when fewer than the minimum visible characters remain."""
    title = title.strip()
    if len(title) < MIN_TITLE_LENGTH:
        mssg = f"Title must be at least {MIN_TITLE_LENGTH} non-blank characters"
        raise ValueError(mssg)
    return title


class AuthorSummary(BaseModel):
    """Author information for post responses (without sensitive data)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class CategorySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class TagSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class PostCreate(BaseModel):
    """Post creation model (request body)."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Getting started with FastAPI",
                "content": "FastAPI is a modern web framework for building APIs with Python.",
                "status": "DRAFT",
                "categoryId": "123e4567-e89b-12d3-a456-426614174000",
                "tagIds": ["123e4567-e89b-12d3-a456-426614174111"],
            },
        },
    )

    title: str = Field(
        ...,
        min_length=MIN_TITLE_LENGTH,
        max_length=MAX_TITLE_LENGTH,
        description="Post title",
    )
    content: str = Field(
        ...,
        min_length=MIN_CONTENT_LENGTH,
        max_length=MAX_CONTENT_LENGTH,
        description="Post body (markdown or plain text)",
    )
    status: PostStatus = Field(default=PostStatus.DRAFT, description="Post status")
    category_id: UUID = Field(alias="categoryId", description="Category the post belongs to")
    tag_ids: set[UUID] = Field(
        default_factory=set,
        alias="tagIds",
        max_length=MAX_TAGS_PER_REQUEST,
        description="Tags attached to the post",
    )

    @field_validator("title", mode="after")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class PostUpdate(BaseModel):
    """Post update model (all fields optional; unset fields are left unchanged)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(
        default=None,
        min_length=MIN_TITLE_LENGTH,
        max_length=MAX_TITLE_LENGTH,
    )
    content: str | None = Field(
        default=None,
        min_length=MIN_CONTENT_LENGTH,
        max_length=MAX_CONTENT_LENGTH,
    )
    status: PostStatus | None = None
    category_id: UUID | None = Field(default=None, alias="categoryId")
    tag_ids: set[UUID] | None = Field(
        default=None,
        alias="tagIds",
        max_length=MAX_TAGS_PER_REQUEST,
    )

    @field_validator("title", mode="after")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return None if v is None else _strip_title(v)


class PostResponse(BaseModel):
    """Post response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    author: AuthorSummary
    category: CategorySummary
    tags: list[TagSummary]
    reading_time: int = Field(serialization_alias="readingTime")
    status: PostStatus
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
