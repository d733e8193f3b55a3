"""Post, category and tag database models using SQLModel."""

from datetime import datetime
from enum import StrEnum
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, Uuid, func
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, Relationship, SQLModel, String

from blog_api.models.user import UserDB


class PostStatus(StrEnum):
    """Post visibility status."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class PostTagLink(SQLModel, table=True):
    """Association table for the post/tag many-to-many relation."""

    __tablename__ = cast("declared_attr[str]", "post_tags")

    post_id: UUID = Field(
        sa_column=Column(
            "post_id",
            Uuid,
            ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    tag_id: UUID = Field(
        sa_column=Column(
            "tag_id",
            Uuid,
            ForeignKey("tags.id", ondelete="RESTRICT"),
            primary_key=True,
            index=True,
        ),
    )


class CategoryDB(SQLModel, table=True):
    """
    Category database model.

    Names are unique regardless of case; the functional index backs the
    case-insensitive check done by the service layer.
    """

    __tablename__ = cast("declared_attr[str]", "categories")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Category ID",
    )
    name: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Category name (unique, case-insensitive)",
    )
    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )


Index(
    "uq_categories_name_lower",
    func.lower(CategoryDB.__table__.c.name),
    unique=True,
)


class TagDB(SQLModel, table=True):
    """Tag database model."""

    __tablename__ = cast("declared_attr[str]", "tags")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Tag ID",
    )
    name: str = Field(
        sa_column=Column(String(30), unique=True, nullable=False, index=True),
        description="Tag name (unique)",
    )
    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )


class PostDB(SQLModel, table=True):
    """
    Post database model.

    Author, category and tags are loaded eagerly with ``selectin`` so that
    async sessions never trigger implicit IO on attribute access.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (
        Index("ix_posts_status_created", "status", "created_at"),
        Index("ix_posts_author_status", "author_id", "status"),
        Index("ix_posts_category_status", "category_id", "status"),
    )

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Post title",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Post body",
    )
    status: PostStatus = Field(
        sa_column=Column(String(20), nullable=False, index=True),
        description="Post status (DRAFT, PUBLISHED)",
    )
    reading_time: int = Field(
        sa_column=Column(Integer, nullable=False, default=0),
        description="Estimated reading time in minutes, derived from content",
    )
    author_id: UUID = Field(
        sa_column=Column(
            "author_id",
            Uuid,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Author ID (foreign key to users.id)",
    )
    category_id: UUID = Field(
        sa_column=Column(
            "category_id",
            Uuid,
            ForeignKey("categories.id", ondelete="RESTRICT"),
            nullable=False,
            index=True,
        ),
        description="Category ID (foreign key to categories.id)",
    )
    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )

    author: UserDB = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
    category: CategoryDB = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
    tags: list[TagDB] = Relationship(
        link_model=PostTagLink,
        sa_relationship_kwargs={"lazy": "selectin"},
    )
