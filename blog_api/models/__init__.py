"""Database models for the application."""

from blog_api.models.blog import CategoryDB, PostDB, PostStatus, PostTagLink, TagDB
from blog_api.models.user import UserDB

__all__ = ["CategoryDB", "PostDB", "PostStatus", "PostTagLink", "TagDB", "UserDB"]
