from blog_api.schemas.auth import AuthResponse, LoginRequest, SignUpRequest, TokenData
from blog_api.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from blog_api.schemas.health import HealthCheckResponse
from blog_api.schemas.post import (
    AuthorSummary,
    CategorySummary,
    PostCreate,
    PostResponse,
    PostUpdate,
    TagSummary,
)
from blog_api.schemas.tag import TagResponse, TagsCreate

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "SignUpRequest",
    "TokenData",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "HealthCheckResponse",
    "AuthorSummary",
    "CategorySummary",
    "PostCreate",
    "PostResponse",
    "PostUpdate",
    "TagSummary",
    "TagResponse",
    "TagsCreate",
]
