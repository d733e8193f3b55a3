from blog_api.repositories.base import BaseRepository
from blog_api.repositories.category import CategoryRepository
from blog_api.repositories.post import PostRepository
from blog_api.repositories.tag import TagRepository
from blog_api.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "PostRepository",
    "TagRepository",
    "UserRepository",
]
