from blog_api.services.auth import AuthService
from blog_api.services.category import CategoryService
from blog_api.services.post import PostService
from blog_api.services.reading_time import count_words, estimate_reading_time
from blog_api.services.tag import TagService

__all__ = [
    "AuthService",
    "CategoryService",
    "PostService",
    "TagService",
    "count_words",
    "estimate_reading_time",
]
