from blog_api.routes.auth import router as auth_router
from blog_api.routes.categories import router as categories_router
from blog_api.routes.posts import router as posts_router
from blog_api.routes.tags import router as tags_router

__all__ = [
    "auth_router",
    "categories_router",
    "posts_router",
    "tags_router",
]
