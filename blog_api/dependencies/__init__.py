from blog_api.dependencies.dependencies import (
    AuthServiceDep,
    CategoryRepoDep,
    CategoryServiceDep,
    PostRepoDep,
    PostServiceDep,
    SessionDep,
    TagRepoDep,
    TagServiceDep,
    UserDBDep,
    UserRepoDep,
    get_auth_service,
    get_category_service,
    get_current_user,
    get_post_service,
    get_tag_service,
)

__all__ = [
    "AuthServiceDep",
    "CategoryRepoDep",
    "CategoryServiceDep",
    "PostRepoDep",
    "PostServiceDep",
    "SessionDep",
    "TagRepoDep",
    "TagServiceDep",
    "UserDBDep",
    "UserRepoDep",
    "get_auth_service",
    "get_category_service",
    "get_current_user",
    "get_post_service",
    "get_tag_service",
]
