"""
Post Routes.

Summary
-------
Endpoints include:
  - List published posts (optionally by category and/or tag)
  - List the current user's drafts
  - Get post by id
  - Create, update and delete posts (author only)

Listing and reading are public; every write requires a bearer token.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from blog_api.configs import settings
from blog_api.dependencies import PostServiceDep, UserDBDep
from blog_api.managers import limiter
from blog_api.models import PostDB
from blog_api.schemas import PostCreate, PostResponse, PostUpdate

router = APIRouter(prefix="/posts", tags=["📝 Posts"])

POST_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "Getting started with FastAPI",
    "content": "FastAPI is a modern web framework for building APIs with Python.",
    "author": {"id": "123e4567-e89b-12d3-a456-426614174111", "name": "Jane Doe"},
    "category": {"id": "123e4567-e89b-12d3-a456-426614174222", "name": "Programming"},
    "tags": [{"id": "123e4567-e89b-12d3-a456-426614174333", "name": "python"}],
    "readingTime": 1,
    "status": "PUBLISHED",
    "createdAt": "2025-01-01T00:00:00Z",
    "updatedAt": "2025-01-01T00:00:00Z",
}
NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Post with ID <uuid> not found"}}},
}
UNAUTHORIZED = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"detail": "Not authenticated"}}},
}
FORBIDDEN = {
    "description": "Forbidden",
    "content": {
        "application/json": {"example": {"detail": "You can only modify your own posts"}},
    },
}
RATE_LIMITED = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}


def to_response(post: PostDB) -> PostResponse:
    return PostResponse.model_validate(post)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[PostResponse],
    summary="List published posts",
    description=(
        "List PUBLISHED posts, oldest first. Filter by `categoryId`, `tagId` or both; "
        "an unknown category or tag yields 404."
    ),
    responses={
        200: {"content": {"application/json": {"example": [POST_EXAMPLE]}}},
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="posts_list",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def list_posts(
    request: Request,
    response: Response,
    service: PostServiceDep,
    category_id: Annotated[
        UUID | None,
        Query(alias="categoryId", description="Only posts in this category"),
    ] = None,
    tag_id: Annotated[UUID | None, Query(alias="tagId", description="Only posts with this tag")] = None,
) -> list[PostResponse]:
    """
    List published posts.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    service : PostService
        Post service dependency.
    category_id : UUID | None
        Optional category filter.
    tag_id : UUID | None
        Optional tag filter.

    Returns
    -------
    list[PostResponse]
        Matching posts.
    """
    posts = await service.list_published(category_id=category_id, tag_id=tag_id)
    return [to_response(post) for post in posts]


@router.get(
    "/drafts",
    response_class=ORJSONResponse,
    response_model=list[PostResponse],
    summary="List my drafts",
    description="List the DRAFT posts written by the authenticated user.",
    responses={
        200: {"content": {"application/json": {"example": [{**POST_EXAMPLE, "status": "DRAFT"}]}}},
        401: UNAUTHORIZED,
        429: RATE_LIMITED,
    },
    operation_id="posts_drafts",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def list_drafts(
    request: Request,
    response: Response,
    service: PostServiceDep,
    current_user: UserDBDep,
) -> list[PostResponse]:
    """List the current user's drafts."""
    posts = await service.list_drafts(current_user)
    return [to_response(post) for post in posts]


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Get post by ID",
    description="Retrieve a single post by its UUID.",
    responses={
        200: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="posts_get_by_id",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def get_post(
    request: Request,
    response: Response,
    post_id: UUID,
    service: PostServiceDep,
) -> PostResponse:
    """
    Get post by ID.

    Raises
    ------
    RecordNotFoundError
        If the post does not exist.
    """
    return to_response(await service.get_post(post_id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a post",
    description=(
        "Create a post authored by the current user. The reading time is computed "
        "from the content."
    ),
    responses={
        201: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        401: UNAUTHORIZED,
        404: {
            "description": "Category or tag not found",
            "content": {"application/json": {"example": {"detail": "Tags not found: <uuid>"}}},
        },
        429: RATE_LIMITED,
    },
    operation_id="posts_create",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def create_post(
    request: Request,
    response: Response,
    post: PostCreate,
    service: PostServiceDep,
    current_user: UserDBDep,
) -> PostResponse:
    """
    Create a new post.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    post : PostCreate
        Post input payload.
    service : PostService
        Post service dependency.
    current_user : UserDB
        Authenticated author.

    Returns
    -------
    PostResponse
        Created post.
    """
    return to_response(await service.create_post(current_user, post))


@router.put(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Update a post",
    description="Update a post written by the current user. Omitted fields are left unchanged.",
    responses={
        200: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        401: UNAUTHORIZED,
        403: FORBIDDEN,
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="posts_update",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def update_post(
    request: Request,
    response: Response,
    post_id: UUID,
    post: PostUpdate,
    service: PostServiceDep,
    current_user: UserDBDep,
) -> PostResponse:
    """
    Update a post.

    Raises
    ------
    RecordNotFoundError
        If the post, its new category or a tag does not exist.
    PermissionDeniedError
        If the current user is not the author.
    """
    return to_response(await service.update_post(current_user, post_id, post))


@router.delete(
    "/{post_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a post",
    description="Delete a post written by the current user.",
    responses={
        204: {"description": "No Content"},
        401: UNAUTHORIZED,
        403: FORBIDDEN,
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="posts_delete",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def delete_post(
    request: Request,
    response: Response,
    post_id: UUID,
    service: PostServiceDep,
    current_user: UserDBDep,
) -> None:
    """Delete a post owned by the current user."""
    await service.delete_post(current_user, post_id)
