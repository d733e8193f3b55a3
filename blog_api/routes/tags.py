"""
Tag Routes.

``POST /tags`` is a bulk get-or-create: every requested name comes back,
whether it was just created or already existed.
"""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from blog_api.configs import settings
from blog_api.dependencies import TagServiceDep, UserDBDep
from blog_api.managers import limiter
from blog_api.schemas import TagResponse, TagsCreate

router = APIRouter(prefix="/tags", tags=["🏷️ Tags"])

TAG_EXAMPLE = {"id": "123e4567-e89b-12d3-a456-426614174333", "name": "python", "postCount": 2}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[TagResponse],
    summary="List tags",
    description="List all tags with the number of PUBLISHED posts carrying each.",
    responses={200: {"content": {"application/json": {"example": [TAG_EXAMPLE]}}}},
    operation_id="tags_list",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def list_tags(
    request: Request,
    response: Response,
    service: TagServiceDep,
) -> list[TagResponse]:
    """List tags with their published post counts."""
    return await service.list_tags()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=list[TagResponse],
    status_code=HTTP_201_CREATED,
    summary="Create tags",
    description="Get or create one tag per name; existing tags are returned unchanged.",
    responses={201: {"content": {"application/json": {"example": [TAG_EXAMPLE]}}}},
    operation_id="tags_create",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def create_tags(
    request: Request,
    response: Response,
    tags: TagsCreate,
    service: TagServiceDep,
    current_user: UserDBDep,
) -> list[TagResponse]:
    """
    Create tags.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    tags : TagsCreate
        Names to get or create.
    service : TagService
        Tag service dependency.
    current_user : UserDB
        Authenticated user.

    Returns
    -------
    list[TagResponse]
        One tag per requested name.
    """
    return await service.create_tags(tags.names)


@router.delete(
    "/{tag_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a tag",
    description="Delete a tag. Tags still attached to any post cannot be deleted.",
    responses={
        204: {"description": "No Content"},
        404: {
            "description": "Not found",
            "content": {"application/json": {"example": {"detail": "Tag with ID <uuid> not found"}}},
        },
        409: {
            "description": "Conflict",
            "content": {"application/json": {"example": {"detail": "Tag has posts associated with it"}}},
        },
    },
    operation_id="tags_delete",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def delete_tag(
    request: Request,
    response: Response,
    tag_id: UUID,
    service: TagServiceDep,
    current_user: UserDBDep,
) -> None:
    """Delete a tag no post carries."""
    await service.delete_tag(tag_id)
