"""
Category Routes.

Listing is public and includes each category's published post count.
Creating, renaming and deleting require a bearer token.
"""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from blog_api.configs import settings
from blog_api.dependencies import CategoryServiceDep, UserDBDep
from blog_api.managers import limiter
from blog_api.schemas import CategoryCreate, CategoryResponse, CategoryUpdate

router = APIRouter(prefix="/categories", tags=["🗂️ Categories"])

CATEGORY_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174222",
    "name": "Programming",
    "postCount": 3,
}
CONFLICT_EXISTS = {
    "description": "Conflict",
    "content": {
        "application/json": {"example": {"detail": "Category 'Programming' already exists"}},
    },
}
NOT_FOUND = {
    "description": "Not found",
    "content": {
        "application/json": {"example": {"detail": "Category with ID <uuid> not found"}},
    },
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[CategoryResponse],
    summary="List categories",
    description="List all categories with the number of PUBLISHED posts in each.",
    responses={200: {"content": {"application/json": {"example": [CATEGORY_EXAMPLE]}}}},
    operation_id="categories_list",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def list_categories(
    request: Request,
    response: Response,
    service: CategoryServiceDep,
) -> list[CategoryResponse]:
    """
    List categories.

    Returns
    -------
    list[CategoryResponse]
        Categories ordered by name, each with its published post count.
    """
    return await service.list_categories()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=CategoryResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a category",
    description="Create a category. Names are unique regardless of case.",
    responses={
        201: {"content": {"application/json": {"example": {**CATEGORY_EXAMPLE, "postCount": 0}}}},
        409: CONFLICT_EXISTS,
    },
    operation_id="categories_create",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def create_category(
    request: Request,
    response: Response,
    category: CategoryCreate,
    service: CategoryServiceDep,
    current_user: UserDBDep,
) -> CategoryResponse:
    """
    Create a new category.

    Raises
    ------
    DuplicateEntryError
        If a category with the same name already exists.
    """
    return await service.create_category(category.name)


@router.put(
    "/{category_id}",
    response_class=ORJSONResponse,
    response_model=CategoryResponse,
    summary="Rename a category",
    description="Rename a category. The new name must not clash with another category.",
    responses={
        200: {"content": {"application/json": {"example": CATEGORY_EXAMPLE}}},
        404: NOT_FOUND,
        409: CONFLICT_EXISTS,
    },
    operation_id="categories_update",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def update_category(
    request: Request,
    response: Response,
    category_id: UUID,
    category: CategoryUpdate,
    service: CategoryServiceDep,
    current_user: UserDBDep,
) -> CategoryResponse:
    """Rename a category."""
    return await service.update_category(category_id, category.name)


@router.delete(
    "/{category_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a category",
    description="Delete a category. Categories still referenced by any post cannot be deleted.",
    responses={
        204: {"description": "No Content"},
        404: NOT_FOUND,
        409: {
            "description": "Conflict",
            "content": {
                "application/json": {
                    "example": {"detail": "Category has posts associated with it"},
                },
            },
        },
    },
    operation_id="categories_delete",
)
@limiter.limit(settings.RATE_LIMIT_DEFAULT)
async def delete_category(
    request: Request,
    response: Response,
    category_id: UUID,
    service: CategoryServiceDep,
    current_user: UserDBDep,
) -> None:
    """
    Delete a category.

    Raises
    ------
    RecordNotFoundError
        If the category does not exist.
    RecordInUseError
        If any post references the category.
    """
    await service.delete_category(category_id)
