"""Category service with name uniqueness and deletion guards."""

from logging import getLogger
from uuid import UUID

from blog_api.configs import file_logger
from blog_api.errors.database import DuplicateEntryError, RecordInUseError
from blog_api.repositories import CategoryRepository
from blog_api.schemas.category import CategoryResponse

logger = file_logger(getLogger(__name__))


class CategoryService:
    """Service for category listing and guarded create/rename/delete."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self.category_repo = category_repo

    async def list_categories(self) -> list[CategoryResponse]:
        """List categories with their published post counts."""
        rows = await self.category_repo.list_with_post_counts()
        return [
            CategoryResponse(id=category.id, name=category.name, post_count=count)
            for category, count in rows
        ]

    async def create_category(self, name: str) -> CategoryResponse:
        """
        Create a category.

        Raises:
            DuplicateEntryError: If a category with the same name exists, ignoring case
        """
        if await self.category_repo.exists_by_name_ignore_case(name):
            raise DuplicateEntryError(detail=f"Category '{name}' already exists")
        category = await self.category_repo.create(name)
        logger.info(f"Created category {category.id} '{category.name}'")
        return CategoryResponse(id=category.id, name=category.name, post_count=0)

    async def update_category(self, category_id: UUID, name: str) -> CategoryResponse:
        """
        Rename a category.

        Raises:
            RecordNotFoundError: If the category does not exist
            DuplicateEntryError: If another category already has that name
        """
        category = await self.category_repo.get_or_raise(category_id)
        if await self.category_repo.exists_by_name_ignore_case(name, exclude_id=category.id):
            raise DuplicateEntryError(detail=f"Category '{name}' already exists")
        category = await self.category_repo.rename(category, name)
        count = await self.category_repo.published_post_count(category.id)
        return CategoryResponse(id=category.id, name=category.name, post_count=count)

    async def delete_category(self, category_id: UUID) -> None:
        """
        Delete a category that no post references.

        Raises:
            RecordNotFoundError: If the category does not exist
            RecordInUseError: If any post, draft or published, references it
        """
        category = await self.category_repo.get_or_raise(category_id)
        if await self.category_repo.has_posts(category.id):
            raise RecordInUseError(detail="Category has posts associated with it")
        await self.category_repo.delete_by_id(category.id)
        logger.info(f"Deleted category {category.id}")
