"""Category repository for database operations."""

from uuid import UUID

from sqlalchemy import and_, func, select

from blog_api.models.blog import CategoryDB, PostDB, PostStatus
from blog_api.repositories.base import BaseRepository
from blog_api.utils.helpers import utc_now


class CategoryRepository(BaseRepository[CategoryDB]):
    """
    Repository for Category database operations.

    Published post counts are computed with an aggregation query here rather
    than by walking each category's posts.
    """

    model = CategoryDB
    label = "Category"

    async def list_with_post_counts(self) -> list[tuple[CategoryDB, int]]:
        """
        List every category with the number of its PUBLISHED posts.

        Returns:
            list[tuple[CategoryDB, int]]: Categories ordered by name with counts
        """
        statement = (
            select(CategoryDB, func.count(PostDB.id))
            .outerjoin(
                PostDB,
                and_(
                    PostDB.category_id == CategoryDB.id,
                    PostDB.status == PostStatus.PUBLISHED,
                ),
            )
            .group_by(CategoryDB.id)
            .order_by(CategoryDB.name)
        )
        result = await self.session.execute(statement)
        return [(category, count) for category, count in result.all()]

    async def published_post_count(self, category_id: UUID) -> int:
        statement = select(func.count(PostDB.id)).where(
            PostDB.category_id == category_id,
            PostDB.status == PostStatus.PUBLISHED,
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def exists_by_name_ignore_case(
        self,
        name: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check whether a category with ``name`` exists, ignoring case.

        Args:
            name: Name to look for
            exclude_id: Optional ID to exclude from check (for renames)
        """
        statement = select(CategoryDB.id).where(func.lower(CategoryDB.name) == name.lower())
        if exclude_id is not None:
            statement = statement.where(CategoryDB.id != exclude_id)
        return await self._exists(statement)

    async def has_posts(self, category_id: UUID) -> bool:
        """Return True when any post, whatever its status, references the category."""
        return await self._exists(select(PostDB.id).where(PostDB.category_id == category_id))

    async def create(self, name: str) -> CategoryDB:
        now = utc_now()
        category = CategoryDB(name=name, created_at=now, updated_at=now)
        return await self._add_and_flush(category)

    async def rename(self, category: CategoryDB, name: str) -> CategoryDB:
        category.name = name
        category.updated_at = utc_now()
        return await self._add_and_flush(category)
