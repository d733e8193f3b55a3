"""Post repository for database operations."""

from collections.abc import Sequence
from logging import getLogger
from uuid import UUID

from sqlalchemy import Select, select

from blog_api.configs import file_logger
from blog_api.models.blog import CategoryDB, PostDB, PostStatus, PostTagLink, TagDB
from blog_api.models.user import UserDB
from blog_api.repositories.base import BaseRepository
from blog_api.utils.helpers import utc_now

logger = file_logger(getLogger(__name__))


class PostRepository(BaseRepository[PostDB]):
    """
    Repository for Post database operations.

    Listings are returned in creation order, oldest first, with ties broken
    by ID.
    """

    model = PostDB
    label = "Post"

    @staticmethod
    def _published() -> Select[tuple[PostDB]]:
        return select(PostDB).where(PostDB.status == PostStatus.PUBLISHED)

    @staticmethod
    def _with_tag(query: Select[tuple[PostDB]], tag_id: UUID) -> Select[tuple[PostDB]]:
        return query.join(PostTagLink, PostTagLink.post_id == PostDB.id).where(
            PostTagLink.tag_id == tag_id,
        )

    async def _list(self, query: Select[tuple[PostDB]]) -> list[PostDB]:
        result = await self.session.execute(query.order_by(PostDB.created_at, PostDB.id))
        return list(result.scalars().all())

    async def find_published_by_category_and_tag(
        self,
        category_id: UUID,
        tag_id: UUID,
    ) -> list[PostDB]:
        """PUBLISHED posts in ``category_id`` whose tag set contains ``tag_id``."""
        query = self._with_tag(self._published(), tag_id).where(PostDB.category_id == category_id)
        return await self._list(query)

    async def find_published_by_category(self, category_id: UUID) -> list[PostDB]:
        """PUBLISHED posts in ``category_id``."""
        return await self._list(self._published().where(PostDB.category_id == category_id))

    async def find_published_by_tag(self, tag_id: UUID) -> list[PostDB]:
        """PUBLISHED posts carrying ``tag_id``."""
        return await self._list(self._with_tag(self._published(), tag_id))

    async def find_all_published(self) -> list[PostDB]:
        """Every PUBLISHED post."""
        return await self._list(self._published())

    async def find_by_author_and_status(
        self,
        author_id: UUID,
        status: PostStatus,
    ) -> list[PostDB]:
        """
        Get posts written by an author with the given status.

        Args:
            author_id: Author UUID
            status: Post status to filter by

        Returns:
            list[PostDB]: Matching posts in creation order
        """
        query = select(PostDB).where(PostDB.author_id == author_id, PostDB.status == status)
        return await self._list(query)

    async def create(
        self,
        *,
        title: str,
        content: str,
        status: PostStatus,
        reading_time: int,
        author: UserDB,
        category: CategoryDB,
        tags: Sequence[TagDB],
    ) -> PostDB:
        """
        Create a new post.

        Relationship objects are attached directly so the returned post is
        fully populated without another round trip.

        Returns:
            PostDB: Created post database model
        """
        now = utc_now()
        post = PostDB(
            title=title,
            content=content,
            status=status,
            reading_time=reading_time,
            author_id=author.id,
            category_id=category.id,
            created_at=now,
            updated_at=now,
        )
        post.author = author
        post.category = category
        post.tags = list(tags)
        await self._add_and_flush(post)
        logger.info(f"Created post {post.id} by author {author.id}")
        return post

    async def update(self, post: PostDB) -> PostDB:
        """Persist changes made to a loaded post and bump ``updated_at``."""
        post.updated_at = utc_now()
        return await self._add_and_flush(post)

    async def delete(self, post: PostDB) -> None:
        """
        Delete a loaded post.

        Its tag links are removed with it; the tags themselves are kept.
        """
        await self.session.delete(post)
        await self.session.flush()
        logger.info(f"Deleted post {post.id}")
