"""Tag repository for database operations."""

from collections.abc import Iterable
from logging import getLogger
from uuid import UUID

from sqlalchemy import and_, func, select

from blog_api.configs import file_logger
from blog_api.models.blog import PostDB, PostStatus, PostTagLink, TagDB
from blog_api.repositories.base import BaseRepository
from blog_api.utils.helpers import utc_now

logger = file_logger(getLogger(__name__))


class TagRepository(BaseRepository[TagDB]):
    """Repository for Tag database operations."""

    model = TagDB
    label = "Tag"

    def _with_counts(self):  # noqa: ANN202
        return (
            select(TagDB, func.count(PostDB.id))
            .outerjoin(PostTagLink, PostTagLink.tag_id == TagDB.id)
            .outerjoin(
                PostDB,
                and_(
                    PostDB.id == PostTagLink.post_id,
                    PostDB.status == PostStatus.PUBLISHED,
                ),
            )
            .group_by(TagDB.id)
        )

    async def list_with_post_counts(self) -> list[tuple[TagDB, int]]:
        """
        List every tag with the number of PUBLISHED posts carrying it.

        Returns:
            list[tuple[TagDB, int]]: Tags ordered by name with counts
        """
        result = await self.session.execute(self._with_counts().order_by(TagDB.name))
        return [(tag, count) for tag, count in result.all()]

    async def post_counts(self, tag_ids: Iterable[UUID]) -> dict[UUID, int]:
        """Published post counts for the given tags, keyed by tag ID."""
        ids = set(tag_ids)
        if not ids:
            return {}
        result = await self.session.execute(self._with_counts().where(TagDB.id.in_(ids)))
        return {tag.id: count for tag, count in result.all()}

    async def find_by_names(self, names: Iterable[str]) -> list[TagDB]:
        """Return the stored tags whose name is in ``names``."""
        wanted = set(names)
        if not wanted:
            return []
        result = await self.session.execute(select(TagDB).where(TagDB.name.in_(wanted)))
        return list(result.scalars().all())

    async def find_by_ids(self, tag_ids: Iterable[UUID]) -> list[TagDB]:
        """Return the stored tags whose ID is in ``tag_ids``."""
        wanted = set(tag_ids)
        if not wanted:
            return []
        result = await self.session.execute(select(TagDB).where(TagDB.id.in_(wanted)))
        return list(result.scalars().all())

    async def save_all(self, names: Iterable[str]) -> list[TagDB]:
        """
        Create one tag per name in a single flush.

        Raises:
            DuplicateEntryError: If any name already exists
            DatabaseError: For other database errors
        """
        now = utc_now()
        tags = [TagDB(name=name, created_at=now, updated_at=now) for name in names]
        if not tags:
            return []
        await self._flush_all(tags)
        logger.info(f"Created {len(tags)} tags")
        return tags

    async def has_posts(self, tag_id: UUID) -> bool:
        """Return True when any post, whatever its status, carries the tag."""
        return await self._exists(select(PostTagLink.post_id).where(PostTagLink.tag_id == tag_id))
