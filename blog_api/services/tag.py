"""Tag service: get-or-create reconciliation and deletion guard."""

from logging import getLogger
from uuid import UUID

from blog_api.configs import file_logger
from blog_api.errors.database import RecordInUseError
from blog_api.repositories import TagRepository
from blog_api.schemas.tag import TagResponse

logger = file_logger(getLogger(__name__))


class TagService:
    """Service for tag listing, bulk get-or-create and guarded deletion."""

    def __init__(self, tag_repo: TagRepository) -> None:
        self.tag_repo = tag_repo

    async def list_tags(self) -> list[TagResponse]:
        """List tags with their published post counts."""
        rows = await self.tag_repo.list_with_post_counts()
        return [TagResponse(id=tag.id, name=tag.name, post_count=count) for tag, count in rows]

    async def create_tags(self, names: set[str]) -> list[TagResponse]:
        """
        Return one tag per name, creating the ones that do not exist yet.

        Existing tags are looked up in one query and the missing ones are
        written in a single bulk insert; nothing is written if that insert
        fails.

        Args:
            names: Tag names, already stripped and validated

        Returns:
            list[TagResponse]: Newly created tags followed by existing ones

        Raises:
            DatabaseError: If the store fails; no tags are created in that case
        """
        if not names:
            return []

        existing = await self.tag_repo.find_by_names(names)
        missing = names - {tag.name for tag in existing}
        created = await self.tag_repo.save_all(sorted(missing)) if missing else []

        counts = await self.tag_repo.post_counts(tag.id for tag in existing)
        return [
            TagResponse(id=tag.id, name=tag.name, post_count=counts.get(tag.id, 0))
            for tag in [*created, *existing]
        ]

    async def delete_tag(self, tag_id: UUID) -> None:
        """
        Delete a tag that no post carries.

        Raises:
            RecordNotFoundError: If the tag does not exist
            RecordInUseError: If any post carries the tag
        """
        tag = await self.tag_repo.get_or_raise(tag_id)
        if await self.tag_repo.has_posts(tag.id):
            raise RecordInUseError(detail="Tag has posts associated with it")
        await self.tag_repo.delete_by_id(tag.id)
        logger.info(f"Deleted tag {tag.id} '{tag.name}'")
