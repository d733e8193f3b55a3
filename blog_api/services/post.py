"""Post service: published listing filters and post lifecycle."""

from collections.abc import Iterable
from logging import getLogger
from uuid import UUID

from blog_api.configs import file_logger
from blog_api.errors.auth import PermissionDeniedError
from blog_api.errors.database import RecordNotFoundError
from blog_api.models import PostDB, PostStatus, TagDB, UserDB
from blog_api.repositories import CategoryRepository, PostRepository, TagRepository
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.services.reading_time import estimate_reading_time

logger = file_logger(getLogger(__name__))


class PostService:
    """Service for post listing, drafts and author-owned post changes."""

    def __init__(
        self,
        post_repo: PostRepository,
        category_repo: CategoryRepository,
        tag_repo: TagRepository,
    ) -> None:
        self.post_repo = post_repo
        self.category_repo = category_repo
        self.tag_repo = tag_repo

    async def list_published(
        self,
        category_id: UUID | None = None,
        tag_id: UUID | None = None,
    ) -> list[PostDB]:
        """
        List PUBLISHED posts, optionally filtered by category and/or tag.

        The category is resolved before the tag, so when both IDs are
        unknown the missing category is the one reported.

        Args:
            category_id: Optional category filter
            tag_id: Optional tag filter

        Returns:
            list[PostDB]: Matching posts in creation order

        Raises:
            RecordNotFoundError: If a given category or tag does not exist
        """
        if category_id is not None and tag_id is not None:
            category = await self.category_repo.get_or_raise(category_id)
            tag = await self.tag_repo.get_or_raise(tag_id)
            return await self.post_repo.find_published_by_category_and_tag(category.id, tag.id)

        if category_id is not None:
            category = await self.category_repo.get_or_raise(category_id)
            return await self.post_repo.find_published_by_category(category.id)

        if tag_id is not None:
            tag = await self.tag_repo.get_or_raise(tag_id)
            return await self.post_repo.find_published_by_tag(tag.id)

        return await self.post_repo.find_all_published()

    async def get_post(self, post_id: UUID) -> PostDB:
        """
        Get a single post by ID.

        Raises:
            RecordNotFoundError: If the post does not exist
        """
        return await self.post_repo.get_or_raise(post_id)

    async def list_drafts(self, user: UserDB) -> list[PostDB]:
        """List the DRAFT posts written by ``user``."""
        return await self.post_repo.find_by_author_and_status(user.id, PostStatus.DRAFT)

    async def _resolve_tags(self, tag_ids: Iterable[UUID]) -> list[TagDB]:
        wanted = set(tag_ids)
        tags = await self.tag_repo.find_by_ids(wanted)
        missing = wanted - {tag.id for tag in tags}
        if missing:
            ids = ", ".join(sorted(str(tag_id) for tag_id in missing))
            raise RecordNotFoundError(detail=f"Tags not found: {ids}")
        return tags

    async def create_post(self, user: UserDB, data: PostCreate) -> PostDB:
        """
        Create a post authored by ``user``.

        Args:
            user: Authenticated author
            data: Post creation payload

        Returns:
            PostDB: Created post with its reading time derived from content

        Raises:
            RecordNotFoundError: If the category or any tag does not exist
        """
        category = await self.category_repo.get_or_raise(data.category_id)
        tags = await self._resolve_tags(data.tag_ids)
        return await self.post_repo.create(
            title=data.title,
            content=data.content,
            status=data.status,
            reading_time=estimate_reading_time(data.content),
            author=user,
            category=category,
            tags=tags,
        )

    async def _get_owned_post(self, user: UserDB, post_id: UUID) -> PostDB:
        post = await self.post_repo.get_or_raise(post_id)
        if post.author_id != user.id:
            logger.warning(f"User {user.id} denied access to post {post_id}")
            raise PermissionDeniedError(detail="You can only modify your own posts")
        return post

    async def update_post(self, user: UserDB, post_id: UUID, data: PostUpdate) -> PostDB:
        """
        Update a post owned by ``user``.

        Only fields present in ``data`` change. The reading time is
        recomputed whenever the content changes.

        Raises:
            RecordNotFoundError: If the post, category or a tag does not exist
            PermissionDeniedError: If ``user`` is not the author
        """
        post = await self._get_owned_post(user, post_id)

        if data.title is not None:
            post.title = data.title
        if data.content is not None and data.content != post.content:
            post.content = data.content
            post.reading_time = estimate_reading_time(data.content)
        if data.status is not None:
            post.status = data.status
        if data.category_id is not None and data.category_id != post.category_id:
            category = await self.category_repo.get_or_raise(data.category_id)
            post.category_id = category.id
            post.category = category
        if data.tag_ids is not None:
            post.tags = await self._resolve_tags(data.tag_ids)

        return await self.post_repo.update(post)

    async def delete_post(self, user: UserDB, post_id: UUID) -> None:
        """
        Delete a post owned by ``user``.

        Raises:
            RecordNotFoundError: If the post does not exist
            PermissionDeniedError: If ``user`` is not the author
        """
        post = await self._get_owned_post(user, post_id)
        await self.post_repo.delete(post)
