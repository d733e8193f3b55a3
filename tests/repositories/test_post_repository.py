"""Tests for the post repository against an in-memory database."""

from uuid import uuid4

from blog_api.models import PostStatus
from blog_api.repositories import PostRepository, TagRepository
from tests.factories import Seed


def titles(posts: list) -> list[str]:
    return [post.title for post in posts]


class TestPublishedFinders:
    """Published listings never include drafts and keep creation order."""

    async def test_find_all_published(self, post_repo: PostRepository, seed: Seed) -> None:
        posts = await post_repo.find_all_published()
        assert titles(posts) == ["Tech Python", "Tech Rust", "Travel Python"]

    async def test_find_published_by_category(self, post_repo: PostRepository, seed: Seed) -> None:
        posts = await post_repo.find_published_by_category(seed.tech.id)
        assert titles(posts) == ["Tech Python", "Tech Rust"]

    async def test_find_published_by_tag(self, post_repo: PostRepository, seed: Seed) -> None:
        posts = await post_repo.find_published_by_tag(seed.python.id)
        assert titles(posts) == ["Tech Python", "Travel Python"]

    async def test_find_published_by_category_and_tag(
        self,
        post_repo: PostRepository,
        seed: Seed,
    ) -> None:
        posts = await post_repo.find_published_by_category_and_tag(seed.tech.id, seed.python.id)
        assert titles(posts) == ["Tech Python"]

    async def test_no_match_returns_empty_list(self, post_repo: PostRepository, seed: Seed) -> None:
        posts = await post_repo.find_published_by_category_and_tag(seed.travel.id, seed.rust.id)
        assert posts == []


class TestAuthorQueries:
    async def test_find_by_author_and_status(self, post_repo: PostRepository, seed: Seed) -> None:
        drafts = await post_repo.find_by_author_and_status(seed.author.id, PostStatus.DRAFT)
        assert titles(drafts) == ["Draft Tech Python"]

    async def test_other_author_has_no_drafts(self, post_repo: PostRepository, seed: Seed) -> None:
        drafts = await post_repo.find_by_author_and_status(seed.other_author.id, PostStatus.DRAFT)
        assert drafts == []


class TestWrites:
    async def test_create_sets_timestamps_and_relations(
        self,
        post_repo: PostRepository,
        seed: Seed,
    ) -> None:
        post = seed.published_tech_python
        assert post.created_at == post.updated_at
        assert post.author.id == seed.author.id
        assert post.category.id == seed.tech.id
        assert [tag.name for tag in post.tags] == ["python"]

    async def test_update_bumps_updated_at(self, post_repo: PostRepository, seed: Seed) -> None:
        post = seed.draft_tech_python
        created_at = post.created_at
        post.status = PostStatus.PUBLISHED

        updated = await post_repo.update(post)

        assert updated.updated_at >= created_at
        assert "Draft Tech Python" in titles(await post_repo.find_all_published())

    async def test_delete_keeps_tags(
        self,
        post_repo: PostRepository,
        tag_repo: TagRepository,
        seed: Seed,
    ) -> None:
        await post_repo.delete(seed.published_tech_rust)

        assert await post_repo.get_by_id(seed.published_tech_rust.id) is None
        assert await tag_repo.get_by_id(seed.rust.id) is not None
        assert not await tag_repo.has_posts(seed.rust.id)

    async def test_get_by_id_unknown(self, post_repo: PostRepository, seed: Seed) -> None:
        assert await post_repo.get_by_id(uuid4()) is None
