# tests/repositories/conftest.py
"""Fixtures that seed the in-memory database."""

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from blog_api.models import CategoryDB, PostDB, PostStatus, TagDB
from blog_api.repositories import (
    CategoryRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from tests.factories import Seed


@pytest.fixture
def post_repo(session: AsyncSession) -> PostRepository:
    return PostRepository(session)


@pytest.fixture
def category_repo(session: AsyncSession) -> CategoryRepository:
    return CategoryRepository(session)


@pytest.fixture
def tag_repo(session: AsyncSession) -> TagRepository:
    return TagRepository(session)


@pytest.fixture
def user_repo(session: AsyncSession) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
async def seed(
    user_repo: UserRepository,
    category_repo: CategoryRepository,
    tag_repo: TagRepository,
    post_repo: PostRepository,
) -> Seed:
    """Two authors, two categories, two tags and four posts."""
    author = await user_repo.create("Jane Doe", "jane@example.com", "hash")
    other_author = await user_repo.create("John Roe", "john@example.com", "hash")
    tech = await category_repo.create("Tech")
    travel = await category_repo.create("Travel")
    python, rust = await tag_repo.save_all(["python", "rust"])

    async def make(title: str, status: PostStatus, category: CategoryDB, tags: list[TagDB]) -> PostDB:
        return await post_repo.create(
            title=title,
            content="Some words for a post body",
            status=status,
            reading_time=1,
            author=author,
            category=category,
            tags=tags,
        )

    return Seed(
        author=author,
        other_author=other_author,
        tech=tech,
        travel=travel,
        python=python,
        rust=rust,
        published_tech_python=await make("Tech Python", PostStatus.PUBLISHED, tech, [python]),
        published_tech_rust=await make("Tech Rust", PostStatus.PUBLISHED, tech, [rust]),
        published_travel_python=await make("Travel Python", PostStatus.PUBLISHED, travel, [python]),
        draft_tech_python=await make("Draft Tech Python", PostStatus.DRAFT, tech, [python]),
    )
