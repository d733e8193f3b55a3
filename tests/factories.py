"""Model factories shared by the test suite."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from blog_api.models import CategoryDB, PostDB, PostStatus, TagDB, UserDB

NOW = datetime(2025, 1, 1, tzinfo=UTC)


def make_user(name: str = "Jane Doe", email: str = "jane@example.com") -> UserDB:
    return UserDB(
        id=uuid4(),
        name=name,
        email=email,
        password_hash="$argon2id$v=19$m=65536,t=3,p=4$somehash",
        created_at=NOW,
        updated_at=NOW,
    )


def make_category(name: str = "Tech") -> CategoryDB:
    return CategoryDB(id=uuid4(), name=name, created_at=NOW, updated_at=NOW)


def make_tag(name: str = "python") -> TagDB:
    return TagDB(id=uuid4(), name=name, created_at=NOW, updated_at=NOW)


def make_post(
    author: UserDB,
    category: CategoryDB,
    content: str = "hello world",
    tags: list[TagDB] | None = None,
    status: PostStatus = PostStatus.DRAFT,
) -> PostDB:
    post = PostDB(
        id=uuid4(),
        title="A post",
        content=content,
        status=status,
        reading_time=1,
        author_id=author.id,
        category_id=category.id,
        created_at=NOW,
        updated_at=NOW,
    )
    post.author = author
    post.category = category
    post.tags = tags or []
    return post


@dataclass
class Seed:
    """Rows created by the repository ``seed`` fixture."""

    author: UserDB
    other_author: UserDB
    tech: CategoryDB
    travel: CategoryDB
    python: TagDB
    rust: TagDB
    published_tech_python: PostDB
    published_tech_rust: PostDB
    published_travel_python: PostDB
    draft_tech_python: PostDB
