# tests/services/conftest.py
"""Fixtures for service tests: repositories are mocked."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from blog_api.models import UserDB
from tests.factories import make_user


@pytest.fixture
def user() -> UserDB:
    return make_user()


@pytest.fixture
def post_repo() -> MagicMock:
    mock = MagicMock()
    mock.find_published_by_category_and_tag = AsyncMock(return_value=[])
    mock.find_published_by_category = AsyncMock(return_value=[])
    mock.find_published_by_tag = AsyncMock(return_value=[])
    mock.find_all_published = AsyncMock(return_value=[])
    mock.find_by_author_and_status = AsyncMock(return_value=[])
    mock.get_or_raise = AsyncMock()
    mock.create = AsyncMock(side_effect=lambda **kwargs: kwargs)
    mock.update = AsyncMock(side_effect=lambda post: post)
    mock.delete = AsyncMock()
    return mock


@pytest.fixture
def category_repo() -> MagicMock:
    mock = MagicMock()
    mock.get_by_id = AsyncMock()
    mock.get_or_raise = AsyncMock()
    mock.exists_by_name_ignore_case = AsyncMock(return_value=False)
    mock.has_posts = AsyncMock(return_value=False)
    mock.create = AsyncMock()
    mock.rename = AsyncMock()
    mock.delete_by_id = AsyncMock(return_value=True)
    mock.list_with_post_counts = AsyncMock(return_value=[])
    mock.published_post_count = AsyncMock(return_value=0)
    return mock


@pytest.fixture
def tag_repo() -> MagicMock:
    mock = MagicMock()
    mock.get_or_raise = AsyncMock()
    mock.find_by_ids = AsyncMock(return_value=[])
    mock.find_by_names = AsyncMock(return_value=[])
    mock.save_all = AsyncMock(return_value=[])
    mock.post_counts = AsyncMock(return_value={})
    mock.has_posts = AsyncMock(return_value=False)
    mock.delete_by_id = AsyncMock(return_value=True)
    mock.list_with_post_counts = AsyncMock(return_value=[])
    return mock
