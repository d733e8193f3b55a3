# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.dependencies.dependencies import get_user_repository
from blog_api.main import app
from blog_api.managers.rate_limiter import limiter
from blog_api.managers.token_manager import create_access_token
from blog_api.models import UserDB
from tests.factories import make_user


@pytest.fixture
def sample_user() -> UserDB:
    """Create a sample user for testing."""
    return make_user()


@pytest.fixture
def sample_access_token(sample_user: UserDB) -> str:
    """Create a sample access token for testing."""
    return create_access_token(
        user_id=sample_user.id,
        email=sample_user.email,
        expires_delta=timedelta(minutes=30),
    )


@pytest.fixture
def auth_headers(sample_access_token: str) -> dict[str, str]:
    """Create auth headers with a valid access token."""
    return {"Authorization": f"Bearer {sample_access_token}"}


@pytest.fixture
def mock_user_repo(sample_user: UserDB) -> MagicMock:
    """Create a mock user repository that resolves the sample user."""
    mock = MagicMock()
    mock.get_by_id = AsyncMock(return_value=sample_user)
    return mock


@pytest.fixture
async def client(mock_user_repo: MagicMock) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing; tokens resolve to the sample user."""
    limiter.enabled = False
    app.dependency_overrides[get_user_repository] = lambda: mock_user_repo
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
    limiter.enabled = True
