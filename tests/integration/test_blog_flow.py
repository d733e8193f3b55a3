"""End-to-end flow through the HTTP API on an in-memory database."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from blog_api.db import get_session
from blog_api.main import app
from blog_api.managers.rate_limiter import limiter

PASSWORD = "correct-horse-battery"


@pytest.fixture
async def db_client(session: AsyncSession) -> AsyncGenerator[AsyncClient]:
    """HTTP client whose requests all share the test database session."""

    async def override_session() -> AsyncGenerator[AsyncSession]:
        yield session

    limiter.enabled = False
    app.dependency_overrides[get_session] = override_session
    async with AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac:
        yield ac
    app.dependency_overrides.clear()
    limiter.enabled = True


async def login(client: AsyncClient, name: str, email: str) -> dict[str, str]:
    response = await client.post(
        "/api/v1/auth/signin",
        json={"name": name, "email": email, "password": PASSWORD},
    )
    assert response.status_code == 201
    response = await client.post("/api/v1/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


async def test_publish_filter_and_guards(db_client: AsyncClient) -> None:
    headers = await login(db_client, "Jane Doe", "jane@example.com")

    response = await db_client.post("/api/v1/categories", json={"name": "Tech"}, headers=headers)
    assert response.status_code == 201
    category_id = response.json()["id"]

    response = await db_client.post("/api/v1/categories", json={"name": "tech"}, headers=headers)
    assert response.status_code == 409

    response = await db_client.post(
        "/api/v1/tags",
        json={"names": ["python", "fastapi"]},
        headers=headers,
    )
    assert response.status_code == 201
    tags = {tag["name"]: tag["id"] for tag in response.json()}
    assert set(tags) == {"python", "fastapi"}

    response = await db_client.post("/api/v1/tags", json={"names": ["python"]}, headers=headers)
    assert [tag["id"] for tag in response.json()] == [tags["python"]]

    content = " ".join(["word"] * 450)
    response = await db_client.post(
        "/api/v1/posts",
        json={
            "title": "Published post",
            "content": content,
            "status": "PUBLISHED",
            "categoryId": category_id,
            "tagIds": [tags["python"]],
        },
        headers=headers,
    )
    assert response.status_code == 201
    post = response.json()
    assert post["readingTime"] == 3
    assert post["author"]["name"] == "Jane Doe"

    response = await db_client.post(
        "/api/v1/posts",
        json={
            "title": "Draft post",
            "content": "Not quite ready yet",
            "categoryId": category_id,
            "tagIds": [tags["fastapi"]],
        },
        headers=headers,
    )
    assert response.status_code == 201

    response = await db_client.get("/api/v1/posts", params={"tagId": tags["python"]})
    assert [p["title"] for p in response.json()] == ["Published post"]

    response = await db_client.get("/api/v1/posts", params={"tagId": tags["fastapi"]})
    assert response.json() == []

    response = await db_client.get("/api/v1/posts/drafts", headers=headers)
    assert [p["title"] for p in response.json()] == ["Draft post"]

    response = await db_client.get("/api/v1/categories")
    assert response.json() == [{"id": category_id, "name": "Tech", "postCount": 1}]

    response = await db_client.delete(f"/api/v1/categories/{category_id}", headers=headers)
    assert response.status_code == 409

    response = await db_client.delete(f"/api/v1/tags/{tags['python']}", headers=headers)
    assert response.status_code == 409


async def test_only_author_can_change_post(db_client: AsyncClient) -> None:
    author = await login(db_client, "Jane Doe", "jane@example.com")
    other = await login(db_client, "John Roe", "john@example.com")

    response = await db_client.post("/api/v1/categories", json={"name": "Tech"}, headers=author)
    category_id = response.json()["id"]
    response = await db_client.post(
        "/api/v1/posts",
        json={"title": "Mine", "content": "Some content here", "categoryId": category_id},
        headers=author,
    )
    post_id = response.json()["id"]

    response = await db_client.put(f"/api/v1/posts/{post_id}", json={"title": "Yours"}, headers=other)
    assert response.status_code == 403

    response = await db_client.delete(f"/api/v1/posts/{post_id}", headers=other)
    assert response.status_code == 403

    response = await db_client.put(
        f"/api/v1/posts/{post_id}",
        json={"content": " ".join(["word"] * 250)},
        headers=author,
    )
    assert response.status_code == 200
    assert response.json()["readingTime"] == 2

    response = await db_client.delete(f"/api/v1/posts/{post_id}", headers=author)
    assert response.status_code == 204

    response = await db_client.get(f"/api/v1/posts/{post_id}")
    assert response.status_code == 404

    response = await db_client.delete(f"/api/v1/categories/{category_id}", headers=author)
    assert response.status_code == 204


async def test_login_rejects_wrong_password(db_client: AsyncClient) -> None:
    await login(db_client, "Jane Doe", "jane@example.com")

    response = await db_client.post(
        "/api/v1/auth/login",
        json={"email": "jane@example.com", "password": "not-the-password"},
    )
    assert response.status_code == 401

    response = await db_client.post(
        "/api/v1/auth/signin",
        json={"name": "Jane Again", "email": "jane@example.com", "password": PASSWORD},
    )
    assert response.status_code == 409
