"""Tests for engine lifecycle helpers and transaction handling."""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from blog_api.db.database import init_db, transaction
from blog_api.errors import DatabaseInitializationError
from blog_api.models import CategoryDB
from tests.factories import make_category


async def test_init_db_creates_tables() -> None:
    await init_db()

    async with transaction() as session:
        result = await session.execute(select(CategoryDB))
        assert list(result.scalars().all()) == []


async def test_init_db_wraps_failures() -> None:
    engine = MagicMock()
    engine.begin.side_effect = OperationalError("CREATE TABLE", {}, Exception("disk I/O error"))

    with patch("blog_api.db.database.engine", engine), pytest.raises(DatabaseInitializationError):
        await init_db()


async def test_transaction_rolls_back_on_error() -> None:
    await init_db()
    category = make_category(name="Rolled Back")

    with pytest.raises(RuntimeError):
        async with transaction() as session:
            session.add(category)
            await session.flush()
            raise RuntimeError("boom")

    async with transaction() as session:
        result = await session.execute(select(CategoryDB).where(CategoryDB.name == "Rolled Back"))
        assert result.scalar_one_or_none() is None
