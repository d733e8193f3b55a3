"""User repository for database operations."""

from typing import cast

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from blog_api.models.user import UserDB
from blog_api.repositories.base import BaseRepository
from blog_api.utils.helpers import utc_now


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Passwords arrive here already hashed; hashing belongs to the auth service.
    """

    model = UserDB
    label = "User"

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email.

        Args:
            email: Email address

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.email == email.lower())),
        )
        return result.scalar_one_or_none()

    async def create(self, name: str, email: str, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Raises:
            DuplicateEntryError: If the email already exists
            DatabaseError: For other database errors
        """
        now = utc_now()
        user = UserDB(
            name=name,
            email=email.lower(),
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        return await self._add_and_flush(user)
