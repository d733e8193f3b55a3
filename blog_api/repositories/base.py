"""Base repository for database operations."""

from collections.abc import Sequence
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from blog_api.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
)


ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Base repository implementing common CRUD operations.

    Attributes:
        model: The SQLModel database model type.
        label: Human readable entity name used in error details.
    """

    model: type[ModelT]
    label: str = "Record"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        statement = select(self.model).where(self.model.id == record_id)  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Get a record by ID or raise an exception if not found.

        Raises:
            RecordNotFoundError: If record is not found
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(detail=f"{self.label} with ID {record_id} not found")
        return record

    async def delete_by_id(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Returns:
            bool: True if a row was deleted, False if none matched
        """
        statement = delete(self.model).where(self.model.id == record_id)  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        await self.session.flush()
        return bool(result.rowcount)

    async def _add_and_flush(self, record: ModelT) -> ModelT:
        """
        Add a record and flush it to the database with error handling.

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other database failure
        """
        await self._flush_all([record])
        return record

    async def _flush_all(self, records: Sequence[SQLModel]) -> None:
        """Add several records in one flush; either all are written or none."""
        try:
            self.session.add_all(records)
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=f"{self.label} already exists") from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save {self.label.lower()}: {e}") from e

    async def _exists(self, statement) -> bool:  # noqa: ANN001
        result = await self.session.execute(statement.limit(1))
        return result.scalar_one_or_none() is not None
