from blog_api.errors.auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    PermissionDeniedError,
    UserAuthenticationError,
    auth_exception_handler,
)
from blog_api.errors.base import BaseAppError, create_exception_handler
from blog_api.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordInUseError,
    RecordNotFoundError,
    database_exception_handler,
)
from blog_api.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from blog_api.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "create_exception_handler",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "RecordInUseError",
    "RecordNotFoundError",
    "database_exception_handler",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PermissionDeniedError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "PasswordHashingError",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
