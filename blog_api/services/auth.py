"""Authentication service: signup, credential checks and token issue."""

from blog_api.configs import settings
from blog_api.errors.auth import InvalidCredentialsError
from blog_api.errors.database import DuplicateEntryError
from blog_api.managers.password_manager import hash_password, verify_password
from blog_api.managers.token_manager import create_access_token
from blog_api.models import UserDB
from blog_api.monitoring import get_logger
from blog_api.repositories import UserRepository
from blog_api.schemas.auth import AuthResponse, SignUpRequest

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def signup(self, data: SignUpRequest) -> UserDB:
        """
        Register a new user.

        Args:
            data: Signup payload

        Returns:
            UserDB: Created user

        Raises:
            DuplicateEntryError: If the email is already registered
        """
        if await self.user_repo.get_by_email(data.email):
            raise DuplicateEntryError(detail="Email is already registered")

        password_hash = await hash_password(data.password.get_secret_value())
        user = await self.user_repo.create(data.name, data.email, password_hash)
        logger.info("User signed up", user_id=str(user.id))
        return user

    async def authenticate_user(self, email: str, password: str) -> UserDB:
        """
        Authenticate a user by email and password.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_email(email)
        stored_hash = user.password_hash if user else None
        is_valid = await verify_password(password, stored_hash)
        if user is None or not is_valid:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError
        return user

    def create_token_for_user(self, user: UserDB) -> AuthResponse:
        """
        Issue an access token for ``user``.

        Returns:
            AuthResponse: Token and its lifetime in seconds
        """
        token = create_access_token(user_id=user.id, email=user.email)
        return AuthResponse(token=token, expires_in=settings.ACCESS_TOKEN_EXPIRE_SECONDS)

    async def login(self, email: str, password: str) -> AuthResponse:
        """Authenticate and issue a token in one step."""
        user = await self.authenticate_user(email, password)
        return self.create_token_for_user(user)
