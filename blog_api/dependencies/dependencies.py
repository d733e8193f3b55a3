"""Application dependencies: repositories, services and the current user."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db import get_session
from blog_api.errors.auth import InvalidTokenError
from blog_api.managers.token_manager import decode_access_token
from blog_api.models import UserDB
from blog_api.repositories import (
    CategoryRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from blog_api.services import AuthService, CategoryService, PostService, TagService

bearer_scheme = HTTPBearer(auto_error=False, description="Access token from /auth/login")

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_post_repository(session: SessionDep) -> PostRepository:
    return PostRepository(session)


def get_category_repository(session: SessionDep) -> CategoryRepository:
    return CategoryRepository(session)


def get_tag_repository(session: SessionDep) -> TagRepository:
    return TagRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]
CategoryRepoDep = Annotated[CategoryRepository, Depends(get_category_repository)]
TagRepoDep = Annotated[TagRepository, Depends(get_tag_repository)]


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Get current authenticated user using user_id from token claims.

    Parameters
    ----------
    credentials : HTTPAuthorizationCredentials | None
        Bearer credentials from the ``Authorization`` header.
    user_repo : UserRepository
        User repository bound to the request session.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    InvalidTokenError
        If the header is missing, the token is invalid or expired, or the
        user no longer exists.
    """
    if credentials is None:
        raise InvalidTokenError(detail="Not authenticated")

    token_data = decode_access_token(credentials.credentials)
    if not token_data:
        raise InvalidTokenError

    user = await user_repo.get_by_id(token_data.user_id)
    if not user:
        raise InvalidTokenError(detail="User not found")

    return user


UserDBDep = Annotated[UserDB, Depends(get_current_user)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_post_service(
    post_repo: PostRepoDep,
    category_repo: CategoryRepoDep,
    tag_repo: TagRepoDep,
) -> PostService:
    """
    Resolve the `PostService` dependency.

    All three repositories share the request session, so a post write and
    the lookups guarding it run in one transaction.
    """
    return PostService(post_repo, category_repo, tag_repo)


def get_category_service(category_repo: CategoryRepoDep) -> CategoryService:
    return CategoryService(category_repo)


def get_tag_service(tag_repo: TagRepoDep) -> TagService:
    return TagService(tag_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
TagServiceDep = Annotated[TagService, Depends(get_tag_service)]
