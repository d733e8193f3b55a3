"""Authentication routes for user signup and login."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from blog_api.configs import settings
from blog_api.dependencies import AuthServiceDep
from blog_api.managers import limiter
from blog_api.schemas import AuthResponse, LoginRequest, SignUpRequest

router = APIRouter(prefix="/auth", tags=["🔐 Auth"])


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=AuthResponse,
    summary="Login for access token",
    description="Authenticate with email and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "expiresIn": 86400,
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "Invalid email or password"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_login",
)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> AuthResponse:
    """
    Login and obtain an access token.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    credentials : LoginRequest
        Email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    AuthResponse
        Bearer token and its lifetime in seconds.

    Raises
    ------
    InvalidCredentialsError
        If the email is unknown or the password is wrong.
    """
    return await auth_service.login(credentials.email, credentials.password.get_secret_value())


@router.post(
    "/signin",
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user account. Log in afterwards to obtain a token.",
    responses={
        201: {"description": "Created"},
        409: {
            "description": "Conflict",
            "content": {
                "application/json": {"example": {"detail": "Email is already registered"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_signup",
)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def signup(
    request: Request,
    response: Response,
    user: SignUpRequest,
    auth_service: AuthServiceDep,
) -> Response:
    """
    Register a new user.

    Raises
    ------
    DuplicateEntryError
        If the email is already registered.
    """
    await auth_service.signup(user)
    return Response(status_code=HTTP_201_CREATED)
