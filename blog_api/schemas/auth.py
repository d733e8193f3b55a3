from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr, field_validator

from blog_api.configs.settings import MIN_PASSWORD_LENGTH


class LoginRequest(BaseModel):
    """Credentials for ``POST /auth/login``."""

    email: EmailStr
    password: SecretStr


class SignUpRequest(BaseModel):
    """Registration payload for ``POST /auth/signin``."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "password": "correct-horse-battery",
            },
        },
    )

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: SecretStr

    @field_validator("password", mode="after")
    @classmethod
    def validate_password_length(cls, v: SecretStr) -> SecretStr:
        if len(v.get_secret_value()) < MIN_PASSWORD_LENGTH:
            mssg = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            raise ValueError(mssg)
        return v


class AuthResponse(BaseModel):
    """Bearer token and its lifetime in seconds."""

    token: str
    expires_in: int = Field(serialization_alias="expiresIn")


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    email: str
    user_id: UUID
    jti: str
    token_type: str = "access"
