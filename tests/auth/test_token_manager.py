"""Tests for the JWT token manager."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import jwt

from blog_api.configs import settings
from blog_api.managers.token_manager import (
    create_access_token,
    decode_access_token,
)


class TestCreateAccessToken:
    """Test cases for create_access_token function."""

    def test_token_contains_correct_claims(self) -> None:
        """Test that access token contains all required claims."""
        user_id = uuid4()

        token = create_access_token(user_id=user_id, email="jane@example.com")
        token_data = decode_access_token(token)

        assert token_data is not None
        assert token_data.email == "jane@example.com"
        assert token_data.user_id == user_id
        assert token_data.token_type == "access"
        assert token_data.jti

    def test_default_lifetime_is_one_day(self) -> None:
        """Test that tokens expire after ACCESS_TOKEN_EXPIRE_SECONDS."""
        before = datetime.now(UTC)
        token = create_access_token(user_id=uuid4(), email="jane@example.com")

        expiry = datetime.fromtimestamp(jwt.get_unverified_claims(token)["exp"], tz=UTC)

        lifetime = (expiry - before).total_seconds()
        assert settings.ACCESS_TOKEN_EXPIRE_SECONDS - 5 <= lifetime <= settings.ACCESS_TOKEN_EXPIRE_SECONDS + 5

    def test_each_token_has_unique_jti(self) -> None:
        """Test that two tokens for the same user differ by jti."""
        user_id = uuid4()
        first = decode_access_token(create_access_token(user_id=user_id, email="a@example.com"))
        second = decode_access_token(create_access_token(user_id=user_id, email="a@example.com"))

        assert first is not None
        assert second is not None
        assert first.jti != second.jti


class TestDecodeAccessToken:
    """Test cases for decode_access_token function."""

    def test_expired_token_is_rejected(self) -> None:
        token = create_access_token(
            user_id=uuid4(),
            email="jane@example.com",
            expires_delta=timedelta(seconds=-1),
        )
        assert decode_access_token(token) is None

    def test_garbage_is_rejected(self) -> None:
        assert decode_access_token("not-a-jwt") is None

    def test_wrong_secret_is_rejected(self) -> None:
        token = jwt.encode(
            {"sub": "jane@example.com", "user_id": str(uuid4()), "jti": "x", "type": "access"},
            "another-secret",
            algorithm=settings.ALGORITHM,
        )
        assert decode_access_token(token) is None

    def test_wrong_type_is_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "jane@example.com",
                "user_id": str(uuid4()),
                "jti": "x",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
                "type": "refresh",
            },
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )
        assert decode_access_token(token) is None
