"""Unit tests for admin token handling."""

import time

import jwt
import pytest
from fastapi import HTTPException

from src.api.deps import get_current_admin
from src.api.middleware.auth import (
    AuthError,
    AuthErrorCode,
    create_admin_token,
    decode_admin_token,
)
from src.core.config import get_settings


class TestDecodeAdminToken:
    """Tests for decode_admin_token."""

    def test_round_trip_claims(self) -> None:
        token = create_admin_token(7, username="gerente")

        payload = decode_admin_token(token)

        assert payload.sub == "7"
        assert payload.usuario == "gerente"
        assert payload.to_admin_context().admin_id == 7

    def test_expired_token(self) -> None:
        token = create_admin_token(7, ttl_seconds=-60)

        with pytest.raises(AuthError) as exc_info:
            decode_admin_token(token)

        assert exc_info.value.code == AuthErrorCode.TOKEN_EXPIRED

    def test_wrong_secret(self) -> None:
        now = int(time.time())
        token = jwt.encode(
            {"sub": "7", "iat": now, "exp": now + 60},
            "another-secret-that-is-long-enough-for-hs256",
            algorithm="HS256",
        )

        with pytest.raises(AuthError) as exc_info:
            decode_admin_token(token)

        assert exc_info.value.code == AuthErrorCode.INVALID_SIGNATURE

    def test_missing_subject(self) -> None:
        settings = get_settings()
        now = int(time.time())
        token = jwt.encode(
            {"iat": now, "exp": now + 60},
            settings.admin_jwt_secret,
            algorithm=settings.admin_jwt_algorithm,
        )

        with pytest.raises(AuthError) as exc_info:
            decode_admin_token(token)

        assert exc_info.value.code == AuthErrorCode.INVALID_TOKEN

    def test_garbage(self) -> None:
        with pytest.raises(AuthError) as exc_info:
            decode_admin_token("not-a-token")

        assert exc_info.value.code == AuthErrorCode.INVALID_TOKEN


class TestGetCurrentAdmin:
    """Tests for the get_current_admin dependency."""

    @pytest.mark.asyncio
    async def test_valid_header(self) -> None:
        token = create_admin_token(3, username="caixa")

        admin = await get_current_admin(f"Bearer {token}")

        assert admin.admin_id == 3
        assert admin.username == "caixa"

    @pytest.mark.asyncio
    async def test_missing_header(self) -> None:
        with pytest.raises(HTTPException) as exc_info:
            await get_current_admin("")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_wrong_scheme(self) -> None:
        token = create_admin_token(3)

        with pytest.raises(HTTPException) as exc_info:
            await get_current_admin(f"Basic {token}")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_expired(self) -> None:
        token = create_admin_token(3, ttl_seconds=-1)

        with pytest.raises(HTTPException) as exc_info:
            await get_current_admin(f"Bearer {token}")

        assert exc_info.value.detail == "Token has expired"

    @pytest.mark.asyncio
    async def test_non_numeric_subject(self) -> None:
        settings = get_settings()
        now = int(time.time())
        token = jwt.encode(
            {"sub": "admin", "iat": now, "exp": now + 60},
            settings.admin_jwt_secret,
            algorithm=settings.admin_jwt_algorithm,
        )

        with pytest.raises(HTTPException) as exc_info:
            await get_current_admin(f"Bearer {token}")

        assert exc_info.value.status_code == 401
