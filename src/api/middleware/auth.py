"""Admin bearer token verification."""

import time
from enum import Enum
from typing import Any

import jwt

from src.core.config import get_settings
from src.schemas.auth import AdminTokenPayload


class AuthErrorCode(str, Enum):
    """Authentication error codes."""

    UNAUTHORIZED = "UNAUTHORIZED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"


class AuthError(Exception):
    """Authentication error with specific error code.

    Raised when token validation fails for any reason.
    The error code indicates the specific failure reason.
    """

    def __init__(self, message: str, code: AuthErrorCode) -> None:
        """Initialize authentication error.

        Args:
            message: Human-readable error description.
            code: Specific error code for programmatic handling.
        """
        self.message = message
        self.code = code
        super().__init__(message)


def create_admin_token(admin_id: int, username: str | None = None, ttl_seconds: int | None = None) -> str:
    """Issue a signed admin token.

    Args:
        admin_id: Admin identifier, stored in the sub claim.
        username: Admin login name.
        ttl_seconds: Lifetime; defaults to the configured number of hours.

    Returns:
        str: Encoded token.
    """
    settings = get_settings()
    if ttl_seconds is None:
        ttl_seconds = settings.admin_token_ttl_hours * 3600
    now = int(time.time())
    payload: dict[str, Any] = {
        "sub": str(admin_id),
        "usuario": username,
        "iat": now,
        "exp": now + ttl_seconds,
    }
    return jwt.encode(payload, settings.admin_jwt_secret, algorithm=settings.admin_jwt_algorithm)


def decode_admin_token(token: str) -> AdminTokenPayload:
    """Decode and validate an admin token.

    Validates the token signature, expiration, and structure.

    Args:
        token: The token string to decode.

    Returns:
        AdminTokenPayload: Validated token payload.

    Raises:
        AuthError: If token is invalid, expired, or has wrong signature.
    """
    settings = get_settings()
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.admin_jwt_secret,
            algorithms=[settings.admin_jwt_algorithm],
            options={
                "verify_signature": True,
                "verify_exp": True,
                "require": ["exp", "iat", "sub"],
            },
        )

        return AdminTokenPayload(
            sub=payload["sub"],
            usuario=payload.get("usuario"),
            exp=payload["exp"],
            iat=payload["iat"],
        )

    except jwt.ExpiredSignatureError as e:
        raise AuthError(
            "Token has expired",
            AuthErrorCode.TOKEN_EXPIRED,
        ) from e

    except jwt.InvalidSignatureError as e:
        raise AuthError(
            "Invalid token signature",
            AuthErrorCode.INVALID_SIGNATURE,
        ) from e

    except jwt.MissingRequiredClaimError as e:
        raise AuthError(
            f"Token missing required claim: {e}",
            AuthErrorCode.INVALID_TOKEN,
        ) from e

    except jwt.PyJWTError as e:
        raise AuthError(
            f"Invalid token: {e}",
            AuthErrorCode.INVALID_TOKEN,
        ) from e
