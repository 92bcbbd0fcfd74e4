"""JWT token service (adapter).

Issues and validates HS256 access tokens with PyJWT.

Claims:
    sub: User id (string)
    role: Role string at issue time
    employee_id: Linked employee id at issue time
    iat / exp: Issued-at and expiry (epoch seconds)
    jti: Unique token id

Role and employee claims are informational. Authorization decisions
re-read current state through the authorization engine, so a demoted
user loses access on the next request even with an unexpired token.
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import jwt
from jwt.exceptions import InvalidTokenError

from src.core.result import Failure, Result, Success


class TokenError:
    """Token validation error constants."""

    INVALID_TOKEN = "Invalid or expired token"


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=2, role="Manager", employee_id=2
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 30) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes).
            expiration_minutes: Token lifetime in minutes (default: 30).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    def generate_access_token(self, user_id: int, role: str, employee_id: int) -> str:
        """Generate JWT access token.

        Args:
            user_id: User's unique identifier.
            role: Role string (e.g. "HR Admin").
            employee_id: Linked employee id.

        Returns:
            JWT access token string.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(user_id=1, role="Employee", employee_id=1)
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "role": role,
            "employee_id": employee_id,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid4()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        Signature and expiry are checked by PyJWT; ``sub`` is required.

        Args:
            token: JWT access token string to validate.

        Returns:
            Result with payload dict if valid, or error string if invalid.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
            return Success(value=payload)

        except InvalidTokenError:
            return Failure(error=TokenError.INVALID_TOKEN)
