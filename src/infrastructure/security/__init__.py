"""Security infrastructure (access tokens)."""

from src.infrastructure.security.jwt_service import JWTService, TokenError

__all__ = ["JWTService", "TokenError"]
