"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating bearer tokens.

The token identifies the caller (``sub``). Role and employee claims are
carried for convenience only; authorization re-reads current role and
manager data through the authorization engine on every request.

Usage:
    @router.get("/protected")
    async def protected_route(current_user: AuthenticatedUser):
        return {"user_id": current_user.user_id}
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.infrastructure.security.jwt_service import JWTService

# HTTP Bearer token extractor
# auto_error=True rejects requests without a bearer token
bearer_scheme = HTTPBearer(auto_error=True)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller identity from a validated JWT.

    Attributes:
        user_id: User's unique identifier (from 'sub').
        role: Role claim at token issue time (informational).
        employee_id: Employee claim at token issue time (informational).
        token_jti: JWT unique identifier.
    """

    user_id: int
    role: str | None = None
    employee_id: int | None = None
    token_jti: str | None = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    token_service: Annotated[JWTService, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from JWT token.

    Args:
        credentials: Bearer token from Authorization header.
        token_service: JWT token service (injected).

    Returns:
        CurrentUser with identity from a valid JWT.

    Raises:
        HTTPException 401: If token is invalid, expired, or its payload is
            malformed (e.g. non-integer ``sub``).
    """
    result = token_service.validate_access_token(credentials.credentials)

    match result:
        case Success(value=payload):
            try:
                employee_raw = payload.get("employee_id")
                role_raw = payload.get("role")
                jti_raw = payload.get("jti")
                return CurrentUser(
                    user_id=int(payload["sub"]),
                    role=str(role_raw) if role_raw is not None else None,
                    employee_id=int(employee_raw) if employee_raw is not None else None,
                    token_jti=str(jti_raw) if jti_raw else None,
                )
            except (KeyError, TypeError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e

        case Failure(error=error):
            raise _unauthorized(error)


# Type alias for authenticated user dependency
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
