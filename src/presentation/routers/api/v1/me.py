"""Caller permission summary handler.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.services import summarize_access
from src.core.container import get_authorization_engine
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.access_schemas import PermissionSummaryResponse


async def get_my_permissions(
    request: Request,
    current_user: AuthenticatedUser,
    authorization: AuthorizationProtocol = Depends(get_authorization_engine),
) -> PermissionSummaryResponse | JSONResponse:
    """Describe what the caller may see and do.

    GET /api/v1/me/permissions → 200 OK

    Role and scopes are read from current data, not from token claims.
    A token whose user (or linked employee) no longer exists gets 401.

    Args:
        request: FastAPI request object.
        current_user: Authenticated user (from JWT).
        authorization: Authorization engine (injected).

    Returns:
        PermissionSummaryResponse, or JSONResponse with RFC 9457 error.
    """
    summary = await summarize_access(authorization, current_user.user_id)

    if summary is None:
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError(
                code=ApplicationErrorCode.UNAUTHORIZED,
                message="User not found",
            ),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return PermissionSummaryResponse.from_summary(summary)
