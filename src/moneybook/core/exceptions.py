"""Exception handlers with request_id in responses.

Every error body has the shape
``{"kind", "title", "status", "detail", "instance", "request_id"}``.
"""

from http import HTTPStatus
from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.moneybook.core.logging import get_logger
from src.moneybook.core.tenancy.exceptions import (
    DuplicateRoleAssignmentError,
    LastOwnerError,
    RoleAssignmentNotFoundError,
    TenancyError,
    TenantAccessDeniedError,
    TenantContextNotSetError,
    TenantNotFoundError,
    TenantRouteNotDeclaredError,
)

logger = get_logger(__name__)

FORBIDDEN_TITLE = "Access denied"
FORBIDDEN_DETAIL = "You do not have access to this tenant."


class ResourceNotFoundError(Exception):
    """A tenant-scoped resource does not exist within the current tenant."""

    kind = "not_found"
    title = "Resource not found"

    def __init__(self, message: str, **extras: Any):
        self.extras = extras
        super().__init__(message)


def _status_kind(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase.lower().replace(" ", "_").replace("-", "_")
    except ValueError:
        return "error"


def _status_title(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def problem_response(
    request: Request,
    status_code: int,
    kind: str,
    title: str,
    detail: Any,
    headers: dict[str, str] | None = None,
    **extras: Any,
) -> JSONResponse:
    content = {
        "kind": kind,
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
        "request_id": correlation_id.get(),
        **extras,
    }
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def tenancy_error_response(request: Request, exc: TenancyError) -> JSONResponse:
    """Translate a tenancy error into its HTTP response.

    Both 403 kinds share one body so that a caller cannot tell a tenant that
    does not exist from one they may not see.
    """
    if isinstance(exc, (TenantNotFoundError, TenantAccessDeniedError)):
        logger.warning(
            "Tenant access rejected",
            reason=str(exc),
            path=request.url.path,
        )
        return problem_response(
            request,
            403,
            kind="forbidden",
            title=FORBIDDEN_TITLE,
            detail=FORBIDDEN_DETAIL,
        )

    if isinstance(exc, RoleAssignmentNotFoundError):
        return problem_response(
            request,
            404,
            kind="role_assignment_not_found",
            title="Role assignment not found",
            detail="The user has no role in this tenant.",
            user_id=str(exc.user_id),
        )

    if isinstance(exc, DuplicateRoleAssignmentError):
        return problem_response(
            request,
            409,
            kind="duplicate_role_assignment",
            title="Role assignment already exists",
            detail="The user already has a role in this tenant.",
            user_id=str(exc.user_id),
        )

    if isinstance(exc, LastOwnerError):
        return problem_response(
            request,
            409,
            kind="last_owner",
            title="Tenant needs an owner",
            detail="A tenant must keep at least one Owner.",
            user_id=str(exc.user_id),
        )

    if isinstance(exc, (TenantContextNotSetError, TenantRouteNotDeclaredError)):
        logger.error(
            "Tenant-scoped route is misconfigured",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            request_id=correlation_id.get(),
        )
    else:
        logger.error(
            "Unmapped tenancy error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
    return problem_response(
        request,
        500,
        kind="internal_error",
        title="Internal server error",
        detail="Internal server error",
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return problem_response(
            request,
            exc.status_code,
            kind=_status_kind(exc.status_code),
            title=_status_title(exc.status_code),
            detail=exc.detail,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(TenancyError)
    async def tenancy_exception_handler(request: Request, exc: TenancyError) -> JSONResponse:
        return tenancy_error_response(request, exc)

    @app.exception_handler(ResourceNotFoundError)
    async def not_found_exception_handler(
        request: Request, exc: ResourceNotFoundError
    ) -> JSONResponse:
        return problem_response(
            request,
            404,
            kind=exc.kind,
            title=exc.title,
            detail=str(exc),
            **exc.extras,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=correlation_id.get(),
            path=request.url.path,
        )
        return problem_response(
            request,
            500,
            kind="internal_error",
            title="Internal server error",
            detail="Internal server error",
        )
