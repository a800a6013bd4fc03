"""Tenant authorization and tenant context dependencies.

Every route under ``/tenant/{tenant_key}`` runs two stages before its
handler, in this order:

1. ``authorize_tenant_request`` decides from the caller's claims (and, by
   default, their live role assignment) whether they hold at least the
   route's minimum role in the named tenant.
2. ``resolve_tenant_context`` turns the recorded decision into the
   immutable ``TenantContext`` that services receive as ``CurrentTenant``.

Use ``tenant_scoped_router`` to build routers so both stages are attached.
"""

from collections.abc import Callable, Iterable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Request
from fastapi.dependencies.models import Dependant
from starlette.routing import BaseRoute

from src.moneybook.api.context import (
    get_tenant_authorization,
    get_tenant_context_holder,
    set_tenant_authorization,
)
from src.moneybook.api.dependencies.auth import CurrentPrincipal
from src.moneybook.api.dependencies.repositories import RoleAssignmentRepo, TenantRepo
from src.moneybook.core.config import get_settings
from src.moneybook.core.logging import bind_tenant_context, get_logger
from src.moneybook.core.tenancy import (
    TenantAccessDeniedError,
    TenantAuthorization,
    TenantContext,
    TenantContextNotSetError,
    TenantNotFoundError,
    TenantRouteNotDeclaredError,
    TenantRoutePolicy,
    decide_tenant_access,
    is_tenant_scoped_path,
)
from src.moneybook.schemas.problem import FORBIDDEN_RESPONSE

logger = get_logger(__name__)


def get_tenant_route_policy(request: Request) -> TenantRoutePolicy | None:
    return getattr(request.app.state, "tenant_route_policy", None)


async def authorize_tenant_request(
    request: Request,
    principal: CurrentPrincipal,
    role_repo: RoleAssignmentRepo,
    tenant_key: Annotated[str, Path(description="Public key of the tenant")],
) -> TenantAuthorization:
    """Allow the request only if the caller holds at least the route's minimum role.

    Raises:
        TenantRouteNotDeclaredError: The matched route has no minimum role.
        TenantAccessDeniedError: The caller lacks a sufficient role, or the
            tenant does not exist. Both look the same to the client.
    """
    route = request.scope.get("route")
    route_name = getattr(route, "name", None)
    policy = get_tenant_route_policy(request)
    minimum_role = policy.minimum_role_for(route_name) if policy is not None else None
    if minimum_role is None:
        raise TenantRouteNotDeclaredError(route_name)

    authorization = decide_tenant_access(principal, tenant_key, minimum_role)

    if get_settings().tenant_authz_live_check:
        live_role = await role_repo.get_live_role(principal.user_id, authorization.tenant_key)
        if live_role is None:
            raise TenantAccessDeniedError(authorization.tenant_key, reason="no live role assignment")
        if not live_role.satisfies(minimum_role):
            raise TenantAccessDeniedError(
                authorization.tenant_key,
                reason=f"live role {live_role.value} below required {minimum_role.value}",
            )
        authorization = TenantAuthorization(tenant_key=authorization.tenant_key, role=live_role)

    logger.debug(
        "Tenant access granted",
        route=route_name,
        tenant_key=str(authorization.tenant_key),
        role=authorization.role.value,
        minimum_role=minimum_role.value,
    )
    set_tenant_authorization(request, authorization)
    return authorization


async def resolve_tenant_context(request: Request, tenant_repo: TenantRepo) -> TenantContext:
    """Build the request's tenant context from the recorded authorization.

    Raises:
        TenantContextNotSetError: No authorization was recorded for this
            request, meaning the route skipped ``authorize_tenant_request``.
        TenantNotFoundError: The tenant disappeared after authorization.
    """
    holder = get_tenant_context_holder(request)
    if holder.is_set:
        return holder.current

    authorization = get_tenant_authorization(request)
    if authorization is None:
        raise TenantContextNotSetError(request.url.path)

    tenant = await tenant_repo.get_by_key(authorization.tenant_key)
    if tenant is None:
        raise TenantNotFoundError(authorization.tenant_key)

    context = TenantContext(
        tenant_id=tenant.id,  # type: ignore[arg-type]
        tenant_key=tenant.key,
        tenant_name=tenant.name,
        role=authorization.role,
    )
    holder.set(context)
    bind_tenant_context(context.tenant_key, context.role.value)
    return context


CurrentTenant = Annotated[TenantContext, Depends(resolve_tenant_context)]


def _dependency_calls(dependant: Dependant) -> list[Callable[..., Any]]:
    calls: list[Callable[..., Any]] = []
    pending = list(dependant.dependencies)
    while pending:
        sub = pending.pop()
        if sub.call is not None:
            calls.append(sub.call)
        pending.extend(sub.dependencies)
    return calls


def runs_tenant_pipeline(route: BaseRoute) -> bool:
    """Whether the route resolves both tenancy stages before its handler."""
    dependant = getattr(route, "dependant", None)
    if dependant is None:
        return False
    calls = _dependency_calls(dependant)
    return authorize_tenant_request in calls and resolve_tenant_context in calls


def unguarded_tenant_routes(routes: Iterable[BaseRoute]) -> list[str]:
    """Names of `/tenant/{tenant_key}` routes that skip either tenancy stage."""
    return [
        getattr(route, "name", None) or getattr(route, "path", "")
        for route in routes
        if is_tenant_scoped_path(getattr(route, "path", "")) and not runs_tenant_pipeline(route)
    ]


async def require_tenant_pipeline(request: Request) -> None:
    """App-wide guard: a tenant-scoped route missing a tenancy stage never runs.

    Catches routes added after startup, which the startup check cannot see.
    """
    route = request.scope.get("route")
    if route is None or not is_tenant_scoped_path(getattr(route, "path", "")):
        return
    if not runs_tenant_pipeline(route):
        raise TenantContextNotSetError(request.url.path)


def tenant_scoped_router(**kwargs: Any) -> APIRouter:
    """Router for ``/tenant/{tenant_key}`` routes with both tenancy stages attached.

    Each route must have a ``name`` registered in the tenant route policy.
    """
    responses = {**FORBIDDEN_RESPONSE, **kwargs.pop("responses", {})}
    return APIRouter(
        prefix="/tenant/{tenant_key}",
        dependencies=[Depends(authorize_tenant_request), Depends(resolve_tenant_context)],
        responses=responses,
        **kwargs,
    )
