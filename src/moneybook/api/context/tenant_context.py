"""Per-request tenant state kept on ``request.state``.

The authorization dependency records its ``TenantAuthorization`` here and
context resolution reads it back. Nothing is stored at module level, so
concurrent requests never observe each other's tenant.
"""

from starlette.requests import Request

from src.moneybook.core.tenancy.context import TenantAuthorization, TenantContextHolder

_AUTHORIZATION_ATTR = "tenant_authorization"
_HOLDER_ATTR = "tenant_context_holder"


def set_tenant_authorization(request: Request, authorization: TenantAuthorization) -> None:
    setattr(request.state, _AUTHORIZATION_ATTR, authorization)


def get_tenant_authorization(request: Request) -> TenantAuthorization | None:
    return getattr(request.state, _AUTHORIZATION_ATTR, None)


def get_tenant_context_holder(request: Request) -> TenantContextHolder:
    """Return the request's context holder, creating an empty one on first use."""
    holder = getattr(request.state, _HOLDER_ATTR, None)
    if holder is None:
        holder = TenantContextHolder(path=request.url.path)
        setattr(request.state, _HOLDER_ATTR, holder)
    return holder
