"""Tenant endpoints.

``router`` holds the user-level routes (create, list mine); ``scoped_router``
holds routes on one tenant and goes through tenant authorization.
"""

from fastapi import APIRouter, status

from src.moneybook.api.dependencies import (
    CurrentTenant,
    CurrentUser,
    TenantServiceDep,
    tenant_scoped_router,
)
from src.moneybook.models.enums import TenantRole
from src.moneybook.schemas.tenant import TenantEdit, TenantRead, TenantRoleRead

router = APIRouter(prefix="/tenant", tags=["tenants"])
scoped_router = tenant_scoped_router(tags=["tenants"])

TENANT_ROUTE_ROLES: dict[str, TenantRole] = {
    "tenants:get": TenantRole.VIEWER,
    "tenants:update": TenantRole.OWNER,
    "tenants:delete": TenantRole.OWNER,
}


@router.post(
    "",
    response_model=TenantRoleRead,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"description": "Not authenticated"}},
)
async def create_tenant(
    data: TenantEdit,
    current_user: CurrentUser,
    service: TenantServiceDep,
) -> TenantRoleRead:
    """Create a tenant. The caller becomes its Owner.

    The new tenant appears in the caller's claims from their next token refresh.
    """
    tenant = await service.create_tenant(current_user.id, data)
    return TenantRoleRead(
        **TenantRead.model_validate(tenant).model_dump(),
        role=TenantRole.OWNER,
    )


@router.get(
    "",
    response_model=list[TenantRoleRead],
    responses={401: {"description": "Not authenticated"}},
)
async def list_my_tenants(current_user: CurrentUser, service: TenantServiceDep) -> list[TenantRoleRead]:
    """Tenants the caller belongs to, with the caller's current role in each."""
    memberships = await service.list_user_tenants(current_user.id)
    return [
        TenantRoleRead(**TenantRead.model_validate(tenant).model_dump(), role=role)
        for tenant, role in memberships
    ]


@scoped_router.get("", name="tenants:get", response_model=TenantRoleRead)
async def get_tenant(tenant: CurrentTenant, service: TenantServiceDep) -> TenantRoleRead:
    found = await service.get_tenant(tenant)
    return TenantRoleRead(**TenantRead.model_validate(found).model_dump(), role=tenant.role)


@scoped_router.put("", name="tenants:update", response_model=TenantRoleRead)
async def update_tenant(
    data: TenantEdit,
    tenant: CurrentTenant,
    service: TenantServiceDep,
) -> TenantRoleRead:
    updated = await service.update_tenant(tenant, data)
    return TenantRoleRead(**TenantRead.model_validate(updated).model_dump(), role=tenant.role)


@scoped_router.delete("", name="tenants:delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(tenant: CurrentTenant, service: TenantServiceDep) -> None:
    """Delete the tenant with all its role assignments and data. Cannot be undone."""
    await service.delete_tenant(tenant)
