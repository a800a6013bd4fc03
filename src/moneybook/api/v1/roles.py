"""Role assignment endpoints. Owner only."""

from uuid import UUID

from fastapi import HTTPException, status

from src.moneybook.api.dependencies import RoleAssignmentServiceDep, tenant_scoped_router
from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import User, UserTenantRoleAssignment
from src.moneybook.schemas.role_assignment import (
    RoleAssignmentCreate,
    RoleAssignmentRead,
    RoleAssignmentUpdate,
)

router = tenant_scoped_router(tags=["roles"])

TENANT_ROUTE_ROLES: dict[str, TenantRole] = {
    "roles:list": TenantRole.OWNER,
    "roles:assign": TenantRole.OWNER,
    "roles:change": TenantRole.OWNER,
    "roles:revoke": TenantRole.OWNER,
}


def _to_read(assignment: UserTenantRoleAssignment, user: User) -> RoleAssignmentRead:
    return RoleAssignmentRead(
        user_id=user.id,
        email=user.email,
        full_name=user.full_name,
        role=assignment.role_enum,
    )


@router.get("/roles", name="roles:list", response_model=list[RoleAssignmentRead])
async def list_roles(service: RoleAssignmentServiceDep) -> list[RoleAssignmentRead]:
    assignments = await service.list_assignments()
    return [_to_read(assignment, user) for assignment, user in assignments]


@router.post(
    "/roles",
    name="roles:assign",
    response_model=RoleAssignmentRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "No user with this email"},
        409: {"description": "User already has a role in this tenant"},
    },
)
async def assign_role(
    data: RoleAssignmentCreate, service: RoleAssignmentServiceDep
) -> RoleAssignmentRead:
    """Give an existing user a role in this tenant."""
    try:
        assignment, user = await service.assign_role(data.email, data.role)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return _to_read(assignment, user)


@router.put(
    "/roles/{user_id}",
    name="roles:change",
    response_model=RoleAssignmentRead,
    responses={
        404: {"description": "User has no role in this tenant"},
        409: {"description": "Would leave the tenant without an Owner"},
    },
)
async def change_role(
    user_id: UUID, data: RoleAssignmentUpdate, service: RoleAssignmentServiceDep
) -> RoleAssignmentRead:
    assignment, user = await service.change_role(user_id, data.role)
    return _to_read(assignment, user)


@router.delete(
    "/roles/{user_id}",
    name="roles:revoke",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        404: {"description": "User has no role in this tenant"},
        409: {"description": "Would leave the tenant without an Owner"},
    },
)
async def revoke_role(user_id: UUID, service: RoleAssignmentServiceDep) -> None:
    await service.revoke_role(user_id)
