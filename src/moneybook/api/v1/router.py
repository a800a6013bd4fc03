from fastapi import APIRouter

from src.moneybook.api.v1 import auth, roles, tenants, transactions, users
from src.moneybook.core.tenancy import TenantRoutePolicy

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(tenants.router)
api_router.include_router(tenants.scoped_router)
api_router.include_router(roles.router)
api_router.include_router(transactions.router)


def build_tenant_route_policy() -> TenantRoutePolicy:
    """Minimum roles of every tenant-scoped route in the API."""
    policy = TenantRoutePolicy()
    for module in (tenants, roles, transactions):
        policy.register_many(module.TENANT_ROUTE_ROLES)
    return policy
