from src.moneybook.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    RegisterResponse,
)
from src.moneybook.schemas.problem import FORBIDDEN_RESPONSE, ProblemResponse
from src.moneybook.schemas.role_assignment import (
    RoleAssignmentCreate,
    RoleAssignmentRead,
    RoleAssignmentUpdate,
)
from src.moneybook.schemas.tenant import TenantEdit, TenantRead, TenantRoleRead
from src.moneybook.schemas.transaction import TransactionEdit, TransactionRead
from src.moneybook.schemas.user import UserRead

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RefreshRequest",
    "RefreshResponse",
    "RegisterRequest",
    "RegisterResponse",
    # Errors
    "FORBIDDEN_RESPONSE",
    "ProblemResponse",
    # Role assignments
    "RoleAssignmentCreate",
    "RoleAssignmentRead",
    "RoleAssignmentUpdate",
    # Tenants
    "TenantEdit",
    "TenantRead",
    "TenantRoleRead",
    # Transactions
    "TransactionEdit",
    "TransactionRead",
    # Users
    "UserRead",
]
