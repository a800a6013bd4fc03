"""Service layer - business logic and transaction control."""

from src.moneybook.services.auth_service import AuthService
from src.moneybook.services.claims_service import TenantClaimsIssuer
from src.moneybook.services.registration_service import RegistrationService
from src.moneybook.services.role_assignment_service import RoleAssignmentService
from src.moneybook.services.tenant_service import TenantService
from src.moneybook.services.transaction_service import TransactionNotFoundError, TransactionService
from src.moneybook.services.user_service import UserService

__all__ = [
    "AuthService",
    "RegistrationService",
    "RoleAssignmentService",
    "TenantClaimsIssuer",
    "TenantService",
    "TransactionNotFoundError",
    "TransactionService",
    "UserService",
]
