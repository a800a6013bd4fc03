"""Request context management."""

from src.moneybook.api.context.tenant_context import (
    get_tenant_authorization,
    get_tenant_context_holder,
    set_tenant_authorization,
)

__all__ = [
    "get_tenant_authorization",
    "get_tenant_context_holder",
    "set_tenant_authorization",
]
