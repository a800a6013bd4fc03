"""Request-scoped tenant context."""

from dataclasses import dataclass
from uuid import UUID

from src.moneybook.core.tenancy.exceptions import TenantContextNotSetError
from src.moneybook.models.enums import TenantRole


@dataclass(frozen=True)
class TenantAuthorization:
    """Outcome of a successful authorization decision.

    Handed from the authorization step to context resolution through the
    request state; nothing else reads it.
    """

    tenant_key: UUID
    role: TenantRole


@dataclass(frozen=True)
class TenantContext:
    """The tenant a request operates on and the caller's role within it."""

    tenant_id: int
    tenant_key: UUID
    tenant_name: str
    role: TenantRole


class TenantContextHolder:
    """Holds the tenant context for exactly one request.

    Set once after authorization. Reading it before it is set raises
    ``TenantContextNotSetError`` instead of returning an empty value.
    """

    __slots__ = ("_context", "_path")

    def __init__(self, path: str | None = None) -> None:
        self._context: TenantContext | None = None
        self._path = path

    @property
    def is_set(self) -> bool:
        return self._context is not None

    @property
    def current(self) -> TenantContext:
        if self._context is None:
            raise TenantContextNotSetError(self._path)
        return self._context

    def set(self, context: TenantContext) -> None:
        if self._context is not None:
            raise RuntimeError("Tenant context is already set for this request")
        self._context = context
