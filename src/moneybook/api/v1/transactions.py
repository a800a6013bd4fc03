"""Transaction endpoints - tenant-scoped CRUD.

Reads need Viewer, writes need Editor.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import Query, status

from src.moneybook.api.dependencies import TransactionServiceDep, tenant_scoped_router
from src.moneybook.models.enums import TenantRole
from src.moneybook.schemas.transaction import TransactionEdit, TransactionRead

router = tenant_scoped_router(tags=["transactions"])

TENANT_ROUTE_ROLES: dict[str, TenantRole] = {
    "transactions:list": TenantRole.VIEWER,
    "transactions:get": TenantRole.VIEWER,
    "transactions:create": TenantRole.EDITOR,
    "transactions:update": TenantRole.EDITOR,
    "transactions:delete": TenantRole.EDITOR,
}

_NOT_FOUND = {404: {"description": "Transaction not found in this tenant"}}


@router.get(
    "/transactions",
    name="transactions:list",
    response_model=list[TransactionRead],
    summary="List transactions",
)
async def list_transactions(
    service: TransactionServiceDep,
    from_date: Annotated[date | None, Query(description="Earliest date, inclusive")] = None,
    to_date: Annotated[date | None, Query(description="Latest date, inclusive")] = None,
) -> list[TransactionRead]:
    """List the tenant's transactions, newest first."""
    transactions = await service.list_transactions(from_date=from_date, to_date=to_date)
    return [TransactionRead.model_validate(t) for t in transactions]


@router.get(
    "/transactions/{transaction_key}",
    name="transactions:get",
    response_model=TransactionRead,
    responses=_NOT_FOUND,
)
async def get_transaction(transaction_key: UUID, service: TransactionServiceDep) -> TransactionRead:
    transaction = await service.get_transaction(transaction_key)
    return TransactionRead.model_validate(transaction)


@router.post(
    "/transactions",
    name="transactions:create",
    response_model=TransactionRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction(
    data: TransactionEdit, service: TransactionServiceDep
) -> TransactionRead:
    transaction = await service.create_transaction(data)
    return TransactionRead.model_validate(transaction)


@router.put(
    "/transactions/{transaction_key}",
    name="transactions:update",
    response_model=TransactionRead,
    responses=_NOT_FOUND,
)
async def update_transaction(
    transaction_key: UUID, data: TransactionEdit, service: TransactionServiceDep
) -> TransactionRead:
    transaction = await service.update_transaction(transaction_key, data)
    return TransactionRead.model_validate(transaction)


@router.delete(
    "/transactions/{transaction_key}",
    name="transactions:delete",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
)
async def delete_transaction(transaction_key: UUID, service: TransactionServiceDep) -> None:
    await service.delete_transaction(transaction_key)
