"""Transaction service - CRUD within the current tenant."""

from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.moneybook.core.exceptions import ResourceNotFoundError
from src.moneybook.models.base import utc_now
from src.moneybook.models.tenant import Transaction
from src.moneybook.repositories import TransactionRepository
from src.moneybook.schemas.transaction import TransactionEdit


class TransactionNotFoundError(ResourceNotFoundError):
    kind = "transaction_not_found"
    title = "Transaction not found"

    def __init__(self, key: UUID):
        self.key = key
        super().__init__(f"Transaction {key} not found", transaction_key=str(key))


class TransactionService:
    def __init__(self, transaction_repo: TransactionRepository, session: AsyncSession):
        self.transaction_repo = transaction_repo
        self.session = session

    async def list_transactions(
        self, from_date: date | None = None, to_date: date | None = None
    ) -> list[Transaction]:
        return await self.transaction_repo.list_all(from_date=from_date, to_date=to_date)

    async def get_transaction(self, key: UUID) -> Transaction:
        """Raises TransactionNotFoundError when the key is unknown within this tenant."""
        transaction = await self.transaction_repo.get_by_key(key)
        if transaction is None:
            raise TransactionNotFoundError(key)
        return transaction

    async def create_transaction(self, data: TransactionEdit) -> Transaction:
        transaction = self.transaction_repo.add(Transaction(**data.model_dump()))
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(transaction)
        return transaction

    async def update_transaction(self, key: UUID, data: TransactionEdit) -> Transaction:
        transaction = await self.get_transaction(key)
        try:
            for field, value in data.model_dump().items():
                setattr(transaction, field, value)
            transaction.updated_at = utc_now()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(transaction)
        return transaction

    async def delete_transaction(self, key: UUID) -> None:
        transaction = await self.get_transaction(key)
        try:
            await self.transaction_repo.delete(transaction)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
