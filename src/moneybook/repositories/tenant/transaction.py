"""Repository for Transaction entity (tenant-scoped)."""

from datetime import date

from src.moneybook.models.tenant import Transaction
from src.moneybook.repositories.tenant.scoped import TenantScopedRepository


class TransactionRepository(TenantScopedRepository[Transaction]):
    model = Transaction

    async def list_all(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[Transaction]:
        """List the tenant's transactions, newest first.

        Args:
            from_date: Inclusive lower bound on the transaction date
            to_date: Inclusive upper bound on the transaction date
        """
        query = self._base_query()
        if from_date is not None:
            query = query.where(Transaction.date >= from_date)
        if to_date is not None:
            query = query.where(Transaction.date <= to_date)
        query = query.order_by(
            Transaction.date.desc(),  # type: ignore[attr-defined]
            Transaction.id.desc(),  # type: ignore[union-attr]
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
