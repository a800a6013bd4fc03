"""Financial transaction - tenant-scoped."""

import datetime as dt
from decimal import Decimal
from uuid import UUID, uuid4

from sqlmodel import Field

from src.moneybook.models.base import utc_now
from src.moneybook.models.tenant.base import TenantScopedModel


class Transaction(TenantScopedModel, table=True):
    __tablename__ = "transactions"

    id: int | None = Field(default=None, primary_key=True)
    key: UUID = Field(default_factory=uuid4, unique=True, index=True)
    date: dt.date = Field(index=True)
    payee: str = Field(max_length=200)
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    memo: str | None = Field(default=None, max_length=1000)
    source: str | None = Field(default=None, max_length=200)
    external_id: str | None = Field(default=None, max_length=100)
    created_at: dt.datetime = Field(default_factory=utc_now)
    updated_at: dt.datetime = Field(default_factory=utc_now)
