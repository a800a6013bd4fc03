"""Transaction schemas for API request/response."""

import datetime as dt
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class TransactionEdit(BaseModel):
    """Schema for creating or updating a transaction."""

    date: dt.date
    payee: str = Field(min_length=1, max_length=200)
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    memo: str | None = Field(default=None, max_length=1000)
    source: str | None = Field(default=None, max_length=200)
    external_id: str | None = Field(default=None, max_length=100)

    @field_validator("payee")
    @classmethod
    def validate_payee(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Payee cannot be empty or whitespace only")
        return v

    @field_validator("memo", "source", "external_id")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v


class TransactionRead(BaseModel):
    """Schema for reading a transaction. Internal ids are never exposed."""

    key: UUID
    date: dt.date
    payee: str
    amount: Decimal
    memo: str | None
    source: str | None
    external_id: str | None
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = {"from_attributes": True}
