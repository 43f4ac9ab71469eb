"""Transaction schemas."""

from datetime import date
from decimal import Decimal
from pydantic import BaseModel


class TransactionResponse(BaseModel):
    """Single transaction."""

    id: int
    name: str
    amount: Decimal
    date: date
    category: str
    account: str


class TransactionListResponse(BaseModel):
    """Filtered list of transactions."""

    items: list[TransactionResponse]
    total: int
