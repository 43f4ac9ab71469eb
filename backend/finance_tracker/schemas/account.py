"""Linked account schemas."""

from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field


DEFAULT_LINKED_BALANCE = Decimal("1000.00")


class LinkedAccountRecord(BaseModel):
    """An account connected through the link flow."""

    id: str
    name: str
    type: str = "checking"
    institution: str
    balance: Decimal = DEFAULT_LINKED_BALANCE
    last_updated: date
    account_number: str = Field(..., description="Masked account number, e.g. ****1234")
    connected: bool = True


class AccountSummary(BaseModel):
    """Totals shown above the account list."""

    total_balance: Decimal
    deposit_account_count: int
    credit_debt: Decimal
    credit_account_count: int
    institution_count: int
