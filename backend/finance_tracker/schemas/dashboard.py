"""Dashboard schemas."""

from decimal import Decimal
from pydantic import BaseModel

from finance_tracker.schemas.transaction import TransactionResponse


class CategorySpending(BaseModel):
    """Spending in one category for the month."""

    category: str
    amount: Decimal
    percentage: int


class DashboardOverview(BaseModel):
    """Overview cards, spending breakdown and recent activity."""

    current_balance: Decimal
    month: str
    monthly_income: Decimal
    monthly_expenses: Decimal
    spending_by_category: list[CategorySpending]
    recent_transactions: list[TransactionResponse]
