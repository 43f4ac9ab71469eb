"""Dashboard router."""

from fastapi import APIRouter, Depends

from finance_tracker.database import Database, get_db
from finance_tracker.dependencies import get_current_user
from finance_tracker.schemas.dashboard import DashboardOverview
from finance_tracker.services.dashboard_service import build_overview


router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/overview", response_model=DashboardOverview)
async def dashboard_overview(
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
):
    """
    Dashboard overview.

    - `current_balance`: sum of the user's non-credit account balances
    - `monthly_income` / `monthly_expenses`: totals for the latest month
    - `spending_by_category`: expenses per category, largest first
    - `recent_transactions`: the five newest transactions
    """
    summary = db.get_account_book(user["id"]).summary()
    return build_overview(summary)
