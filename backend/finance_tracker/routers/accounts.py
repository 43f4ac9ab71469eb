"""Linked accounts router."""

from fastapi import APIRouter, Depends

from finance_tracker.database import Database, get_db
from finance_tracker.dependencies import get_current_user
from finance_tracker.schemas.account import AccountSummary, LinkedAccountRecord
from finance_tracker.schemas.common import SuccessResponse
from finance_tracker.schemas.notification import NotificationLevel
from finance_tracker.services.notifier import Notifier, get_notifier, notify_safely


router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get("", response_model=list[LinkedAccountRecord])
async def list_accounts(
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
):
    """List the current user's linked accounts."""
    return db.get_account_book(user["id"]).list_accounts()


@router.get("/summary", response_model=AccountSummary)
async def account_summary(
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
):
    """
    Dashboard totals.

    - `total_balance`: sum of all non-credit balances
    - `credit_debt`: absolute sum of credit card balances
    - `institution_count`: distinct institutions linked
    """
    return db.get_account_book(user["id"]).summary()


@router.delete("/{account_id}", response_model=SuccessResponse)
async def disconnect_account(
    account_id: str,
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Disconnect an account and remove it from the dashboard."""
    account = db.get_account_book(user["id"]).disconnect(account_id)

    notify_safely(
        notifier,
        user["id"],
        NotificationLevel.INFO,
        f"{account.name} disconnected",
        "The account has been removed from your dashboard",
    )

    return SuccessResponse(
        message=f"{account.name} disconnected",
        data={"id": account.id},
    )


@router.post("/{account_id}/refresh", response_model=LinkedAccountRecord)
async def refresh_account(
    account_id: str,
    user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Mark an account as refreshed today."""
    account = db.get_account_book(user["id"]).refresh(account_id)

    notify_safely(
        notifier,
        user["id"],
        NotificationLevel.SUCCESS,
        f"{account.name} refreshed",
        "Updated account information",
    )

    return account
