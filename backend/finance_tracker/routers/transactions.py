"""Transactions router."""

from fastapi import APIRouter, Depends, Query

from finance_tracker.dependencies import get_current_user
from finance_tracker.schemas.transaction import TransactionListResponse, TransactionResponse
from finance_tracker.services import transaction_service


router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=TransactionListResponse)
async def list_transactions(
    category: str | None = Query(None, description="Category name, or 'All Categories'"),
    account: str | None = Query(None, description="Account name, or 'All Accounts'"),
    search: str | None = Query(None, description="Case-insensitive match on the name"),
    user: dict = Depends(get_current_user),
):
    """List transactions with optional filters."""
    rows = transaction_service.list_transactions(
        category=category,
        account=account,
        search=search,
    )
    return TransactionListResponse(
        items=[TransactionResponse(**row) for row in rows],
        total=len(rows),
    )


@router.get("/categories", response_model=list[str])
async def list_categories(user: dict = Depends(get_current_user)):
    """Categories available for filtering."""
    return transaction_service.list_categories()


@router.get("/accounts", response_model=list[str])
async def list_transaction_accounts(user: dict = Depends(get_current_user)):
    """Account names available for filtering."""
    return transaction_service.list_accounts()
